#!/usr/bin/env python3
"""
Self-Play Match Runner

Plays the engine against itself with two search depths, swapping sides
every game, and prints a summary.

Usage:
    python tools/run_selfplay.py [--games 4] [--depths 2,3] [--verbose]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from kamisado_engine.utils.selfplay import run_match


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_selfplay(games: int, depth_a: int, depth_b: int, max_plies: int, verbose: bool = False):
    """
    Run a self-play match and print the summary.

    Args:
        games: Number of games
        depth_a: Depth of engine A (White in the first game)
        depth_b: Depth of engine B
        max_plies: Ply limit per game
        verbose: Show progress and per-game results
    """
    print("=" * 60)
    print("SELF-PLAY - Kamisado Engine")
    print("=" * 60)
    print(f"Engine A: depth {depth_a}")
    print(f"Engine B: depth {depth_b}")
    print(f"Games: {games} (sides alternate)")
    print("=" * 60)

    start_time = time.time()
    result = run_match(games, depth_a, depth_b, max_plies=max_plies, verbose=verbose)
    total_time = time.time() - start_time

    if verbose:
        for index, record in enumerate(result['results'], start=1):
            winner = record.winner.name if record.winner else "-"
            print(f"  Game {index}: winner={winner} plies={record.plies} "
                  f"passes={record.passes}{' (deadlock)' if record.deadlocked else ''}")

    print(f"\nEngine A wins: {result['a_wins']}/{result['games']}")
    print(f"Engine B wins: {result['b_wins']}/{result['games']}")
    print(f"White wins: {result['white_wins']}  Black wins: {result['black_wins']}")
    print(f"Unfinished: {result['unfinished']}  Deadlocks: {result['deadlocks']}")
    print(f"Average length: {result['average_plies']:.1f} plies")
    print(f"Total time: {format_time(total_time)}")

    return result


def main():
    parser = argparse.ArgumentParser(
        description="Play the engine against itself at two depths"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=2,
        help="Number of games (default: 2)"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="2,3",
        help="Depths of engine A and engine B, comma-separated (default: 2,3)"
    )
    parser.add_argument(
        "--max-plies",
        type=int,
        default=200,
        help="Ply limit per game (default: 200)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show progress and per-game results"
    )

    args = parser.parse_args()

    try:
        depth_a, depth_b = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be two comma-separated integers")
        sys.exit(1)

    try:
        run_selfplay(args.games, depth_a, depth_b, args.max_plies, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nSelf-play interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
