"""
Main entry point for playing Kamisado against the engine.

Usage:
    python -m kamisado_engine.console [depth] [--black] [--no-color] [--debug]
"""

import argparse
from pathlib import Path

from kamisado_engine.board.layout import Player
from kamisado_engine.config import EngineConfig
from kamisado_engine.console.interface import ConsoleGame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kamisado",
        description="Play Kamisado against a negamax engine",
    )
    parser.add_argument(
        "depth",
        type=int,
        nargs="?",
        default=3,
        help="Search depth (default: 3)",
    )
    parser.add_argument(
        "--black",
        action="store_true",
        help="Play Black (the engine opens)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log search details",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file (default: ~/.kamisado/engine.log)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    options = dict(
        depth=args.depth,
        human_player=Player.BLACK if args.black else Player.WHITE,
        use_color=not args.no_color,
        debug=args.debug,
    )
    if args.log_file is not None:
        options["log_file"] = args.log_file

    try:
        config = EngineConfig(**options)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    ConsoleGame(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
