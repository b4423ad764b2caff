"""
Utilities Module

Self-play tooling for comparing search settings.

Key Components:
    - play_game: One engine-vs-engine game from the starting position
    - run_match: A series of games with summary counts
"""

from kamisado_engine.utils.selfplay import GameRecord, play_game, run_match

__all__ = [
    'GameRecord',
    'play_game',
    'run_match',
]
