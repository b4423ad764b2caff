"""
Console Module

Terminal front-end for playing against the engine: board rendering, input
parsing and the human-vs-engine loop. Built only on the rules façade and the
search; nothing in the core depends on it.

Usage:
    python -m kamisado_engine.console 3
"""

from kamisado_engine.console.interface import ConsoleGame, parse_squares, setup_logger
from kamisado_engine.console.render import render_board

__all__ = ['ConsoleGame', 'parse_squares', 'render_board', 'setup_logger']
