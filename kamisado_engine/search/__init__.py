"""
Search Module

This module implements the engine's adversarial search: depth-limited
negamax in which a side whose forced piece is blocked passes its turn.

Key Components:
    - negamax: Recursive node evaluation
    - classify_node / NodeKind: Terminal, horizon, move and pass nodes
    - analyse: Root search returning scores for every root move
    - find_best_move: Root search returning the chosen destination
"""

from kamisado_engine.search.negamax import (
    NodeKind,
    SearchResult,
    analyse,
    classify_node,
    find_best_move,
    negamax,
)

__all__ = ['negamax', 'find_best_move', 'analyse', 'classify_node', 'NodeKind', 'SearchResult']
