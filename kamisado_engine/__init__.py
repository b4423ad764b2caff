"""
Kamisado Engine

Rules engine and negamax search for Kamisado, the two-player race game on an
8x8 board of colored cells where the color you land on decides which piece
your opponent must move next.

## Architecture

The engine is organized into several key modules:

1. **board**: Board layout and game state
   - Fixed 8x8 color layout (Latin square)
   - GameState: board grid + per-player piece locations, cloneable

2. **rules**: Move generation and rules façade
   - possible_moves: three forward rays, no jumps, no captures
   - is_legal_move / is_blocked / is_winning / apply_move
   - GameSession: forced colors, skipped turns, deadlocks

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - ChainEvaluator: win-in-one threats and opponent flexibility

4. **search**: Negamax search with forced passes
   - find_best_move: destination for the forced piece

5. **console**: Terminal front-end for human-vs-engine games

6. **utils**: Engine self-play

## Quick Start

### As a Python Library

```python
from kamisado_engine.board import Color, GameState, Player
from kamisado_engine.rules import apply_move, next_forced_color
from kamisado_engine.search import find_best_move

state = GameState.initial()
apply_move(state, Player.WHITE, Color.BROWN, (4, 0))
forced = next_forced_color((4, 0))
reply = find_best_move(state, Player.BLACK, forced, depth=3)
```

### From a Terminal

```bash
python -m kamisado_engine.console 3
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from kamisado_engine.board import Color, GameState, Player
from kamisado_engine.evaluation import ChainEvaluator, Evaluator
from kamisado_engine.rules import apply_move, is_blocked, is_legal_move, is_winning
from kamisado_engine.search import find_best_move

__all__ = [
    'Color',
    'GameState',
    'Player',
    'Evaluator',
    'ChainEvaluator',
    'apply_move',
    'is_blocked',
    'is_legal_move',
    'is_winning',
    'find_best_move',
]
