"""
Engine configuration for the console front-end and self-play tools.
"""

from dataclasses import dataclass
from pathlib import Path

from kamisado_engine.board.layout import Player


@dataclass
class EngineConfig:
    """Configuration for a game against the engine.

    All settings of the console front-end live here so a game can be
    reproduced from one object.
    """

    depth: int = 3
    """Fixed negamax search depth. Cost grows exponentially with it."""

    human_player: Player = Player.WHITE
    """Side played by the human (White moves first)"""

    use_color: bool = True
    """Render cells with ANSI background colors"""

    log_file: Path = Path.home() / ".kamisado" / "engine.log"
    """File receiving the engine log"""

    debug: bool = False
    """Log at DEBUG level (per-move search scores)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_file = Path(self.log_file)

        if isinstance(self.human_player, str):
            try:
                self.human_player = Player[self.human_player.upper()]
            except KeyError:
                raise ValueError(
                    f"human_player should be 'white' or 'black', got {self.human_player!r}"
                ) from None

        if not isinstance(self.depth, int) or self.depth < 1:
            raise ValueError(f"depth must be a positive integer, got {self.depth!r}")

    @property
    def engine_player(self) -> Player:
        return self.human_player.opponent()

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(depth={self.depth}, human={self.human_player.name}, "
            f"color={self.use_color}, log={self.log_file})"
        )
