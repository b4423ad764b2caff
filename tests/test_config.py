"""
Unit Tests for EngineConfig
"""

from pathlib import Path

import pytest

from kamisado_engine.board import Player
from kamisado_engine.config import EngineConfig


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.depth == 3
        assert config.human_player is Player.WHITE
        assert config.engine_player is Player.BLACK
        assert config.use_color
        assert not config.debug
        assert isinstance(config.log_file, Path)

    def test_log_file_coerced_to_path(self, tmp_path):
        config = EngineConfig(log_file=str(tmp_path / "x.log"))
        assert config.log_file == tmp_path / "x.log"

    def test_player_from_string(self):
        config = EngineConfig(human_player="Black")
        assert config.human_player is Player.BLACK
        assert config.engine_player is Player.WHITE

    def test_unknown_player(self):
        with pytest.raises(ValueError):
            EngineConfig(human_player="red")

    @pytest.mark.parametrize("depth", [0, -2, 1.5])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValueError):
            EngineConfig(depth=depth)

    def test_repr(self):
        assert "depth=3" in repr(EngineConfig())
