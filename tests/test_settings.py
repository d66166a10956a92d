import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pong.settings import PongConfig


class TestDefaults:

    def test_playfield_edges(self):
        cfg = PongConfig()
        assert (cfg.left, cfg.right) == (-350.0, 350.0)
        assert (cfg.top, cfg.bottom) == (200.0, -250.0)
        assert (cfg.left_pad_x, cfg.right_pad_x) == (-330.0, 330.0)
        assert cfg.ball_radius == 16.0

    def test_ramp_constants(self):
        cfg = PongConfig()
        assert cfg.ramp_steps == 450.0
        assert cfg.pad_speed_max == 20.0
        assert cfg.pad_speed_increment == pytest.approx(10.0 / 450.0)

    def test_no_ramp_when_max_equals_initial(self):
        cfg = PongConfig(ball_speed_max=450.0)
        assert cfg.pad_speed_increment == 0.0


class TestValidation:

    @pytest.mark.parametrize("field", ["frame_width", "frame_height", "ball_size",
                                       "ball_speed_initial", "pad_height", "pad_speed_initial"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            PongConfig(**{field: 0})

    def test_max_below_initial(self):
        with pytest.raises(ValueError):
            PongConfig(ball_speed_max=100.0)

    def test_paddle_taller_than_field(self):
        with pytest.raises(ValueError):
            PongConfig(pad_height=500.0)

    def test_paddle_speed_too_fast(self):
        with pytest.raises(ValueError):
            PongConfig(pad_speed_initial=300.0)

    def test_reset_range_order(self):
        with pytest.raises(ValueError):
            PongConfig(reset_x_range=(10.0, -10.0))
