import math

import pytest

from viz_config import ControlConfig
from viz_input import MouseButton


class TestDefaults:
    def test_values(self):
        cfg = ControlConfig()
        assert cfg.orbit_button is MouseButton.RIGHT
        assert cfg.pan_button is MouseButton.MIDDLE
        assert cfg.orbit_sensitivity == 0.005
        assert cfg.pan_speed == 0.05
        assert cfg.pitch_limit == 1.5
        assert cfg.zoom_speed == 0.05
        assert cfg.fov_min == 0.1
        assert cfg.fov_max == math.pi / 2.0


class TestValidation:
    def test_inverted_fov_range(self):
        with pytest.raises(ValueError):
            ControlConfig(fov_min=1.0, fov_max=0.5)

    def test_non_positive_pitch_limit(self):
        with pytest.raises(ValueError):
            ControlConfig(pitch_limit=0.0)


class TestFromEnv:
    def test_empty_env_gives_defaults(self):
        assert ControlConfig.from_env({}) == ControlConfig()

    def test_overrides(self):
        cfg = ControlConfig.from_env({
            "ORBIT_VIEWER_ORBIT_BUTTON": "left",
            "ORBIT_VIEWER_PAN_BUTTON": "right",
            "ORBIT_VIEWER_PAN_SPEED": "0.1",
        })
        assert cfg.orbit_button is MouseButton.LEFT
        assert cfg.pan_button is MouseButton.RIGHT
        assert cfg.pan_speed == 0.1

    def test_bad_number(self):
        with pytest.raises(ValueError):
            ControlConfig.from_env({"ORBIT_VIEWER_ZOOM_SPEED": "fast"})

    def test_bad_button(self):
        with pytest.raises(ValueError):
            ControlConfig.from_env({"ORBIT_VIEWER_ORBIT_BUTTON": "nose"})
