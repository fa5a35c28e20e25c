"""Tunables for the orbit camera controls."""
import math
import os
from dataclasses import dataclass

from viz_input import MouseButton


@dataclass(frozen=True)
class ControlConfig:
    # gesture bindings
    orbit_button: MouseButton = MouseButton.RIGHT
    pan_button: MouseButton = MouseButton.MIDDLE

    # orbit / pan
    orbit_sensitivity: float = 0.005
    pan_speed: float = 0.05
    pitch_limit: float = 1.5  # just under 90 degrees

    # lens zoom
    zoom_speed: float = 0.05
    fov_min: float = 0.1
    fov_max: float = math.pi / 2.0

    def __post_init__(self):
        if self.pitch_limit <= 0.0:
            raise ValueError(f"pitch_limit must be positive, got {self.pitch_limit}")
        if self.fov_min <= 0.0 or self.fov_min > self.fov_max:
            raise ValueError(f"invalid fov range [{self.fov_min}, {self.fov_max}]")

    @classmethod
    def from_env(cls, environ=None):
        """
        Build a config from ORBIT_VIEWER_* environment variables.
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        for field_name in ("orbit_button", "pan_button"):
            raw = env.get("ORBIT_VIEWER_" + field_name.upper())
            if raw:
                kwargs[field_name] = MouseButton.from_name(raw)

        for field_name in ("orbit_sensitivity", "pan_speed", "pitch_limit",
                           "zoom_speed", "fov_min", "fov_max"):
            raw = env.get("ORBIT_VIEWER_" + field_name.upper())
            if raw:
                try:
                    kwargs[field_name] = float(raw)
                except ValueError:
                    raise ValueError(f"ORBIT_VIEWER_{field_name.upper()} is not a number: {raw!r}") from None

        return cls(**kwargs)
