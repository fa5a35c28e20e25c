"""Shared fixtures. Nothing here needs a window or a GL context."""
import pytest

from viz_camera import CameraProjection, OrbitCameraState
from viz_config import ControlConfig
from viz_input import FrameInput, MouseButton
from viz_transform import Transform
from viz_world import CameraEntity, World


def make_frame(*buttons, dx=0.0, dy=0.0, scroll=0.0, elapsed=0.0):
    return FrameInput(
        pressed_buttons=frozenset(buttons),
        pointer_delta=(dx, dy),
        scroll_delta=scroll,
        elapsed_seconds=elapsed,
    )


@pytest.fixture()
def config():
    return ControlConfig()


@pytest.fixture()
def camera():
    return CameraEntity(OrbitCameraState(), Transform(), CameraProjection())


@pytest.fixture()
def world():
    return World()


ORBIT = MouseButton.RIGHT
PAN = MouseButton.MIDDLE
