"""Field-of-view zoom from the scroll wheel."""
import math

import pytest

from CameraCon import update_zoom
from viz_camera import CameraProjection, OrbitCameraState
from viz_transform import Transform
from viz_world import CameraEntity

from conftest import make_frame


class TestZoom:
    def test_scroll_up_narrows_fov(self, camera):
        camera.projection.fov = 0.8
        update_zoom(make_frame(scroll=2.0), [(1, camera)])
        assert camera.projection.fov == pytest.approx(0.7)

    def test_scroll_down_widens_fov(self, camera):
        camera.projection.fov = 0.8
        update_zoom(make_frame(scroll=-1.0), [(1, camera)])
        assert camera.projection.fov == pytest.approx(0.85)

    def test_clamped_to_minimum(self, camera):
        update_zoom(make_frame(scroll=1000.0), [(1, camera)])
        assert camera.projection.fov == 0.1

    def test_clamped_to_maximum(self, camera):
        update_zoom(make_frame(scroll=-1000.0), [(1, camera)])
        assert camera.projection.fov == math.pi / 2.0

    def test_zero_scroll_is_bit_identical(self, camera):
        camera.projection.fov = 0.123456789
        update_zoom(make_frame(scroll=0.0), [(1, camera)])
        assert camera.projection.fov == 0.123456789

    def test_out_of_range_fov_left_alone_without_scroll(self, camera):
        camera.projection.fov = 3.0
        update_zoom(make_frame(), [(1, camera)])
        assert camera.projection.fov == 3.0

    def test_orthographic_is_skipped(self):
        cam = CameraEntity(OrbitCameraState(), Transform(), CameraProjection.orthographic(height=12.0))
        fov_before = cam.projection.fov
        update_zoom(make_frame(scroll=5.0), [(1, cam)])
        assert cam.projection.fov == fov_before
        assert cam.projection.ortho_height == 12.0

    def test_every_perspective_camera_is_zoomed(self, camera):
        other = CameraEntity(OrbitCameraState(), Transform(), CameraProjection(fov=1.0))
        update_zoom(make_frame(scroll=1.0), [(1, camera), (2, other)])
        assert camera.projection.fov == pytest.approx(math.pi / 4.0 - 0.05)
        assert other.projection.fov == pytest.approx(0.95)

    def test_fov_bounds_hold_for_any_scroll_sequence(self, camera):
        for scroll in (3.0, -40.0, 0.5, 17.0, -2.25, 99.0, -0.01):
            update_zoom(make_frame(scroll=scroll), [(1, camera)])
            assert 0.1 <= camera.projection.fov <= math.pi / 2.0

    def test_zoom_does_not_move_camera(self, camera):
        update_zoom(make_frame(scroll=4.0), [(1, camera)])
        assert camera.orbit.distance == 10.0
        assert camera.transform.position.tolist() == [0.0, 0.0, 0.0]
