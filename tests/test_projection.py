import math

import numpy as np
import pytest

from viz_camera import CameraProjection, ProjectionKind


class TestPerspective:
    def test_matrix_follows_fov_in_radians(self):
        proj = CameraProjection(fov=math.pi / 3.0)
        m = proj.matrix(aspect=1.0, dtype=np.float64)
        assert m[1, 1] == pytest.approx(1.0 / math.tan(math.pi / 6.0))
        assert m[0, 0] == pytest.approx(m[1, 1])

    def test_narrower_fov_magnifies(self):
        wide = CameraProjection(fov=1.2).matrix(aspect=1.5, dtype=np.float64)
        narrow = CameraProjection(fov=0.3).matrix(aspect=1.5, dtype=np.float64)
        assert narrow[1, 1] > wide[1, 1]

    def test_aspect_scales_horizontal_term(self):
        m = CameraProjection(fov=1.0).matrix(aspect=2.0, dtype=np.float64)
        assert m[0, 0] == pytest.approx(m[1, 1] / 2.0)


class TestOrthographic:
    def test_matrix_uses_ortho_height(self):
        proj = CameraProjection.orthographic(height=8.0)
        assert proj.kind is ProjectionKind.ORTHOGRAPHIC
        m = proj.matrix(aspect=2.0, dtype=np.float64)
        assert m[1, 1] == pytest.approx(2.0 / 8.0)
        assert m[0, 0] == pytest.approx(2.0 / 16.0)

    def test_fov_does_not_affect_matrix(self):
        a = CameraProjection.orthographic(height=8.0)
        b = CameraProjection.orthographic(height=8.0)
        b.fov = 0.2
        np.testing.assert_array_equal(a.matrix(1.0), b.matrix(1.0))
