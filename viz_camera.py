import enum
import math

import numpy as np
import pyrr


class OrbitCameraState:
    """Spherical camera parameters around a focus point. Written only by CameraCon."""
    __slots__ = ("focus", "distance", "yaw", "pitch")

    def __init__(self, focus=(0.0, 0.0, 0.0), distance=10.0, yaw=0.0, pitch=0.0):
        distance = float(distance)
        if not distance > 0.0:
            raise ValueError(f"orbit distance must be positive, got {distance}")
        self.focus = np.array(focus, dtype=np.float64)
        self.distance = distance
        self.yaw = float(yaw)      # radians about world up
        self.pitch = float(pitch)  # radians about local right

    def __repr__(self):
        return (f"OrbitCameraState(focus={self.focus.tolist()}, distance={self.distance}, "
                f"yaw={self.yaw}, pitch={self.pitch})")


class ProjectionKind(enum.Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


class CameraProjection:
    __slots__ = ("kind", "fov", "near", "far", "ortho_height")

    def __init__(self, kind=ProjectionKind.PERSPECTIVE, fov=math.pi / 4.0,
                 near=0.1, far=1000.0, ortho_height=10.0):
        self.kind = ProjectionKind(kind)
        self.fov = float(fov)  # vertical, radians
        self.near = float(near)
        self.far = float(far)
        self.ortho_height = float(ortho_height)

    @classmethod
    def orthographic(cls, height=10.0, near=0.1, far=1000.0):
        return cls(ProjectionKind.ORTHOGRAPHIC, near=near, far=far, ortho_height=height)

    @property
    def is_perspective(self):
        return self.kind is ProjectionKind.PERSPECTIVE

    def matrix(self, aspect, dtype=np.float32):
        if self.is_perspective:
            return pyrr.matrix44.create_perspective_projection(
                math.degrees(self.fov), aspect, self.near, self.far, dtype=dtype)
        half_h = 0.5 * self.ortho_height
        half_w = half_h * aspect
        return pyrr.matrix44.create_orthogonal_projection(
            -half_w, half_w, -half_h, half_h, self.near, self.far, dtype=dtype)
