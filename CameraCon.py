# CameraCon.py
# Per-frame orbit / pan / zoom systems for orbit cameras.
import logging

import numpy as np
import pyrr

from viz_config import ControlConfig
from viz_transform import X_AXIS, Y_AXIS, WORLD_UP, axis_rotation

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ControlConfig()


def orbit_rotation(orbit):
    """Ry(yaw) * Rx(pitch) as a quaternion."""
    return pyrr.quaternion.cross(axis_rotation(Y_AXIS, orbit.yaw), axis_rotation(X_AXIS, orbit.pitch))


def orbit_eye(orbit):
    offset = np.array([0.0, 0.0, orbit.distance])
    return orbit.focus + pyrr.quaternion.apply_to_vector(orbit_rotation(orbit), offset)


def apply_orbit(orbit, transform):
    """Write the camera transform derived from the orbit state."""
    transform.position = orbit_eye(orbit)
    transform.look_at(orbit.focus, WORLD_UP)


def update_orbit_cameras(frame, cameras, config=DEFAULT_CONFIG):
    """
    Orbit and pan every camera from this frame's pointer motion.

    `cameras` is a sequence of (id, entity) pairs where the entity carries
    `.orbit` (OrbitCameraState) and `.transform` (Transform). A camera whose
    gesture buttons are all released is left completely untouched.
    """
    dx, dy = frame.pointer_delta
    orbiting = frame.is_pressed(config.orbit_button)
    panning = frame.is_pressed(config.pan_button)
    if not (orbiting or panning):
        return

    for cam_id, cam in cameras:
        orbit = cam.orbit
        transform = cam.transform

        if orbiting:
            orbit.yaw -= dx * config.orbit_sensitivity
            orbit.pitch -= dy * config.orbit_sensitivity
            orbit.pitch = float(np.clip(orbit.pitch, -config.pitch_limit, config.pitch_limit))

        if panning:
            # pan along the camera's current screen axes, before this frame's recompute
            orbit.focus = (orbit.focus
                           + transform.right() * (-dx * config.pan_speed)
                           + transform.up() * (dy * config.pan_speed))

        apply_orbit(orbit, transform)
        logger.debug("camera %s: yaw=%.4f pitch=%.4f focus=%s", cam_id, orbit.yaw, orbit.pitch, orbit.focus)


def update_zoom(frame, cameras, config=DEFAULT_CONFIG):
    """Lens zoom: scroll narrows or widens the field of view; orbit distance is not touched."""
    scroll = frame.scroll_delta
    if scroll == 0.0:
        return

    for cam_id, cam in cameras:
        projection = cam.projection
        if not projection.is_perspective:
            continue
        fov = projection.fov - scroll * config.zoom_speed
        projection.fov = float(np.clip(fov, config.fov_min, config.fov_max))
        logger.debug("camera %s: fov=%.4f", cam_id, projection.fov)
