"""
Entity table for the viewer.

Entities are plain records keyed by a stable integer id. Systems receive
(id, entity) pairs from orbit_cameras() / rotatables() and never look
anything up globally.
"""
import itertools
import logging

from viz_camera import CameraProjection, OrbitCameraState
from viz_spin import Rotatable
from viz_transform import Transform

logger = logging.getLogger(__name__)


class CameraEntity:
    __slots__ = ("orbit", "transform", "projection")

    def __init__(self, orbit, transform, projection):
        self.orbit = orbit
        self.transform = transform
        self.projection = projection


class RotatableEntity:
    __slots__ = ("rotatable", "transform", "color")

    def __init__(self, rotatable, transform, color=(1.0, 1.0, 1.0)):
        self.rotatable = rotatable
        self.transform = transform
        self.color = tuple(color)


class World:
    def __init__(self):
        self._ids = itertools.count(1)
        self.cameras = {}
        self.rotating = {}

    def spawn_orbit_camera(self, orbit=None, transform=None, projection=None):
        ent_id = next(self._ids)
        self.cameras[ent_id] = CameraEntity(
            orbit if orbit is not None else OrbitCameraState(),
            transform if transform is not None else Transform(),
            projection if projection is not None else CameraProjection(),
        )
        logger.debug("spawned orbit camera %d", ent_id)
        return ent_id

    def spawn_rotatable(self, speed=0.2, transform=None, color=(1.0, 1.0, 1.0)):
        ent_id = next(self._ids)
        self.rotating[ent_id] = RotatableEntity(
            Rotatable(speed),
            transform if transform is not None else Transform(),
            color,
        )
        logger.debug("spawned rotatable %d (speed=%s)", ent_id, speed)
        return ent_id

    def despawn(self, ent_id):
        if ent_id in self.cameras:
            del self.cameras[ent_id]
        elif ent_id in self.rotating:
            del self.rotating[ent_id]
        else:
            raise KeyError(f"no entity with id {ent_id}")
        logger.debug("despawned %d", ent_id)

    def orbit_cameras(self):
        return list(self.cameras.items())

    def rotatables(self):
        return list(self.rotating.items())

    def active_camera(self):
        """The first live camera, or None."""
        for _ent_id, cam in self.cameras.items():
            return cam
        return None


# demo scene colours
CUBE_COLOR = (0.9, 0.0, 0.555)   # hsl(323, 100%, 45%)
PLANE_COLOR = (0.0, 0.6, 0.77)


def build_demo_world():
    """Camera orbiting (2, 1, 0) but initially placed at (10, 10, 10) looking at the origin, plus one spinning cube."""
    world = World()
    world.spawn_orbit_camera(
        orbit=OrbitCameraState(focus=(2.0, 1.0, 0.0)),
        transform=Transform.from_xyz(10.0, 10.0, 10.0).look_at((0.0, 0.0, 0.0)),
    )
    world.spawn_rotatable(speed=0.2, color=CUBE_COLOR)
    return world
