import math

TAU = 2.0 * math.pi


class Rotatable:
    __slots__ = ("speed",)

    def __init__(self, speed=0.2):
        self.speed = float(speed)  # turns per second, per axis


def update_spin(elapsed, rotatables):
    """
    Advance every rotatable by `elapsed` seconds.

    Each step turns about local Y, then the already-turned local X, then
    local Z. The three steps do not commute, so they are applied one by one.
    """
    if elapsed < 0.0:
        raise ValueError(f"elapsed time must be non-negative, got {elapsed}")

    for _ent_id, ent in rotatables:
        angle = ent.rotatable.speed * TAU * elapsed
        transform = ent.transform
        transform.rotate_local_y(angle)
        transform.rotate_local_x(angle)
        transform.rotate_local_z(angle)
