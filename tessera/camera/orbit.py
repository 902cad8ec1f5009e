# tessera/camera/orbit.py
from dataclasses import dataclass, field

from tessera.math import norm_vec, rotate_vec_by_quat
from tessera.types import Quaternion, Vector2, Vector3


@dataclass(frozen=True)
class Transform:
    """
    Placement of the camera in the world.
    """

    pos: Vector3 = field(default_factory=Vector3.zero)
    rot: Quaternion = field(default_factory=Quaternion.identity)

    def rotate_around(self, point: Vector3, rotation: Quaternion) -> "Transform":
        """Swing the position about `point` and turn the orientation with it."""
        offset = rotate_vec_by_quat(self.pos - point, rotation)
        return Transform(
            pos=point + offset,
            rot=(rotation * self.rot).normalized(),
        )


def orbit_step(
    transform: Transform,
    delta: Vector2,
    dt: float,
    threshold: float = 0.1,
    pivot: Vector3 = Vector3.zero(),
) -> Transform:
    """
    Rotate the camera around `pivot` in the direction of a mouse drag.

    The drag only picks the direction; the angular step is `dt` radians
    spread over yaw (dx) and pitch (dy). Drags inside `threshold` pixels on
    both axes are ignored.
    """
    if abs(delta.x) <= threshold and abs(delta.y) <= threshold:
        return transform

    direction = norm_vec(delta) * dt

    rotation = Quaternion.from_euler_yxz(direction.x, direction.y, 0.0)
    return transform.rotate_around(pivot, rotation)
