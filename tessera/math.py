# tessera/math.py
import math
from typing import TypeVar, Union

from tessera.types import Quaternion, Scalar, Vector2, Vector3

V = TypeVar("V", Vector2, Vector3)


# -- Vector Math --
def magnitude_vec(v: Union[Vector2, Vector3]) -> Scalar:
    return math.hypot(*v)


def norm_vec(v: V) -> V:
    mag = magnitude_vec(v)
    if mag == 0:
        return v
    return v / mag


def cross_vec3(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def rotate_vec_by_quat(v: Vector3, q: Quaternion) -> Vector3:
    u = Vector3(q.x, q.y, q.z)
    s = q.w

    # v + 2.0 * cross(u, cross(u, v) + s * v)
    uv = cross_vec3(u, v)
    uuv = cross_vec3(u, uv)

    return Vector3(
        v.x + 2.0 * (s * uv.x + uuv.x),
        v.y + 2.0 * (s * uv.y + uuv.y),
        v.z + 2.0 * (s * uv.z + uuv.z),
    )
