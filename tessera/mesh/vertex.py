# tessera/mesh/vertex.py
from dataclasses import dataclass, field

from tessera.types import Vector2, Vector3, Vector4


@dataclass(frozen=True, slots=True)
class Vertex:
    """One lattice sample: object-space position plus shading attributes."""

    position: Vector3 = field(default_factory=Vector3.zero)
    normal: Vector3 = field(default_factory=Vector3.zero)
    tangent: Vector4 = field(default_factory=Vector4.zero)  # w = handedness
    tex_coord0: Vector2 = field(default_factory=Vector2.zero)
