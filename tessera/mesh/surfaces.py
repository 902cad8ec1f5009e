# tessera/mesh/surfaces.py
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

from tessera.mesh.vertex import Vertex
from tessera.types import Tri, Vector2, Vector3, Vector4

QuadOffsets = Tuple[Tri, Tri]


class SurfaceKind(str, Enum):
    """Which surface the lattice is projected onto."""

    PLANAR = "planar"
    UV_SPHERE = "uv_sphere"
    TRIANGULATED = "triangulated"


class UpAxis(str, Enum):
    """Normal direction of a planar grid."""

    Y = "y"
    Z = "z"


def quad_offsets(resolution: int) -> QuadOffsets:
    """
    Offsets from the vertex slot `vi` (ring i, column x) to the corners of
    the two triangles covering the quad between columns x-1..x of rings
    i-1..i. Corners: a = vi-r-2, b = vi-r-1, c = vi-1, d = vi.
    """
    r = resolution
    return ((-r - 2, -r - 1, -1), (-r - 1, 0, -1))


class SurfaceStrategy(ABC):
    """Maps lattice coordinates onto a surface and picks the quad split."""

    kind: SurfaceKind

    @abstractmethod
    def vertex(self, ring: int, column: int, resolution: int) -> Vertex:
        """Attributes of the lattice point (ring, column)."""
        pass

    def triangle_offsets(self, ring: int, resolution: int) -> QuadOffsets:
        """Index offsets of the two triangles stitching `ring` to `ring - 1`."""
        return quad_offsets(resolution)


class PlanarSurface(SurfaceStrategy):
    kind = SurfaceKind.PLANAR

    def __init__(self, up_axis: UpAxis = UpAxis.Z) -> None:
        self.up_axis = UpAxis(up_axis)

        if self.up_axis is UpAxis.Z:
            self._normal = Vector3(0.0, 0.0, 1.0)
        else:
            self._normal = Vector3(0.0, 1.0, 0.0)
        self._tangent = Vector4(-1.0, 0.0, 0.0, -1.0)

    def vertex(self, ring: int, column: int, resolution: int) -> Vertex:
        u = column / resolution
        v = ring / resolution

        if self.up_axis is UpAxis.Z:
            position = Vector3(u - 0.5, v - 0.5, 0.0)
        else:
            # Rings advance along -z so the winding stays CCW seen from +y.
            position = Vector3(u - 0.5, 0.0, 0.5 - v)

        return Vertex(
            position=position,
            normal=self._normal,
            tangent=self._tangent,
            tex_coord0=Vector2(u, v),
        )


class UvSphereSurface(SurfaceStrategy):
    """
    Unit sphere centred at the origin. Rings are parallels from the south
    pole (ring 0) to the north pole (ring r); columns are meridians, with
    column r repeating column 0 so the texture seam has its own vertices.
    Both pole rings collapse to one point each but keep distinct UVs and
    tangents, leaving zero-area triangles next to the poles.
    """

    kind = SurfaceKind.UV_SPHERE

    def vertex(self, ring: int, column: int, resolution: int) -> Vertex:
        theta = math.pi * ring / resolution
        phi = 2.0 * math.pi * column / resolution

        sin_phi = math.sin(phi)
        cos_phi = math.cos(phi)
        # sin(pi) is not exactly zero; both pole rings collapse to one point.
        radius = 0.0 if ring in (0, resolution) else math.sin(theta)

        position = Vector3(
            sin_phi * radius,
            -math.cos(theta),
            -cos_phi * radius,
        )

        return Vertex(
            position=position,
            normal=position,
            tangent=Vector4(cos_phi, 0.0, sin_phi, -1.0),
            tex_coord0=Vector2(column / resolution, ring / resolution),
        )

    def triangle_offsets(self, ring: int, resolution: int) -> QuadOffsets:
        # Columns run the opposite way around the normal compared to the
        # plane, so both triangles are reversed.
        (a, b, c), (b2, d, c2) = quad_offsets(resolution)
        return ((a, c, b), (b2, c2, d))


class TriangulatedSurface(SurfaceStrategy):
    """
    Planar grid of near-equilateral triangles. Odd rings are shifted half a
    cell against even rings and the quad diagonal flips with ring parity,
    giving a running-bond pattern instead of one uniform diagonal.
    """

    kind = SurfaceKind.TRIANGULATED

    ROW_HEIGHT = math.sqrt(3.0) / 2.0

    def vertex(self, ring: int, column: int, resolution: int) -> Vertex:
        r = resolution
        odd = (ring & 1) == 1

        x_offset = (0.25 if odd else -0.25) / (r - 0.5)
        u_offset = 0.5 / (r + 0.5) if odd else 0.0

        y = (ring / r - 0.5) * self.ROW_HEIGHT

        return Vertex(
            position=Vector3(column / r - 0.5 + x_offset, y, 0.0),
            normal=Vector3(0.0, 0.0, 1.0),
            tangent=Vector4(-1.0, 0.0, 0.0, -1.0),
            tex_coord0=Vector2(
                column / (r + 0.5) + u_offset,
                y / (1.0 + 0.5 / r) + 0.5,
            ),
        )

    def triangle_offsets(self, ring: int, resolution: int) -> QuadOffsets:
        r = resolution
        a, b, c, d = -r - 2, -r - 1, -1, 0

        if (ring & 1) == 1:
            # Diagonal b-c.
            return ((a, b, c), (b, d, c))
        # Diagonal a-d.
        return ((a, d, c), (a, b, d))


def strategy_for(
    kind: SurfaceKind, up_axis: UpAxis = UpAxis.Z
) -> SurfaceStrategy:
    kind = SurfaceKind(kind)

    if kind is SurfaceKind.PLANAR:
        return PlanarSurface(up_axis)
    if kind is SurfaceKind.UV_SPHERE:
        return UvSphereSurface()
    if kind is SurfaceKind.TRIANGULATED:
        return TriangulatedSurface()

    raise ValueError(f"Unknown surface kind {kind}")
