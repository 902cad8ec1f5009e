# tessera/mesh/grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np
from numpy.typing import NDArray

from tessera.mesh.rows import generate_row
from tessera.mesh.settings import GridSettings, validate_resolution
from tessera.mesh.surfaces import SurfaceKind, UpAxis, strategy_for
from tessera.mesh.vertex import Vertex
from tessera.types import Vector2, Vector3, Vector4


@dataclass(frozen=True, eq=False)
class MeshDataBundle:
    """
    Generated mesh as parallel attribute streams plus a triangle list.

    Every stream has one row per vertex; `indices` holds CCW triangles as
    flat triples. Arrays are read-only.
    """

    positions: NDArray[np.float32]  # (N, 3)
    normals: NDArray[np.float32]  # (N, 3)
    tangents: NDArray[np.float32]  # (N, 4)
    uvs: NDArray[np.float32]  # (N, 2)
    indices: NDArray[np.uint32]  # (M,)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> NDArray[np.uint32]:
        """(M / 3, 3) view of the index stream."""
        return self.indices.reshape(-1, 3)

    def vertex(self, index: int) -> Vertex:
        p = self.positions[index]
        n = self.normals[index]
        t = self.tangents[index]
        uv = self.uvs[index]
        return Vertex(
            position=Vector3(float(p[0]), float(p[1]), float(p[2])),
            normal=Vector3(float(n[0]), float(n[1]), float(n[2])),
            tangent=Vector4(float(t[0]), float(t[1]), float(t[2]), float(t[3])),
            tex_coord0=Vector2(float(uv[0]), float(uv[1])),
        )


def _stream(values: List[tuple], width: int, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype).reshape(-1, width)
    arr.setflags(write=False)
    return arr


def generate_grid(
    resolution: int,
    kind: SurfaceKind = SurfaceKind.PLANAR,
    up_axis: UpAxis = UpAxis.Z,
) -> MeshDataBundle:
    """
    Tessellate a (resolution + 1)^2 lattice onto the chosen surface.

    Produces (r+1)^2 vertices and 6r^2 indices for every surface kind; the
    UV sphere keeps the full count even though its pole rings are
    degenerate.

    Raises:
        TypeError: resolution is not an int.
        ValueError: resolution < 1.
    """
    r = validate_resolution(resolution)
    strategy = strategy_for(kind, up_axis)

    vertex_count = (r + 1) * (r + 1)
    index_count = 6 * r * r

    vertices: List[Vertex] = [Vertex()] * vertex_count
    triangles = np.zeros(index_count, dtype=np.uint32)

    # Ascending order: each ring stitches onto the already written ring below.
    for i in range(r + 1):
        generate_row(strategy, i, r, vertices, triangles)

    triangles.setflags(write=False)

    return MeshDataBundle(
        positions=_stream([tuple(v.position) for v in vertices], 3, np.float32),
        normals=_stream([tuple(v.normal) for v in vertices], 3, np.float32),
        tangents=_stream([tuple(v.tangent) for v in vertices], 4, np.float32),
        uvs=_stream([tuple(v.tex_coord0) for v in vertices], 2, np.float32),
        indices=triangles,
    )


def generate_grid_from_settings(settings: GridSettings) -> MeshDataBundle:
    return generate_grid(
        settings.resolution,
        settings.surface_kind,
        settings.up_axis,
    )
