# tessera/mesh/rows.py
from typing import List

import numpy as np

from tessera.mesh.surfaces import SurfaceStrategy
from tessera.mesh.vertex import Vertex


def generate_row(
    strategy: SurfaceStrategy,
    ring: int,
    resolution: int,
    vertices: List[Vertex],
    triangles: np.ndarray,
) -> None:
    """
    Write one ring of the lattice and the triangles joining it to the
    previous ring.

    Ring `i` owns vertex slots (r+1)*i .. (r+1)*i + r and, for i > 0, index
    slots 6r*(i-1) .. 6r*i - 1. Buffers must be pre-sized to (r+1)^2 and
    6r^2; nothing here is validated, a bad size fails as an IndexError.
    """
    r = resolution
    vi = (r + 1) * ring
    ti = 6 * r * (ring - 1)

    vertices[vi] = strategy.vertex(ring, 0, r)

    tri_a, tri_b = strategy.triangle_offsets(ring, r)

    vi += 1
    for x in range(1, r + 1):
        vertices[vi] = strategy.vertex(ring, x, r)

        if ring > 0:
            triangles[ti] = vi + tri_a[0]
            triangles[ti + 1] = vi + tri_a[1]
            triangles[ti + 2] = vi + tri_a[2]
            triangles[ti + 3] = vi + tri_b[0]
            triangles[ti + 4] = vi + tri_b[1]
            triangles[ti + 5] = vi + tri_b[2]

        vi += 1
        ti += 6
