# tessera/debug/gizmos.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tessera.mesh.grid import MeshDataBundle

Color = tuple[float, float, float, float]

RED: Color = (1.0, 0.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True)
class GizmoLines:
    """
    Debug overlay for a mesh: one marker per vertex and a line list of
    normal and tangent rays.
    """

    points: NDArray[np.float32]  # (N, 3) vertex markers
    point_color: Color
    lines: NDArray[np.float32]  # (2K, 3) start/end pairs
    colors: NDArray[np.float32]  # (2K, 4) per endpoint

    @property
    def segment_count(self) -> int:
        return len(self.lines) // 2


def build_gizmo_lines(
    bundle: MeshDataBundle,
    normal_length: float = 0.1,
    tangent_length: float = 0.1,
) -> GizmoLines:
    """Normals are drawn blue, tangent directions (xyz only) green."""
    pos = bundle.positions
    n = bundle.vertex_count

    normal_ends = pos + bundle.normals * np.float32(normal_length)
    tangent_ends = pos + bundle.tangents[:, :3] * np.float32(tangent_length)

    # Interleave start/end so each segment is two consecutive rows.
    normal_lines = np.empty((2 * n, 3), dtype=np.float32)
    normal_lines[0::2] = pos
    normal_lines[1::2] = normal_ends

    tangent_lines = np.empty((2 * n, 3), dtype=np.float32)
    tangent_lines[0::2] = pos
    tangent_lines[1::2] = tangent_ends

    colors = np.empty((4 * n, 4), dtype=np.float32)
    colors[: 2 * n] = BLUE
    colors[2 * n :] = GREEN

    return GizmoLines(
        points=np.array(pos, dtype=np.float32),
        point_color=RED,
        lines=np.concatenate([normal_lines, tangent_lines]),
        colors=colors,
    )
