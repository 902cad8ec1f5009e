"""
Headless lattice mesh inspection.

Usage:
    python main.py [resolution] [planar|uv_sphere|triangulated] [y|z]

Generates the mesh, packs it for upload, registers it, and prints a
summary. Set PROFILE = True to write cProfile reports to .debug/.
"""

from __future__ import annotations

import sys
from pathlib import Path

from tessera.assets import AssetRegistry, pack_mesh
from tessera.debug.gizmos import build_gizmo_lines
from tessera.debug.profiler import profile
from tessera.mesh import GridSettings, generate_grid_from_settings

PROFILE = False


def parse_settings(argv: list[str]) -> GridSettings:
    resolution = int(argv[0]) if len(argv) > 0 else 4
    kind = argv[1] if len(argv) > 1 else "uv_sphere"
    up_axis = argv[2] if len(argv) > 2 else "z"
    return GridSettings(resolution, kind, up_axis)


@profile(out_dir=Path(".debug"), enabled=PROFILE)
def main(argv: list[str]) -> int:
    try:
        settings = parse_settings(argv)
    except (TypeError, ValueError) as e:
        print(f"[mesh] Invalid settings: {e}")
        return 2

    bundle = generate_grid_from_settings(settings)
    data = pack_mesh(bundle)

    meshes = AssetRegistry()
    handle = meshes.add(data, label=settings.surface_kind.value)

    gizmos = build_gizmo_lines(bundle)

    print(
        f"[mesh] {settings.surface_kind.value} r={settings.resolution}: "
        f"{bundle.vertex_count} vertices, {bundle.triangle_count} triangles"
    )
    print(
        f"[mesh] packed {len(data.vertices)} bytes "
        f"({data.vertex_layout.format}, stride {data.vertex_layout.stride_bytes})"
    )
    print(f"[mesh] aabb min={data.aabb[0]} max={data.aabb[1]}")
    print(f"[mesh] gizmo segments: {gizmos.segment_count}")
    print(f"[mesh] registered as asset {handle.id}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
