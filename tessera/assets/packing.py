# tessera/assets/packing.py
import numpy as np

from tessera.assets.types import MeshData, VertexLayout
from tessera.mesh.grid import MeshDataBundle

VERTEX_DTYPE = np.dtype(
    [
        ("in_pos", "<f4", (3,)),
        ("in_normal", "<f4", (3,)),
        ("in_tangent", "<f4", (4,)),
        ("in_uv", "<f4", (2,)),
    ]
)

VERTEX_LAYOUT = VertexLayout(
    attributes=["in_pos", "in_normal", "in_tangent", "in_uv"],
    format="3f 3f 4f 2f",
    stride_bytes=VERTEX_DTYPE.itemsize,
)


def pack_mesh(bundle: MeshDataBundle) -> MeshData:
    """Interleave the attribute streams into one little-endian vertex blob."""
    if bundle.vertex_count == 0:
        raise ValueError("No geometry found in mesh bundle")

    interleaved = np.empty(bundle.vertex_count, dtype=VERTEX_DTYPE)
    interleaved["in_pos"] = bundle.positions
    interleaved["in_normal"] = bundle.normals
    interleaved["in_tangent"] = bundle.tangents
    interleaved["in_uv"] = bundle.uvs

    lo = bundle.positions.min(axis=0)
    hi = bundle.positions.max(axis=0)

    return MeshData(
        vertices=interleaved.tobytes(),
        vertex_layout=VERTEX_LAYOUT,
        aabb=(
            (float(lo[0]), float(lo[1]), float(lo[2])),
            (float(hi[0]), float(hi[1]), float(hi[2])),
        ),
        indices=bundle.indices.astype("<u4").tobytes(),
        index_count=bundle.index_count,
    )
