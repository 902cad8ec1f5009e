import numpy as np
import pytest

from tessera.assets import VERTEX_LAYOUT, MeshData, pack_mesh
from tessera.assets.packing import VERTEX_DTYPE
from tessera.mesh import MeshDataBundle, SurfaceKind, generate_grid


def test_pack_unit_quad(unit_quad):
    data = pack_mesh(unit_quad)

    assert isinstance(data, MeshData)
    # 4 vertices * (3 pos + 3 norm + 4 tangent + 2 uv) * 4 bytes/float
    assert len(data.vertices) == 4 * 48
    assert data.vertex_layout.stride_bytes == 48
    assert data.vertex_layout.format == "3f 3f 4f 2f"
    assert data.vertex_count == 4
    assert data.index_count == 6
    assert data.aabb == ((-0.5, -0.5, 0.0), (0.5, 0.5, 0.0))


def test_packed_bytes_match_streams():
    mesh = generate_grid(5, SurfaceKind.UV_SPHERE)
    data = pack_mesh(mesh)

    records = np.frombuffer(data.vertices, dtype=VERTEX_DTYPE)
    assert np.array_equal(records["in_pos"], mesh.positions)
    assert np.array_equal(records["in_normal"], mesh.normals)
    assert np.array_equal(records["in_tangent"], mesh.tangents)
    assert np.array_equal(records["in_uv"], mesh.uvs)

    indices = np.frombuffer(data.indices, dtype="<u4")
    assert np.array_equal(indices, mesh.indices)


def test_layout_attributes_follow_record_order():
    assert VERTEX_LAYOUT.attributes == list(VERTEX_DTYPE.names)


def test_sphere_bounds():
    data = pack_mesh(generate_grid(8, SurfaceKind.UV_SPHERE))
    lo, hi = data.aabb

    assert lo == pytest.approx((-1.0, -1.0, -1.0), abs=1e-6)
    assert hi == pytest.approx((1.0, 1.0, 1.0), abs=1e-6)


def test_empty_bundle_is_rejected():
    empty = MeshDataBundle(
        positions=np.empty((0, 3), dtype=np.float32),
        normals=np.empty((0, 3), dtype=np.float32),
        tangents=np.empty((0, 4), dtype=np.float32),
        uvs=np.empty((0, 2), dtype=np.float32),
        indices=np.empty(0, dtype=np.uint32),
    )

    with pytest.raises(ValueError, match="No geometry found"):
        pack_mesh(empty)
