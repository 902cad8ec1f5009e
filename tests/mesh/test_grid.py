import numpy as np
import pytest

from tessera.mesh import (
    GridSettings,
    SurfaceKind,
    UpAxis,
    Vertex,
    generate_grid,
    generate_grid_from_settings,
)
from tessera.types import Vector2, Vector3, Vector4


@pytest.mark.parametrize("r", [1, 2, 3, 7, 16])
def test_stream_lengths(kind, r):
    mesh = generate_grid(r, kind)
    n = (r + 1) ** 2

    assert mesh.positions.shape == (n, 3)
    assert mesh.normals.shape == (n, 3)
    assert mesh.tangents.shape == (n, 4)
    assert mesh.uvs.shape == (n, 2)
    assert mesh.indices.shape == (6 * r * r,)
    assert mesh.vertex_count == n
    assert mesh.index_count == 6 * r * r
    assert mesh.triangle_count == 2 * r * r


@pytest.mark.parametrize("r", [1, 2, 5, 12])
def test_indices_in_range(kind, r):
    mesh = generate_grid(r, kind)

    assert mesh.indices.dtype == np.uint32
    assert mesh.indices.max() < (r + 1) ** 2


@pytest.mark.parametrize("r", [1, 3, 8])
def test_every_vertex_is_referenced(kind, r):
    mesh = generate_grid(r, kind)
    assert set(mesh.indices.tolist()) == set(range(mesh.vertex_count))


def test_unit_quad_layout(unit_quad):
    assert unit_quad.vertex_count == 4
    assert unit_quad.index_count == 6
    assert unit_quad.indices.tolist() == [0, 1, 2, 1, 3, 2]

    expected = [
        [-0.5, -0.5, 0.0],
        [0.5, -0.5, 0.0],
        [-0.5, 0.5, 0.0],
        [0.5, 0.5, 0.0],
    ]
    assert unit_quad.positions.tolist() == expected
    assert unit_quad.uvs.tolist() == [[0, 0], [1, 0], [0, 1], [1, 1]]


@pytest.mark.parametrize("r", [1, 2, 4, 9])
def test_planar_triangles_span_two_adjacent_rings(r):
    mesh = generate_grid(r, SurfaceKind.PLANAR)

    for tri in mesh.triangles():
        ys = np.unique(mesh.positions[tri, 1])
        assert len(ys) == 2
        assert ys[1] - ys[0] == pytest.approx(1.0 / r, abs=1e-6)


@pytest.mark.parametrize("r", [1, 2, 6, 10])
def test_sphere_south_pole_collapses(r):
    mesh = generate_grid(r, SurfaceKind.UV_SPHERE)
    ring0 = slice(0, r + 1)

    positions = mesh.positions[ring0]
    assert np.all(positions == positions[0])
    assert positions[0].tolist() == [0.0, -1.0, 0.0]

    us = mesh.uvs[ring0, 0]
    assert us[0] == 0.0
    assert np.allclose(np.diff(us), 1.0 / r)
    assert len(np.unique(us)) == r + 1


@pytest.mark.parametrize("r", [1, 2, 6, 10])
def test_sphere_north_pole_collapses_exactly(r):
    mesh = generate_grid(r, SurfaceKind.UV_SPHERE)
    top = slice((r + 1) * r, (r + 1) * (r + 1))

    positions = mesh.positions[top]
    assert np.all(positions == np.array([0.0, 1.0, 0.0], dtype=np.float32))
    assert np.all(mesh.normals[top] == positions)


def test_sphere_vertices_on_unit_sphere():
    mesh = generate_grid(12, SurfaceKind.UV_SPHERE)

    lengths = np.linalg.norm(mesh.positions, axis=1)
    assert np.allclose(lengths, 1.0, atol=1e-6)
    assert np.array_equal(mesh.normals, mesh.positions)


def test_sphere_tangents_are_perpendicular_to_normals():
    mesh = generate_grid(10, SurfaceKind.UV_SPHERE)

    dots = np.einsum("ij,ij->i", mesh.normals, mesh.tangents[:, :3])
    assert np.allclose(dots, 0.0, atol=1e-6)
    assert np.all(mesh.tangents[:, 3] == -1.0)


def test_uvs_cover_unit_square(kind):
    mesh = generate_grid(8, kind)

    assert mesh.uvs.min() >= 0.0
    assert mesh.uvs.max() <= 1.0 + 1e-6


def test_planar_attributes_constant():
    mesh = generate_grid(5, SurfaceKind.PLANAR)

    assert np.all(mesh.normals == [0.0, 0.0, 1.0])
    assert np.all(mesh.tangents == [-1.0, 0.0, 0.0, -1.0])
    assert np.all(mesh.positions[:, 2] == 0.0)


def test_planar_y_up_lies_in_xz_plane():
    mesh = generate_grid(3, SurfaceKind.PLANAR, UpAxis.Y)

    assert np.all(mesh.positions[:, 1] == 0.0)
    assert np.all(mesh.normals == [0.0, 1.0, 0.0])
    assert mesh.positions[0].tolist() == [-0.5, 0.0, 0.5]


def test_output_is_read_only(unit_quad):
    with pytest.raises(ValueError):
        unit_quad.positions[0, 0] = 3.0
    with pytest.raises(ValueError):
        unit_quad.indices[0] = 3


def test_generation_is_deterministic(kind):
    a = generate_grid(9, kind)
    b = generate_grid(9, kind)

    for name in ("positions", "normals", "tangents", "uvs", "indices"):
        assert getattr(a, name).tobytes() == getattr(b, name).tobytes()


def test_vertex_accessor(unit_quad):
    assert unit_quad.vertex(3) == Vertex(
        position=Vector3(0.5, 0.5, 0.0),
        normal=Vector3(0.0, 0.0, 1.0),
        tangent=Vector4(-1.0, 0.0, 0.0, -1.0),
        tex_coord0=Vector2(1.0, 1.0),
    )


@pytest.mark.parametrize("bad", [0, -1, -50])
def test_rejects_non_positive_resolution(bad):
    with pytest.raises(ValueError, match="resolution must be >= 1"):
        generate_grid(bad)


@pytest.mark.parametrize(
    "bad", [1.0, "4", None, True, np.bool_(True), np.float64(4.0)]
)
def test_rejects_non_integer_resolution(bad):
    with pytest.raises(TypeError, match="resolution must be an int"):
        generate_grid(bad)


@pytest.mark.parametrize("r", [np.int64(4), np.int32(4), np.uint8(4)])
def test_accepts_numpy_integer_resolution(r):
    mesh = generate_grid(r, SurfaceKind.UV_SPHERE)

    assert mesh.vertex_count == 25
    assert mesh.index_count == 96
    plain = generate_grid(4, SurfaceKind.UV_SPHERE)
    assert np.array_equal(mesh.positions, plain.positions)
    assert np.array_equal(mesh.indices, plain.indices)


def test_numpy_zero_resolution_is_out_of_range():
    with pytest.raises(ValueError, match="resolution must be >= 1"):
        generate_grid(np.int64(0))


def test_settings_store_numpy_resolution_as_int():
    settings = GridSettings(np.int32(3))

    assert settings.resolution == 3
    assert type(settings.resolution) is int
    assert settings.index_count == 54


def test_from_settings_matches_direct_call():
    settings = GridSettings(4, "triangulated")
    a = generate_grid_from_settings(settings)
    b = generate_grid(4, SurfaceKind.TRIANGULATED)

    assert np.array_equal(a.positions, b.positions)
    assert np.array_equal(a.indices, b.indices)
