import pytest

from tessera.mesh import SurfaceKind, generate_grid

ALL_KINDS = [SurfaceKind.PLANAR, SurfaceKind.UV_SPHERE, SurfaceKind.TRIANGULATED]


@pytest.fixture
def unit_quad():
    """Planar grid with a single cell."""
    return generate_grid(1, SurfaceKind.PLANAR)


@pytest.fixture(params=ALL_KINDS, ids=lambda k: k.value)
def kind(request):
    return request.param
