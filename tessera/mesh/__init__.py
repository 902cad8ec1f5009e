from tessera.mesh.grid import (
    MeshDataBundle,
    generate_grid,
    generate_grid_from_settings,
)
from tessera.mesh.rows import generate_row
from tessera.mesh.settings import GridSettings
from tessera.mesh.surfaces import (
    PlanarSurface,
    SurfaceKind,
    SurfaceStrategy,
    TriangulatedSurface,
    UpAxis,
    UvSphereSurface,
    strategy_for,
)
from tessera.mesh.vertex import Vertex

__all__ = [
    "GridSettings",
    "MeshDataBundle",
    "PlanarSurface",
    "SurfaceKind",
    "SurfaceStrategy",
    "TriangulatedSurface",
    "UpAxis",
    "UvSphereSurface",
    "Vertex",
    "generate_grid",
    "generate_grid_from_settings",
    "generate_row",
    "strategy_for",
]
