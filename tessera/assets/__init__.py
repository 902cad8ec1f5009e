from tessera.assets.packing import VERTEX_LAYOUT, pack_mesh
from tessera.assets.registry import AssetHandle, AssetId, AssetRegistry
from tessera.assets.types import MeshData, VertexLayout

__all__ = [
    "AssetHandle",
    "AssetId",
    "AssetRegistry",
    "MeshData",
    "VERTEX_LAYOUT",
    "VertexLayout",
    "pack_mesh",
]
