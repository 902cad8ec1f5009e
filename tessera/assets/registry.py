# tessera/assets/registry.py
from dataclasses import dataclass
from typing import Dict, Generic, NewType, Optional, TypeVar

AssetId = NewType("AssetId", int)
T = TypeVar("T")  # Type of data (MeshData, MeshDataBundle)


@dataclass(frozen=True)
class AssetHandle(Generic[T]):
    """
    Lightweight reference to a stored asset.
    Holding this does not keep the asset alive.
    """

    id: AssetId
    label: str = ""


class AssetRegistry:
    """
    Stores generated asset data (CPU side) mapped by AssetId.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, object] = {}
        self._next_id = 1

    def add(self, data: T, label: str = "") -> AssetHandle[T]:
        """Store data under a fresh id."""
        asset_id = AssetId(self._next_id)
        self._next_id += 1
        self._storage[asset_id] = data
        return AssetHandle(asset_id, label)

    def get(self, handle: AssetHandle[T]) -> Optional[T]:
        """Retrieve asset data if still stored."""
        return self._storage.get(handle.id)  # type: ignore[return-value]

    def remove(self, handle: AssetHandle[T]) -> T:
        if handle.id not in self._storage:
            raise KeyError(f"Asset missing: {handle.id}")
        return self._storage.pop(handle.id)  # type: ignore[return-value]

    def __contains__(self, handle: AssetHandle) -> bool:
        return handle.id in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Drop all stored assets. Ids are never reused."""
        self._storage.clear()
