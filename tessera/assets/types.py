# tessera/assets/types.py
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class VertexLayout:
    """Describes interleaved vertex attributes for VAO creation."""

    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_tangent", "in_uv"]
    format: str  # buffer format string e.g. "3f 3f 4f 2f"
    stride_bytes: int  # e.g. 48


@dataclass(frozen=True)
class MeshData:
    """Packed mesh bytes, ready for GPU upload."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: Tuple[Tuple[float, float, float], Tuple[float, float, float]]
    indices: Optional[bytes] = None
    index_count: int = 0

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // self.vertex_layout.stride_bytes
