# tessera/mesh/settings.py
from __future__ import annotations

import operator
from dataclasses import dataclass

import numpy as np

from tessera.mesh.surfaces import SurfaceKind, UpAxis


def validate_resolution(resolution: object) -> int:
    """
    Reject anything but a positive integer subdivision count.

    Integer-like values (numpy integer scalars included) are accepted and
    returned as a plain int. Booleans are not counts and are rejected.
    """
    if isinstance(resolution, (bool, np.bool_)):
        raise TypeError(
            f"resolution must be an int, not {type(resolution).__name__}"
        )
    try:
        value = operator.index(resolution)
    except TypeError:
        raise TypeError(
            f"resolution must be an int, not {type(resolution).__name__}"
        ) from None
    if value < 1:
        raise ValueError(f"resolution must be >= 1 (got {value})")
    return int(value)


@dataclass(frozen=True, slots=True)
class GridSettings:
    """Everything needed to regenerate a lattice mesh."""

    resolution: int
    surface_kind: SurfaceKind = SurfaceKind.PLANAR
    up_axis: UpAxis = UpAxis.Z  # Only read by planar grids.

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "resolution", validate_resolution(self.resolution)
        )

        # Accept the enum values too ("uv_sphere", "y").
        object.__setattr__(self, "surface_kind", SurfaceKind(self.surface_kind))
        object.__setattr__(self, "up_axis", UpAxis(self.up_axis))

    @property
    def vertex_count(self) -> int:
        return (self.resolution + 1) * (self.resolution + 1)

    @property
    def index_count(self) -> int:
        return 6 * self.resolution * self.resolution
