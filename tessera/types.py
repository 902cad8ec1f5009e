# tessera/types.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, TypeAlias, overload

Scalar: TypeAlias = float

Tri = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar = 0.0
    y: Scalar = 0.0

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __truediv__(self, other: Any) -> Vector2:
        if isinstance(other, (int, float)):
            if other == 0.0:
                raise ValueError(other)
            return Vector2(self.x / other, self.y / other)

        raise TypeError(f"other must be Scalar, not {type(other).__name__}")

    @overload
    def __getitem__(self, index: int) -> Scalar: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Scalar, ...]: ...

    def __getitem__(self, index: Any):
        if isinstance(index, int):
            if index == 0:
                return self.x
            if index == 1:
                return self.y
            raise IndexError(index)

        if isinstance(index, slice):
            return tuple(self)[index]

        raise TypeError(
            f"indices must be int or slice, not {type(index).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Vector3:
    x: Scalar = 0.0
    y: Scalar = 0.0
    z: Scalar = 0.0

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
        )

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(
            self.x - other.x,
            self.y - other.y,
            self.z - other.z,
        )

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(
            self.x * scalar,
            self.y * scalar,
            self.z * scalar,
        )

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __truediv__(self, other: Any) -> Vector3:
        if isinstance(other, (int, float)):
            if other == 0.0:
                raise ValueError(other)
            return Vector3(self.x / other, self.y / other, self.z / other)

        raise TypeError(f"other must be Scalar, not {type(other).__name__}")

    @overload
    def __getitem__(self, index: int) -> Scalar: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Scalar, ...]: ...

    def __getitem__(self, index: Any):
        if isinstance(index, int):
            if index == 0:
                return self.x
            if index == 1:
                return self.y
            if index == 2:
                return self.z
            raise IndexError(index)

        if isinstance(index, slice):
            return tuple(self)[index]

        raise TypeError(
            f"indices must be int or slice, not {type(index).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Vector4:
    """
    Four component vector. Tangents use `w` as the handedness sign.
    """

    x: Scalar = 0.0
    y: Scalar = 0.0
    z: Scalar = 0.0
    w: Scalar = 0.0

    @staticmethod
    def zero() -> Vector4:
        return Vector4(0.0, 0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4

    @property
    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __getitem__(self, index: int) -> Scalar:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        if index == 3:
            return self.w
        raise IndexError(index)


@dataclass(frozen=True, slots=True)
class Quaternion:
    x: Scalar
    y: Scalar
    z: Scalar
    w: Scalar

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Rotation of `angle` radians about a unit `axis`."""
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @staticmethod
    def from_euler_yxz(yaw: float, pitch: float, roll: float) -> Quaternion:
        """
        Euler angles in radians, applied intrinsically as Y, then X, then Z.
        yaw   = rotation about Y
        pitch = rotation about X
        roll  = rotation about Z
        """
        qy = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), yaw)
        qx = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), pitch)
        qz = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), roll)
        return qy * qx * qz

    def __mul__(self, other: Quaternion) -> Quaternion:
        # Hamilton product; (a * b) applies b first, then a.
        ax, ay, az, aw = self
        bx, by, bz, bw = other
        return Quaternion(
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        )

    def normalized(self) -> Quaternion:
        n = (
            self.x * self.x
            + self.y * self.y
            + self.z * self.z
            + self.w * self.w
        ) ** 0.5
        if n == 0.0:
            return Quaternion(0.0, 0.0, 0.0, 1.0)
        inv = 1.0 / n
        return Quaternion(
            self.x * inv,
            self.y * inv,
            self.z * inv,
            self.w * inv,
        )
