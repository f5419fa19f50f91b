"""Points and displacement vectors in three-dimensional Cartesian space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Tuple, TypeVar

_C = TypeVar("_C", "Point", "Vector")


@dataclass(frozen=True, slots=True)
class Point:
    """A position in space.

    Adding a vector moves the point; subtracting two points gives the
    vector that joins them.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Point:
        if isinstance(other, (Point, Vector)):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def mag2(self) -> float:
        """Squared distance from the origin."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def to_vector(self) -> Vector:
        """The position vector of this point."""
        return Vector(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Vector:
    """A displacement or direction in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return self + (-1.0 * other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> Vector:
        if isinstance(scalar, Real) and not isinstance(scalar, bool):
            s = float(scalar)
            return Vector(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, scalar: object) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector:
        if isinstance(scalar, Real) and not isinstance(scalar, bool):
            return self * (1.0 / float(scalar))
        return NotImplemented

    def mag2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Vector product, self × other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def unit(self) -> Vector:
        """The vector scaled to length one.

        A zero vector has no direction; its unit vector has NaN components,
        which makes every comparison against it false.
        """
        length = math.sqrt(self.dot(self))
        if length == 0.0:
            return Vector(math.nan, math.nan, math.nan)
        return self * (1.0 / length)

    def to_point(self) -> Point:
        """The point this vector reaches from the origin."""
        return Point(self.x, self.y, self.z)


def _rotated(
    x: float, y: float, z: float, t_x: float, t_y: float, t_z: float
) -> Tuple[float, float, float]:
    cx, sx = math.cos(t_x), math.sin(t_x)
    cy, sy = math.cos(t_y), math.sin(t_y)
    cz, sz = math.cos(t_z), math.sin(t_z)
    return (
        x * cy * cz + y * (sx * sy * cz - cx * sz) + z * (cx * sy * cz + sx * sz),
        x * cy * sz + y * (sx * sy * sz + cx * cz) + z * (cx * sy * sz + sx * cz),
        x * (-sy) + y * sx * cy + z * cx * cy,
    )


def rotate_point(point: Point, t_x: float, t_y: float, t_z: float) -> Point:
    """Rotate a point about the origin by the angles t_x, t_y, t_z (radians)."""
    return Point(*_rotated(point.x, point.y, point.z, t_x, t_y, t_z))


def rotate_vector(vector: Vector, t_x: float, t_y: float, t_z: float) -> Vector:
    """Rotate a vector by the angles t_x, t_y, t_z (radians)."""
    return Vector(*_rotated(vector.x, vector.y, vector.z, t_x, t_y, t_z))


def move_point(point: Point, x: float, y: float, z: float) -> Point:
    """Shift a point by the given offsets."""
    return Point(point.x + x, point.y + y, point.z + z)