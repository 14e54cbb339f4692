# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Vector value type and rays.

Points and directions share the immutable ``Vector`` type. Vectors iterate as
``(x, y, z)`` so they unpack like the plain tuples used elsewhere.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Union
import math

from .errors import DegenerateVectorError

# Directions within this of unit length are kept as given.
UNIT_TOL = 1e-12


@dataclass(frozen=True)
class Vector:
    """An (x, y, z) point or direction."""
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, value: Union['Vector', Sequence[float]]) -> 'Vector':
        """Coerce a Vector or any 3-sequence to a Vector."""
        if isinstance(value, Vector):
            return value
        x, y, z = value
        return cls(float(x), float(y), float(z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scale: float) -> 'Vector':
        return Vector(scale * self.x, scale * self.y, scale * self.z)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> 'Vector':
        return Vector(self.x / scale, self.y / scale, self.z / scale)

    def __repr__(self) -> str:
        return f"Vector({self.x:g}, {self.y:g}, {self.z:g})"


def dot(a: Vector, b: Vector) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    return Vector(a.y * b.z - a.z * b.y,
                  a.z * b.x - a.x * b.z,
                  a.x * b.y - a.y * b.x)


def magnitude(a: Vector) -> float:
    """Euclidean length of a vector.

    Typical use is the distance between two points: ``magnitude(p - q)``.
    """
    return math.sqrt(dot(a, a))


def unitize(a: Vector) -> Vector:
    """Return the unit vector along ``a``.

    Raises:
        DegenerateVectorError: If ``a`` has zero length.
    """
    norm = magnitude(a)
    if norm == 0.0:
        raise DegenerateVectorError(f"Cannot unitize zero-length vector {a!r}")
    return Vector(a.x / norm, a.y / norm, a.z / norm)


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and a unit direction.

    Rays are values: crossing a boundary produces a new Ray. Both fields
    accept any 3-sequence; the direction is normalized on construction
    unless it is already unit length to within ``UNIT_TOL``.

    Attributes:
        origin: Starting point of the ray.
        direction: Unit direction vector.

    Raises:
        DegenerateVectorError: If ``direction`` has zero length.
    """
    origin: Vector
    direction: Vector

    def __post_init__(self):
        object.__setattr__(self, 'origin', Vector.of(self.origin))
        direction = Vector.of(self.direction)
        if abs(magnitude(direction) - 1.0) > UNIT_TOL:
            direction = unitize(direction)
        object.__setattr__(self, 'direction', direction)

    @classmethod
    def from_direction(cls, origin: Union[Vector, Sequence[float]],
                       direction: Union[Vector, Sequence[float]]) -> 'Ray':
        """Build a ray, unitizing the direction.

        Raises:
            DegenerateVectorError: If ``direction`` has zero length.
        """
        return cls(Vector.of(origin), unitize(Vector.of(direction)))

    def at(self, t: float) -> Vector:
        """Point at distance ``t`` along the ray."""
        return self.origin + t * self.direction

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
