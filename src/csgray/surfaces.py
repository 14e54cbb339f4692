# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Surface definitions for CSG geometry.

Surfaces divide space into two halfspaces (negative and positive).
Use surface.negative() / surface.positive() or -surface / +surface
to get regions.

The set of surfaces is closed: Plane, Sphere and InfiniteCylinder. Each
implements the signed implicit function ``evaluate``, the ray intersection
``intersect`` and the outward ``normal_at``. Box is a bounding volume only
and is not a Surface.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union
import math

from .vector import Vector, Ray, cross, dot, unitize

if TYPE_CHECKING:
    from .geometry import Region

PointLike = Union[Vector, Sequence[float]]

MISS = (False, math.inf)
BEHIND = (False, math.nan)
EMBEDDED = (True, math.nan)


class Boundary(str, Enum):
    """Boundary condition applied when a ray crosses a surface."""
    TRANSMISSION = 'transmission'
    REFLECTIVE = 'reflective'
    VACUUM = 'vacuum'

    @classmethod
    def parse(cls, value: Union['Boundary', str]) -> 'Boundary':
        if isinstance(value, Boundary):
            return value
        try:
            return cls(value)
        except ValueError:
            options = ", ".join(repr(b.value) for b in cls)
            raise ValueError(
                f"boundary must be one of {options}, got {value!r}"
            ) from None


def _nearest_root(pos: float, neg: float) -> Tuple[bool, float]:
    """Pick the smallest non-negative root of a ray/quadric quadratic.

    ``pos`` and ``neg`` are the two roots with ``pos <= neg``. A root of
    exactly zero is only selected when it is the far root.
    """
    if pos < 0 and neg < 0:
        return BEHIND
    if pos < 0 < neg:
        return True, neg
    if 0 < pos < neg:
        return True, pos
    return True, neg


class Surface(ABC):
    """Abstract base class for surfaces.

    A surface divides 3D space into two regions (halfspaces).
    The sign convention is:
        - Negative halfspace: f(x,y,z) <= 0
        - Positive halfspace: f(x,y,z) > 0

    For closed surfaces (sphere, cylinder):
        - Negative = inside
        - Positive = outside

    Attributes:
        name: Optional human-readable name.
        boundary: Boundary condition (transmission, reflective or vacuum).
    """

    def __init__(self, boundary: Union[Boundary, str] = Boundary.TRANSMISSION,
                 name: Optional[str] = None):
        """
        Args:
            boundary: Boundary condition, a Boundary or its string value.
            name: Optional name for the surface.
        """
        self.boundary = Boundary.parse(boundary)
        self.name = name

    @abstractmethod
    def evaluate(self, point: PointLike) -> float:
        """Evaluate surface equation at point.

        Returns positive value if point is on positive side,
        negative if on negative side, zero if on surface.
        """

    @abstractmethod
    def intersect(self, ray: Ray) -> Tuple[bool, float]:
        """Distance along ``ray`` to the nearest forward crossing.

        Returns:
            ``(hit, distance)``. A miss reports ``hit=False``. A ray lying
            in the surface reports ``(True, nan)``.
        """

    @abstractmethod
    def normal_at(self, point: PointLike) -> Vector:
        """Unit normal pointing into the positive halfspace at ``point``."""

    def halfspace(self, point: PointLike) -> int:
        """Return -1 if ``point`` is on the negative side (or on the
        surface), +1 otherwise."""
        return -1 if self.evaluate(point) <= 0 else 1

    @property
    def is_reflective(self) -> bool:
        return self.boundary is Boundary.REFLECTIVE

    @property
    def is_vacuum(self) -> bool:
        return self.boundary is Boundary.VACUUM

    def positive(self) -> 'Region':
        """Get positive halfspace region (f(x,y,z) > 0)."""
        from .geometry import Region
        return Region(self, 1)

    def negative(self) -> 'Region':
        """Get negative halfspace region (f(x,y,z) <= 0)."""
        from .geometry import Region
        return Region(self, -1)

    def interior(self) -> 'Region':
        """Alias for negative()."""
        return self.negative()

    def exterior(self) -> 'Region':
        """Alias for positive()."""
        return self.positive()

    def __pos__(self) -> 'Region':
        """Positive halfspace: +surface"""
        return self.positive()

    def __neg__(self) -> 'Region':
        """Negative halfspace: -surface"""
        return self.negative()

    def __repr__(self) -> str:
        extra = ""
        if self.boundary is not Boundary.TRANSMISSION:
            extra += f", boundary='{self.boundary.value}'"
        if self.name:
            extra += f", name='{self.name}'"
        return f"{self.__class__.__name__}({self._params()}{extra})"

    @abstractmethod
    def _params(self) -> str:
        """Parameter summary used by __repr__."""


class Plane(Surface):
    """Plane through ``point`` with unit ``normal``.

    The sign convention is: f(p) = normal . (p - point)
        - Positive halfspace: on the side the normal points to
        - Negative halfspace: the opposite side, including the plane itself
    """

    def __init__(self, point: PointLike, normal: PointLike,
                 boundary: Union[Boundary, str] = Boundary.TRANSMISSION,
                 name: Optional[str] = None):
        """
        Args:
            point: Any point on the plane.
            normal: Normal vector (normalized on construction).
            boundary: Boundary condition.
            name: Optional surface name.

        Raises:
            DegenerateVectorError: If ``normal`` is zero.
        """
        super().__init__(boundary=boundary, name=name)
        self.point = Vector.of(point)
        self.normal = unitize(Vector.of(normal))

    def evaluate(self, point: PointLike) -> float:
        p = Vector.of(point)
        return dot(self.normal, p) - dot(self.normal, self.point)

    def intersect(self, ray: Ray) -> Tuple[bool, float]:
        numerator = dot(self.point - ray.origin, self.normal)
        denominator = dot(ray.direction, self.normal)
        if denominator == 0.0:
            # Parallel: either embedded in the plane or never reaching it.
            return EMBEDDED if numerator == 0.0 else MISS
        distance = numerator / denominator
        if distance < 0:
            return BEHIND
        return True, distance

    def normal_at(self, point: PointLike) -> Vector:
        return self.normal

    def _params(self) -> str:
        return f"point={tuple(self.point)}, normal={tuple(self.normal)}"


class XPlane(Plane):
    """Plane perpendicular to X axis: x = x0"""

    def __init__(self, x0: float, **kwargs):
        super().__init__((x0, 0.0, 0.0), (1.0, 0.0, 0.0), **kwargs)
        self.x0 = x0

    def _params(self) -> str:
        return f"x0={self.x0}"


class YPlane(Plane):
    """Plane perpendicular to Y axis: y = y0"""

    def __init__(self, y0: float, **kwargs):
        super().__init__((0.0, y0, 0.0), (0.0, 1.0, 0.0), **kwargs)
        self.y0 = y0

    def _params(self) -> str:
        return f"y0={self.y0}"


class ZPlane(Plane):
    """Plane perpendicular to Z axis: z = z0"""

    def __init__(self, z0: float, **kwargs):
        super().__init__((0.0, 0.0, z0), (0.0, 0.0, 1.0), **kwargs)
        self.z0 = z0

    def _params(self) -> str:
        return f"z0={self.z0}"


class Sphere(Surface):
    """Sphere: |p - center|² = R²

    Sign convention:
        - Negative: inside sphere (r <= R)
        - Positive: outside sphere (r > R)
    """

    def __init__(self, center: PointLike, radius: float,
                 boundary: Union[Boundary, str] = Boundary.TRANSMISSION,
                 name: Optional[str] = None):
        """
        Args:
            center: Center point.
            radius: Sphere radius.
        """
        super().__init__(boundary=boundary, name=name)
        if radius <= 0:
            raise ValueError("Sphere radius must be positive")
        self.center = Vector.of(center)
        self.radius = float(radius)

    def evaluate(self, point: PointLike) -> float:
        d = Vector.of(point) - self.center
        return dot(d, d) - self.radius * self.radius

    def intersect(self, ray: Ray) -> Tuple[bool, float]:
        d = ray.origin - self.center
        t = -dot(ray.direction, d)
        discriminant = t * t - dot(d, d) + self.radius * self.radius
        if discriminant < 0:
            return MISS
        root = math.sqrt(discriminant)
        return _nearest_root(t - root, t + root)

    def normal_at(self, point: PointLike) -> Vector:
        return unitize(Vector.of(point) - self.center)

    def _params(self) -> str:
        return f"center={tuple(self.center)}, radius={self.radius}"


class InfiniteCylinder(Surface):
    """Infinite cylinder of ``radius`` around the line through ``center``
    along ``axis``: |(p - center) x axis|² = R²

    Sign convention:
        - Negative: inside the cylinder
        - Positive: outside the cylinder
    """

    def __init__(self, center: PointLike, axis: PointLike, radius: float,
                 boundary: Union[Boundary, str] = Boundary.TRANSMISSION,
                 name: Optional[str] = None):
        """
        Args:
            center: Any point on the cylinder axis.
            axis: Axis direction (normalized on construction).
            radius: Cylinder radius.

        Raises:
            DegenerateVectorError: If ``axis`` is zero.
        """
        super().__init__(boundary=boundary, name=name)
        if radius <= 0:
            raise ValueError("Cylinder radius must be positive")
        self.center = Vector.of(center)
        self.axis = unitize(Vector.of(axis))
        self.radius = float(radius)

    def evaluate(self, point: PointLike) -> float:
        tmp = cross(Vector.of(point) - self.center, self.axis)
        return dot(tmp, tmp) - self.radius * self.radius

    def intersect(self, ray: Ray) -> Tuple[bool, float]:
        ab = self.axis
        ao = ray.origin - self.center
        ao_x_ab = cross(ao, ab)
        v_x_ab = cross(ray.direction, ab)
        a = dot(v_x_ab, v_x_ab)
        b = 2.0 * dot(v_x_ab, ao_x_ab)
        c = dot(ao_x_ab, ao_x_ab) - self.radius * self.radius * dot(ab, ab)

        if a == 0.0:
            # Parallel to the axis: the radial distance never changes.
            return EMBEDDED if c == 0.0 else MISS

        det = b * b - 4.0 * a * c
        if det < 0:
            return MISS
        root = math.sqrt(det)
        pos, neg = (-b - root) / (2.0 * a), (-b + root) / (2.0 * a)
        if not (math.isfinite(pos) and math.isfinite(neg)):
            # Nearly parallel: the crossing lies beyond float range.
            return MISS
        return _nearest_root(pos, neg)

    def normal_at(self, point: PointLike) -> Vector:
        d = Vector.of(point) - self.center
        radial = d - dot(d, self.axis) * self.axis
        return unitize(radial)

    def _params(self) -> str:
        return (f"center={tuple(self.center)}, axis={tuple(self.axis)}, "
                f"radius={self.radius}")


class CylinderX(InfiniteCylinder):
    """Infinite cylinder along X axis: (y-y0)² + (z-z0)² = R²"""

    def __init__(self, y0: float, z0: float, radius: float, **kwargs):
        super().__init__((0.0, y0, z0), (1.0, 0.0, 0.0), radius, **kwargs)


class CylinderY(InfiniteCylinder):
    """Infinite cylinder along Y axis: (x-x0)² + (z-z0)² = R²"""

    def __init__(self, x0: float, z0: float, radius: float, **kwargs):
        super().__init__((x0, 0.0, z0), (0.0, 1.0, 0.0), radius, **kwargs)


class CylinderZ(InfiniteCylinder):
    """Infinite cylinder along Z axis: (x-x0)² + (y-y0)² = R²"""

    def __init__(self, x0: float, y0: float, radius: float, **kwargs):
        super().__init__((x0, y0, 0.0), (0.0, 0.0, 1.0), radius, **kwargs)


class Box:
    """Axis-aligned box used as a bounding and sampling volume.

    A Box is not a Surface: it has no intersection or halfspace test and
    cannot be used in a Region.
    """

    def __init__(self, lower_left: PointLike, upper_right: PointLike):
        """
        Args:
            lower_left: (xmin, ymin, zmin) corner.
            upper_right: (xmax, ymax, zmax) corner.
        """
        lo = Vector.of(lower_left)
        hi = Vector.of(upper_right)
        if lo.x >= hi.x or lo.y >= hi.y or lo.z >= hi.z:
            raise ValueError("Box min values must be less than max values")
        self.lower_left = lo
        self.upper_right = hi

    def contains(self, point: PointLike) -> bool:
        """True if ``point`` lies inside the box or on its faces."""
        x, y, z = point
        lo, hi = self.lower_left, self.upper_right
        return (lo.x <= x <= hi.x) and (lo.y <= y <= hi.y) and (lo.z <= z <= hi.z)

    def __contains__(self, point: PointLike) -> bool:
        return self.contains(point)

    @property
    def center(self) -> Vector:
        """Get box center."""
        return (self.lower_left + self.upper_right) / 2

    @property
    def dimensions(self) -> Vector:
        """Get box dimensions (dx, dy, dz)."""
        return self.upper_right - self.lower_left

    @property
    def bounds(self) -> Tuple[float, float, float, float, float, float]:
        """(xmin, xmax, ymin, ymax, zmin, zmax)"""
        lo, hi = self.lower_left, self.upper_right
        return (lo.x, hi.x, lo.y, hi.y, lo.z, hi.z)

    def __repr__(self) -> str:
        return f"Box({tuple(self.lower_left)}, {tuple(self.upper_right)})"


def halfspace(point: PointLike, surface: Surface) -> int:
    """Which side of ``surface`` the point lies on: -1 or +1.

    Points exactly on the surface belong to the negative side.
    """
    if not isinstance(surface, Surface):
        raise TypeError(f"halfspace() requires a Surface, got {type(surface).__name__}")
    return surface.halfspace(point)
