# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Ray/surface intersection and boundary crossing.

find_intersection() moves a ray just across the nearest surface of a cell
and applies that surface's boundary condition:

    crossing = find_intersection(ray, geometry)
    if crossing.boundary is Boundary.TRANSMISSION:
        cell_id = find_cell_id(crossing.ray.origin, geometry)

trace() repeats this until the ray reaches a vacuum boundary and records
the path as a TraceResult.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union
import logging
import math

from . import config
from .errors import DegenerateGeometryError, NoIntersectionError
from .geometry import Geometry, Region, find_cell_id
from .surfaces import Boundary, Surface
from .vector import Ray, dot

logger = logging.getLogger(__name__)


class Crossing(NamedTuple):
    """Outcome of a boundary crossing.

    Attributes:
        ray: The ray after the crossing, just past the surface.
        region_index: 1-based index of the region whose surface was hit.
        boundary: Boundary condition applied.
    """
    ray: Ray
    region_index: int
    boundary: Boundary


def intersect(ray: Ray, surface: Surface) -> Tuple[bool, float]:
    """Distance along ``ray`` to its nearest forward crossing of ``surface``.

    Returns:
        ``(hit, distance)``. ``(True, nan)`` means the ray lies in the surface.

    Raises:
        TypeError: If ``surface`` is not a Surface (e.g. a Box).
    """
    if not isinstance(surface, Surface):
        raise TypeError(f"Cannot intersect a ray with {type(surface).__name__}")
    return surface.intersect(ray)


def reflect(ray: Ray, surface: Surface) -> Ray:
    """Reflect ``ray`` off ``surface`` at the ray origin.

    The new ray keeps the origin; its direction is d - 2(d.n)n, with n the
    surface normal at the origin (the plane normal for a Plane).
    """
    n = surface.normal_at(ray.origin)
    d = ray.direction
    return Ray(ray.origin, d - (2.0 * dot(d, n)) * n)


def find_intersection(ray: Ray, target: Union[Geometry, Sequence[Region]],
                      bump: Optional[float] = None) -> Crossing:
    """Move ``ray`` across the nearest surface and apply its boundary.

    Args:
        ray: Ray to advance.
        target: The regions of the cell the ray is in, or a Geometry, in
            which case the cell is located from the ray origin first.
        bump: Distance to push the ray past the surface. Defaults to the
            configured ``bump``.

    Returns:
        Crossing(ray, region_index, boundary).

    Raises:
        CellNotFoundError: ``target`` is a Geometry and no cell contains
            the ray origin.
        NoIntersectionError: No surface lies ahead of the ray.
        DegenerateGeometryError: The ray only touches surfaces it lies in.
        ValueError: If ``bump`` is not a positive finite number.
    """
    if isinstance(target, Geometry):
        cell_id = find_cell_id(ray.origin, target)
        regions = target.cells[cell_id - 1].regions
    else:
        regions = target
    crossing, _ = _cross(ray, regions, bump)
    return crossing


def _cross(ray: Ray, regions: Sequence[Region],
           bump: Optional[float] = None) -> Tuple[Crossing, float]:
    """find_intersection() over regions, also returning the hit distance."""
    if bump is None:
        bump = config.get('bump')
    else:
        bump = config.check('bump', bump)

    nearest = math.inf
    hit_index = 0
    embedded = False
    for index, region in enumerate(regions, start=1):
        hit, distance = region.surface.intersect(ray)
        if not hit:
            continue
        if math.isnan(distance):
            logger.debug("Ray %r lies in surface of region %d", ray, index)
            embedded = True
            continue
        if 0 < distance < nearest:
            nearest = distance
            hit_index = index

    if hit_index == 0:
        if embedded:
            raise DegenerateGeometryError(
                f"Ray {ray!r} lies in a region surface and crosses no other"
            )
        raise NoIntersectionError(f"Ray {ray!r} intersects no region surface")

    surface = regions[hit_index - 1].surface
    moved = Ray(ray.at(nearest + bump), ray.direction)

    if surface.boundary is Boundary.REFLECTIVE:
        reflected = reflect(moved, surface)
        moved = Ray(reflected.at(2.0 * bump), reflected.direction)
    return Crossing(moved, hit_index, surface.boundary), nearest


# =========================================================================
# Ray walking
# =========================================================================

@dataclass(frozen=True)
class TraceSegment:
    """A straight piece of a traced path inside one cell.

    Attributes:
        cell_id: Cell the segment runs through.
        t_enter: Path length at the start of the segment.
        t_exit: Path length where the segment's boundary was crossed.
        boundary: Boundary condition applied at the exit.
        region_index: Region (of the cell) whose surface ended the segment.
    """
    cell_id: int
    t_enter: float
    t_exit: float
    boundary: Boundary
    region_index: int

    @property
    def length(self) -> float:
        """Length of this segment."""
        return self.t_exit - self.t_enter

    def __repr__(self) -> str:
        return (f"TraceSegment(cell={self.cell_id}, length={self.length:.4f}, "
                f"boundary={self.boundary.value})")


class TraceResult:
    """Path of a ray walked through a geometry.

    Example:
        result = trace(ray, geometry)
        for seg in result:
            print(f"{seg.cell_id}: {seg.length}")
    """

    def __init__(self, segments: List[TraceSegment], final_ray: Ray,
                 escaped: bool):
        self._segments = segments
        self.final_ray = final_ray
        self.escaped = escaped

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[TraceSegment]:
        return iter(self._segments)

    def __getitem__(self, key: int) -> TraceSegment:
        return self._segments[key]

    def path_length(self, cell_id: Optional[int] = None) -> float:
        """Total path length, optionally only inside one cell."""
        return sum(seg.length for seg in self._segments
                   if cell_id is None or seg.cell_id == cell_id)

    def cells_hit(self) -> List[int]:
        """Cell ids in the order the ray passed through them."""
        return [seg.cell_id for seg in self._segments]

    def __repr__(self) -> str:
        state = "escaped" if self.escaped else "stopped"
        return f"TraceResult({len(self)} segments, {state})"


def trace(ray: Ray, geometry: Geometry,
          max_crossings: Optional[int] = None) -> TraceResult:
    """Follow ``ray`` through ``geometry`` until it escapes.

    Transmission re-locates the cell at the new position, reflection stays
    in the current cell, and a vacuum boundary ends the walk. Segment
    lengths are surface-to-surface distances; the bump applied at each
    crossing is not counted.

    Args:
        ray: Starting ray.
        geometry: Geometry to walk through.
        max_crossings: Stop after this many crossings. Defaults to the
            configured ``max_crossings``.

    Returns:
        TraceResult; ``escaped`` is False if the crossing limit was hit.

    Raises:
        CellNotFoundError, NoIntersectionError, DegenerateGeometryError:
            Propagated from the lookups and crossings.
        ValueError: If ``max_crossings`` is not a positive integer.
    """
    if max_crossings is None:
        max_crossings = config.get('max_crossings')
    else:
        max_crossings = config.check('max_crossings', max_crossings)

    segments: List[TraceSegment] = []
    cell_id = find_cell_id(ray.origin, geometry)
    travelled = 0.0

    for _ in range(max_crossings):
        regions = geometry.cells[cell_id - 1].regions
        crossing, step = _cross(ray, regions)
        segments.append(TraceSegment(cell_id, travelled, travelled + step,
                                     crossing.boundary, crossing.region_index))
        travelled += step
        logger.debug("Cell %d: crossed region %d (%s) after %g",
                     cell_id, crossing.region_index, crossing.boundary.value, step)
        ray = crossing.ray

        if crossing.boundary is Boundary.VACUUM:
            return TraceResult(segments, ray, escaped=True)
        if crossing.boundary is Boundary.TRANSMISSION:
            cell_id = find_cell_id(ray.origin, geometry)

    logger.info("Trace stopped after %d crossings without escaping", max_crossings)
    return TraceResult(segments, ray, escaped=False)
