#!/usr/bin/env python3
"""
Basic usage example for the csgray CSG library.

This example demonstrates how to:
1. Build a fuel pin cell from surfaces, regions and cells
2. Query the geometry with points
3. Cross boundaries with find_intersection()
4. Walk rays through the geometry with trace()
"""

import numpy as np

import csgray as cg
from csgray import Boundary, Box, Cell, CylinderZ, Geometry, Ray, Sphere, XPlane, YPlane, ZPlane

# =============================================================================
# 1. Create a simple pin cell geometry
# =============================================================================

print("=" * 60)
print("Creating a pin cell geometry")
print("=" * 60)

# Fuel sphere inside a clad cylinder, in a reflective square lattice cell
fuel_surf = Sphere((0, 0, 0), 0.4096, name="fuel")
clad_surf = CylinderZ(0, 0, 0.475, name="clad")
bottom = ZPlane(-1.0, boundary="vacuum")
top = ZPlane(1.0, boundary="vacuum")
sides = (
    +XPlane(-0.63, boundary="reflective")
    & -XPlane(0.63, boundary="reflective")
    & +YPlane(-0.63, boundary="reflective")
    & -YPlane(0.63, boundary="reflective")
)

# -surface is the inside (negative halfspace), +surface the outside.
# & is intersection, | is union, ~ is complement.
fuel = Cell.from_region(-fuel_surf, name="fuel")
clad = Cell.from_region(+fuel_surf & -clad_surf & +bottom & -top, name="clad")
water = Cell.from_region(+clad_surf & +bottom & -top & sides, name="water")

geometry = Geometry([fuel, clad, water], Box((-0.63, -0.63, -1.0), (0.63, 0.63, 1.0)))
print(f"\n{geometry}")
for cell_id, cell in enumerate(geometry, start=1):
    print(f"  Cell {cell_id}: {cell}")

# =============================================================================
# 2. Point queries
# =============================================================================

print("\n" + "=" * 60)
print("Point queries")
print("=" * 60)

test_points = [
    (0.0, 0.0, 0.0),    # Center (fuel)
    (0.45, 0.0, 0.0),   # In cladding
    (0.6, 0.0, 0.0),    # In water
    (1.0, 0.0, 0.0),    # Outside geometry
]

for pt in test_points:
    cell_id = geometry.cell_at(*pt)
    if cell_id is not None:
        print(f"  {pt} -> Cell {cell_id} ({geometry[cell_id].name})")
    else:
        print(f"  {pt} -> void (outside geometry)")

print(f"\n(0, 0, 0) in fuel: {(0, 0, 0) in fuel}")

# =============================================================================
# 3. Single boundary crossings
# =============================================================================

print("\n" + "=" * 60)
print("Boundary crossings")
print("=" * 60)

ray = Ray.from_direction((0, 0, 0), (1, 0, 0))
for _ in range(4):
    crossing = cg.find_intersection(ray, geometry)
    print(f"  crossed region {crossing.region_index} ({crossing.boundary.value}) "
          f"-> origin {crossing.ray.origin}")
    ray = crossing.ray

# =============================================================================
# 4. Ray walking
# =============================================================================

print("\n" + "=" * 60)
print("Ray tracing")
print("=" * 60)

ray = Ray.from_direction((0, 0, 0), (1, 0.3, 0.2))
result = cg.trace(ray, geometry)
print(f"\n{result}")
for seg in result:
    print(f"  {geometry[seg.cell_id].name}: {seg.length:.4f} cm, "
          f"exit via {seg.boundary.value}")
print(f"\nPath length in fuel: {result.path_length(cell_id=1):.4f} cm")

# Average chord length in the fuel from random rays
rng = np.random.default_rng(42)
fuel_paths = []
for _ in range(200):
    ray = cg.generate_random_ray(geometry.bounding_box, rng)
    result = cg.trace(ray, geometry)
    if result.escaped:
        fuel_paths.append(result.path_length(cell_id=1))
print(f"Mean fuel path over {len(fuel_paths)} random rays: {np.mean(fuel_paths):.4f} cm")

# Boundary conditions are plain enum values
assert bottom.boundary is Boundary.VACUUM

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
