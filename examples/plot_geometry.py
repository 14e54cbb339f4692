#!/usr/bin/env python3
"""
Plotting example for the csgray CSG library.

Draws a z-slice of a small lattice of spheres, one colour per cell, and a
second slice highlighting a single cell.

Usage:
    python plot_geometry.py [output.png]
"""

import sys

import csgray as cg
from csgray import Box, Cell, Geometry, Sphere, XPlane, YPlane, ZPlane

try:
    import matplotlib.pyplot as plt
except ImportError:
    print("matplotlib is required: pip install matplotlib")
    sys.exit(1)

# 2x2 lattice of spheres in a vacuum-bounded box
spheres = [Sphere((x, y, 0), 0.8) for x in (-1, 1) for y in (-1, 1)]
cells = [Cell.from_region(-s, name=f"sphere {i}") for i, s in enumerate(spheres, start=1)]

outside = (
    +XPlane(-2, boundary="vacuum") & -XPlane(2, boundary="vacuum")
    & +YPlane(-2, boundary="vacuum") & -YPlane(2, boundary="vacuum")
    & +ZPlane(-1, boundary="vacuum") & -ZPlane(1, boundary="vacuum")
)
for s in spheres:
    outside = outside & +s
cells.append(Cell.from_region(outside, name="moderator"))

geometry = Geometry(cells, Box((-2, -2, -1), (2, 2, 1)))

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 5))
cg.plot_geometry_2d(geometry, 0.0, resolution=(200, 200), ax=ax1, title="All cells")
cg.plot_cell_2d(geometry, 0.0, 5, resolution=(200, 200), ax=ax2, title="Moderator")
fig.tight_layout()

output = sys.argv[1] if len(sys.argv) > 1 else "geometry.png"
fig.savefig(output, dpi=150)
print(f"Saved to: {output}")
