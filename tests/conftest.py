# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Pytest fixtures for csgray tests."""

import pytest


def box_regions(half, boundary="transmission"):
    """Six plane regions bounding the cube [-half, half]^3."""
    import csgray as cg

    return [
        +cg.XPlane(-half, boundary=boundary),
        -cg.XPlane(half, boundary=boundary),
        +cg.YPlane(-half, boundary=boundary),
        -cg.YPlane(half, boundary=boundary),
        +cg.ZPlane(-half, boundary=boundary),
        -cg.ZPlane(half, boundary=boundary),
    ]


def all_of(n, first=1):
    """And(first, first+1, ..., n) as a left-leaning tree."""
    import csgray as cg

    expr = cg.Leaf(first)
    for i in range(first + 1, n + 1):
        expr = expr & i
    return expr


@pytest.fixture(autouse=True)
def _restore_config():
    """Undo configuration changes made by a test."""
    yield
    import csgray as cg
    cg.reset_config()


@pytest.fixture
def sphere_geometry():
    """Sphere of radius 2 inside a 20 cm vacuum-bounded cube.

    Cell 1: inside the sphere.
    Cell 2: between the sphere and the cube.
    Region order of cell 2: +sphere, then x-, x+, y-, y+, z-, z+ planes.
    """
    import csgray as cg

    sphere = cg.Sphere((0, 0, 0), 2.0, name="fuel")
    fuel = cg.Cell([-sphere], 1, name="fuel")
    moderator = cg.Cell([+sphere] + box_regions(10.0, "vacuum"), all_of(7),
                        name="moderator")
    return cg.Geometry([fuel, moderator], cg.Box((-10, -10, -10), (10, 10, 10)))


@pytest.fixture
def pin_geometry():
    """Infinite z-cylinder of radius 1 in a reflective 4x4 square lattice cell.

    Cell 1: inside the cylinder (bounded in z by vacuum planes).
    Cell 2: outside the cylinder.
    """
    import csgray as cg

    cyl = cg.CylinderZ(0, 0, 1.0)
    bottom = cg.ZPlane(-5, boundary="vacuum")
    top = cg.ZPlane(5, boundary="vacuum")
    sides = [
        +cg.XPlane(-2, boundary="reflective"),
        -cg.XPlane(2, boundary="reflective"),
        +cg.YPlane(-2, boundary="reflective"),
        -cg.YPlane(2, boundary="reflective"),
    ]
    pin = cg.Cell.from_region(-cyl & +bottom & -top, name="pin")
    water = cg.Cell([+cyl, +bottom, -top] + sides, all_of(7), name="water")
    return cg.Geometry([pin, water], cg.Box((-2, -2, -5), (2, 2, 5)))


@pytest.fixture
def reflective_box_geometry():
    """A single cell bounded by the reflective cube [-1, 1]^3."""
    import csgray as cg

    cell = cg.Cell(box_regions(1.0, "reflective"), all_of(6), name="box")
    return cg.Geometry([cell], cg.Box((-1, -1, -1), (1, 1, 1)))
