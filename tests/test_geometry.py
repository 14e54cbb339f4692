# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for the Geometry container and cell lookup."""

import numpy as np
import pytest

import csgray as cg
from csgray import CellNotFoundError, find_cell_id


class TestGeometryConstruction:
    def test_requires_cells(self):
        with pytest.raises(ValueError):
            cg.Geometry([], cg.Box((0, 0, 0), (1, 1, 1)))

    def test_requires_box(self):
        sphere = cg.Sphere((0, 0, 0), 1.0)
        with pytest.raises(TypeError):
            cg.Geometry([cg.Cell([-sphere], 1)], (0, 0, 0, 1, 1, 1))

    def test_rejects_non_cells(self):
        sphere = cg.Sphere((0, 0, 0), 1.0)
        with pytest.raises(TypeError):
            cg.Geometry([-sphere], cg.Box((0, 0, 0), (1, 1, 1)))

    def test_len_and_iteration(self, sphere_geometry):
        assert len(sphere_geometry) == 2
        assert [c.name for c in sphere_geometry] == ["fuel", "moderator"]

    def test_get_cell_is_one_based(self, sphere_geometry):
        assert sphere_geometry.get_cell(1).name == "fuel"
        assert sphere_geometry[2].name == "moderator"

    def test_get_cell_out_of_range(self, sphere_geometry):
        with pytest.raises(CellNotFoundError):
            sphere_geometry.get_cell(3)
        with pytest.raises(KeyError):
            sphere_geometry.get_cell(0)

    def test_geometry_is_immutable(self, sphere_geometry):
        with pytest.raises(AttributeError):
            sphere_geometry.cells = sphere_geometry.cells[:1]
        with pytest.raises(AttributeError):
            sphere_geometry.bounding_box = cg.Box((0, 0, 0), (1, 1, 1))
        assert len(sphere_geometry) == 2


class TestFindCellId:
    def test_inside_sphere(self, sphere_geometry):
        assert find_cell_id((0, 0, 0), sphere_geometry) == 1
        assert find_cell_id((1.9, 0, 0), sphere_geometry) == 1

    def test_moderator(self, sphere_geometry):
        assert find_cell_id((5, 5, 5), sphere_geometry) == 2
        assert find_cell_id((0, -9.9, 0), sphere_geometry) == 2

    def test_surface_point_belongs_to_negative_side(self, sphere_geometry):
        assert find_cell_id((2, 0, 0), sphere_geometry) == 1

    def test_outside_every_cell(self, sphere_geometry):
        with pytest.raises(CellNotFoundError) as excinfo:
            find_cell_id((100, 0, 0), sphere_geometry)
        assert excinfo.value.point == (100.0, 0.0, 0.0)
        assert "100" in str(excinfo.value)

    def test_not_found_is_key_error(self, sphere_geometry):
        with pytest.raises(KeyError):
            sphere_geometry.find_cell_id((0, 0, 50))

    def test_method_forms(self, sphere_geometry):
        assert sphere_geometry.find_cell_id((0, 0, 0)) == 1
        assert sphere_geometry.find_cell((5, 0, 0)).name == "moderator"

    def test_cell_at_returns_none_outside(self, sphere_geometry):
        assert sphere_geometry.cell_at(0, 0, 0) == 1
        assert sphere_geometry.cell_at(0, 0, 100) is None

    def test_overlap_resolves_to_lowest_index(self):
        small = cg.Sphere((0, 0, 0), 1.0)
        big = cg.Sphere((0, 0, 0), 5.0)
        geometry = cg.Geometry(
            [cg.Cell([-big], 1), cg.Cell([-small], 1)],
            cg.Box((-5, -5, -5), (5, 5, 5)),
        )
        assert find_cell_id((0, 0, 0), geometry) == 1
        assert geometry.cells_at(0, 0, 0) == [1, 2]
        assert geometry.cells_at(3, 0, 0) == [1]

    def test_cylinder_geometry(self, pin_geometry):
        assert find_cell_id((0, 0, 0), pin_geometry) == 1
        assert find_cell_id((1.5, 1.5, 0), pin_geometry) == 2
        with pytest.raises(CellNotFoundError):
            find_cell_id((0, 0, 6), pin_geometry)

    def test_deterministic(self, sphere_geometry, pin_geometry):
        """Repeated lookups give identical answers whatever ran in between."""
        rng = np.random.default_rng(7)
        points = [tuple(float(v) for v in p) for p in rng.uniform(-9, 9, size=(200, 3))]

        first = [find_cell_id(p, sphere_geometry) for p in points]
        for p in points[::-1]:
            pin_geometry.cell_at(*p)
        second = [find_cell_id(p, sphere_geometry) for p in points]
        assert first == second

    def test_halfspace_deterministic(self):
        sphere = cg.Sphere((0, 0, 0), 3.0)
        cyl = cg.CylinderX(0, 0, 1.0)
        rng = np.random.default_rng(11)
        points = [tuple(float(v) for v in p) for p in rng.uniform(-5, 5, size=(200, 3))]

        first = [cg.halfspace(p, sphere) for p in points]
        _ = [cg.halfspace(p, cyl) for p in points]
        second = [cg.halfspace(p, sphere) for p in points]
        assert first == second
        assert set(first) == {-1, 1}
