# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for slice rasterisation and plotting."""

import numpy as np
import pytest

import csgray as cg
from csgray import CELL_VOID, find_cells_grid_z


class TestFindCellsGrid:
    """Rasterising a z-slice into cell ids."""

    def test_shape_and_keys(self, sphere_geometry):
        grid = find_cells_grid_z(sphere_geometry, 0.0, resolution=(20, 10))
        assert grid['cell_ids'].shape == (10, 20)
        assert grid['nx'] == 20
        assert grid['ny'] == 10
        assert len(grid['x']) == 20
        assert grid['x_min'] == -10

    def test_pixel_centres(self, sphere_geometry):
        grid = find_cells_grid_z(sphere_geometry, 0.0, bounds=(0, 4, 0, 2),
                                 resolution=(4, 2))
        assert np.allclose(grid['x'], [0.5, 1.5, 2.5, 3.5])
        assert np.allclose(grid['y'], [0.5, 1.5])

    def test_cell_ids(self, sphere_geometry):
        grid = find_cells_grid_z(sphere_geometry, 0.0, resolution=(21, 21))
        ids = grid['cell_ids']
        assert ids[10, 10] == 1
        assert ids[0, 0] == 2
        assert set(np.unique(ids)) == {1, 2}

    def test_void_outside_cells(self, sphere_geometry):
        grid = find_cells_grid_z(sphere_geometry, 0.0, bounds=(20, 30, 20, 30),
                                 resolution=(5, 5))
        assert np.all(grid['cell_ids'] == CELL_VOID)

    def test_rows_run_along_y(self, pin_geometry):
        grid = find_cells_grid_z(pin_geometry, 0.0, bounds=(-2, 2, 0, 2),
                                 resolution=(8, 2))
        # bottom row crosses the pin, top row (y=1.5) misses it
        assert 1 in grid['cell_ids'][0]
        assert 1 not in grid['cell_ids'][1]

    def test_invalid_resolution(self, sphere_geometry):
        with pytest.raises(ValueError):
            find_cells_grid_z(sphere_geometry, 0.0, resolution=(0, 10))

    def test_invalid_bounds(self, sphere_geometry):
        with pytest.raises(ValueError):
            find_cells_grid_z(sphere_geometry, 0.0, bounds=(1, 0, 0, 1))


class TestPlots:
    """Matplotlib rendering of slices."""

    @pytest.fixture(autouse=True)
    def _backend(self):
        mpl = pytest.importorskip("matplotlib")
        mpl.use("Agg")
        yield
        import matplotlib.pyplot as plt
        plt.close('all')

    def test_plot_geometry_returns_axes(self, sphere_geometry):
        ax = cg.plot_geometry_2d(sphere_geometry, 0.0, resolution=(20, 20),
                                 title="Sphere")
        assert ax.get_title() == "Sphere"
        assert ax.get_xlabel() == "x"
        assert len(ax.images) == 1

    def test_accepts_existing_axes(self, sphere_geometry):
        import matplotlib.pyplot as plt
        fig, ax = plt.subplots()
        result = cg.plot_geometry_2d(sphere_geometry, 0.0, resolution=(10, 10), ax=ax)
        assert result is ax

    def test_plot_cell(self, pin_geometry):
        ax = cg.plot_cell_2d(pin_geometry, 0.0, 1, resolution=(16, 16))
        image = ax.images[0].get_array()
        # pin cell in black (0), everything else white (1)
        assert image[8, 8] == 0
        assert image[0, 0] == 1

    def test_plot_cell_unknown_id(self, pin_geometry):
        with pytest.raises(cg.CellNotFoundError):
            cg.plot_cell_2d(pin_geometry, 0.0, 7)
