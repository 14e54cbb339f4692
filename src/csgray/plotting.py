# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Matplotlib-based plotting of geometry slices.

The slice is rasterised by locating the cell at every pixel centre with
Geometry.cell_at(); pixels in no cell get id 0 (CELL_VOID). find_cells_grid_z()
needs only numpy; the plot functions need matplotlib.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .geometry import Geometry

if TYPE_CHECKING:
    from matplotlib.axes import Axes

try:
    import matplotlib.pyplot as plt
    from matplotlib.colors import ListedColormap
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

CELL_VOID = 0

# Cells are coloured by cycling through these.
CELL_COLORS = ((1.0, 0.0, 0.0, 1.0),
               (0.0, 1.0, 0.0, 1.0),
               (1.0, 0.0, 1.0, 1.0),
               (0.0, 0.0, 1.0, 1.0))
VOID_COLOR = (1.0, 1.0, 1.0, 1.0)


def find_cells_grid_z(geometry: Geometry, z: float,
                      bounds: Optional[Tuple[float, float, float, float]] = None,
                      resolution: Tuple[int, int] = (100, 100)) -> Dict[str, Any]:
    """Locate the cell at each pixel centre of a z-slice.

    Args:
        geometry: Geometry to sample.
        z: Height of the slice.
        bounds: (x_min, x_max, y_min, y_max). Defaults to the geometry's
            bounding box.
        resolution: (nx, ny) pixel counts.

    Returns:
        Dict with keys:
            'cell_ids': int array of shape (ny, nx); row 0 is at y_min.
                CELL_VOID where no cell contains the pixel centre.
            'x', 'y': pixel centre coordinates.
            'nx', 'ny', 'x_min', 'x_max', 'y_min', 'y_max', 'z'.
    """
    if bounds is None:
        x_min, x_max, y_min, y_max, _, _ = geometry.bounding_box.bounds
    else:
        x_min, x_max, y_min, y_max = bounds
    nx, ny = resolution
    if nx <= 0 or ny <= 0:
        raise ValueError(f"resolution must be positive, got {resolution!r}")
    if x_min >= x_max or y_min >= y_max:
        raise ValueError("Slice min values must be less than max values")

    dx = (x_max - x_min) / nx
    dy = (y_max - y_min) / ny
    xs = x_min + dx / 2.0 + dx * np.arange(nx)
    ys = y_min + dy / 2.0 + dy * np.arange(ny)

    cell_ids = np.full((ny, nx), CELL_VOID, dtype=np.int64)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            cell_id = geometry.cell_at(float(x), float(y), float(z))
            if cell_id is not None:
                cell_ids[j, i] = cell_id

    return {
        'cell_ids': cell_ids,
        'x': xs,
        'y': ys,
        'nx': nx,
        'ny': ny,
        'x_min': x_min,
        'x_max': x_max,
        'y_min': y_min,
        'y_max': y_max,
        'z': z,
    }


def _draw(grid: Dict[str, Any], image: np.ndarray, cmap: 'ListedColormap',
          vmax: int, ax: Optional['Axes'], title: Optional[str],
          xlabel: Optional[str], ylabel: Optional[str]) -> 'Axes':
    if ax is None:
        fig, ax = plt.subplots()
    ax.imshow(image, origin='lower', cmap=cmap, vmin=0, vmax=vmax,
              interpolation='nearest',
              extent=(grid['x_min'], grid['x_max'], grid['y_min'], grid['y_max']))
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    return ax


def plot_geometry_2d(geometry: Geometry, z: float,
                     bounds: Optional[Tuple[float, float, float, float]] = None,
                     resolution: Tuple[int, int] = (100, 100),
                     ax: Optional['Axes'] = None,
                     title: Optional[str] = None,
                     xlabel: Optional[str] = 'x',
                     ylabel: Optional[str] = 'y') -> 'Axes':
    """Plot a z-slice of the geometry, one colour per cell.

    Args:
        geometry: Geometry to plot.
        z: Height of the slice.
        bounds: (x_min, x_max, y_min, y_max) view; defaults to the bounding box.
        resolution: (nx, ny) pixel counts.
        ax: Matplotlib axes (creates new if None).
        title, xlabel, ylabel: Labels.

    Returns:
        Matplotlib Axes
    """
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib is required for plotting")

    grid = find_cells_grid_z(geometry, z, bounds, resolution)
    n_cells = len(geometry)
    colors = [VOID_COLOR] + [CELL_COLORS[i % len(CELL_COLORS)] for i in range(n_cells)]
    return _draw(grid, grid['cell_ids'], ListedColormap(colors), n_cells,
                 ax, title, xlabel, ylabel)


def plot_cell_2d(geometry: Geometry, z: float, cell_id: int,
                 bounds: Optional[Tuple[float, float, float, float]] = None,
                 resolution: Tuple[int, int] = (100, 100),
                 ax: Optional['Axes'] = None,
                 title: Optional[str] = None,
                 xlabel: Optional[str] = 'x',
                 ylabel: Optional[str] = 'y') -> 'Axes':
    """Plot a z-slice with one cell in black and everything else white.

    Raises:
        CellNotFoundError: If ``cell_id`` is not a cell of the geometry.
    """
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib is required for plotting")
    geometry.get_cell(cell_id)

    grid = find_cells_grid_z(geometry, z, bounds, resolution)
    mask = np.where(grid['cell_ids'] == cell_id, 0, 1)
    cmap = ListedColormap([(0.0, 0.0, 0.0, 1.0), (1.0, 1.0, 1.0, 1.0)])
    return _draw(grid, mask, cmap, 1, ax, title, xlabel, ylabel)
