# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
csgray: Constructive Solid Geometry for ray transport

Builds a world from planes, spheres and infinite cylinders combined into
cells, and answers two questions: which cell contains a point, and where
does a ray next cross a boundary (and is it transmitted, reflected or lost
to vacuum).

Example:
    import csgray as cg

    fuel = cg.Sphere((0, 0, 0), 1.0)
    wall = cg.Sphere((0, 0, 0), 5.0, boundary="vacuum")

    geometry = cg.Geometry(
        [
            cg.Cell([-fuel], 1, name="fuel"),
            cg.Cell.from_region(+fuel & -wall, name="moderator"),
        ],
        cg.Box((-5, -5, -5), (5, 5, 5)),
    )

    geometry.find_cell_id((0.5, 0, 0))       # 1
    ray = cg.Ray.from_direction((0, 0, 0), (1, 0, 0))
    new_ray, region, boundary = cg.find_intersection(ray, geometry)
"""

__version__ = "0.1.0"

import logging

from .vector import (
    Vector,
    Ray,
    dot,
    cross,
    magnitude,
    unitize,
)

from .surfaces import (
    Boundary,
    Surface,
    Plane,
    XPlane,
    YPlane,
    ZPlane,
    Sphere,
    InfiniteCylinder,
    CylinderX,
    CylinderY,
    CylinderZ,
    Box,
    halfspace,
)

from .geometry import (
    Region,
    Expression,
    Leaf,
    And,
    Or,
    Not,
    Cell,
    Geometry,
    evaluate,
    is_in_cell,
    find_cell_id,
)

from .tracing import (
    Crossing,
    intersect,
    reflect,
    find_intersection,
    trace,
    TraceResult,
    TraceSegment,
)

from .sampling import (
    random_point,
    random_direction,
    generate_random_ray,
)

from .errors import (
    CsgError,
    DegenerateVectorError,
    DegenerateGeometryError,
    NoIntersectionError,
    CellNotFoundError,
    InvalidCsgTreeError,
)

from .config import get_config, set_config, reset_config

from .plotting import (
    find_cells_grid_z,
    plot_geometry_2d,
    plot_cell_2d,
    CELL_VOID,
    HAS_MATPLOTLIB as HAS_PLOTTING,
)

# Logging: the library logs under the "csgray" logger and stays silent
# unless the application configures logging or calls enable_logging().
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

LOG_NONE = logging.CRITICAL + 10
LOG_ERROR = logging.ERROR
LOG_WARN = logging.WARNING
LOG_INFO = logging.INFO
LOG_DEBUG = logging.DEBUG

_stream_handler = None


def set_log_level(level: int) -> None:
    """Set the level of the csgray logger (LOG_* constants)."""
    logger.setLevel(level)


def get_log_level() -> int:
    return logger.level


def enable_logging(level: int = LOG_INFO) -> None:
    """Print csgray log records to stderr at ``level`` (INFO by default)."""
    global _stream_handler
    if _stream_handler is None:
        _stream_handler = logging.StreamHandler()
        _stream_handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(_stream_handler)
    logger.setLevel(level)


def disable_logging() -> None:
    """Disable logging."""
    logger.setLevel(LOG_NONE)


__all__ = [
    # Vectors
    'Vector',
    'Ray',
    'dot',
    'cross',
    'magnitude',
    'unitize',
    # Surfaces
    'Boundary',
    'Surface',
    'Plane',
    'XPlane',
    'YPlane',
    'ZPlane',
    'Sphere',
    'InfiniteCylinder',
    'CylinderX',
    'CylinderY',
    'CylinderZ',
    'Box',
    'halfspace',
    # Geometry
    'Region',
    'Expression',
    'Leaf',
    'And',
    'Or',
    'Not',
    'Cell',
    'Geometry',
    'evaluate',
    'is_in_cell',
    'find_cell_id',
    # Tracing
    'Crossing',
    'intersect',
    'reflect',
    'find_intersection',
    'trace',
    'TraceResult',
    'TraceSegment',
    # Sampling
    'random_point',
    'random_direction',
    'generate_random_ray',
    # Errors
    'CsgError',
    'DegenerateVectorError',
    'DegenerateGeometryError',
    'NoIntersectionError',
    'CellNotFoundError',
    'InvalidCsgTreeError',
    # Configuration
    'get_config',
    'set_config',
    'reset_config',
    # Logging
    'LOG_NONE',
    'LOG_ERROR',
    'LOG_WARN',
    'LOG_INFO',
    'LOG_DEBUG',
    'set_log_level',
    'get_log_level',
    'enable_logging',
    'disable_logging',
    # Plotting
    'find_cells_grid_z',
    'plot_geometry_2d',
    'plot_cell_2d',
    'CELL_VOID',
    'HAS_PLOTTING',
]
