# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Exceptions raised by csgray.

Every failure is local to the query in progress: a caller tracing many rays
can catch these per ray and decide whether to drop that history or abort.
"""

from __future__ import annotations
from typing import Optional, Tuple


class CsgError(Exception):
    """Base class for all csgray errors."""


class DegenerateVectorError(CsgError, ValueError):
    """A zero-length vector was unitized."""


class DegenerateGeometryError(CsgError):
    """The ray is embedded in (or runs along) a surface.

    Raised when the only surfaces a ray touches report a degenerate hit,
    so no crossing distance exists.
    """


class NoIntersectionError(CsgError):
    """No region surface lies ahead of the ray."""


class CellNotFoundError(CsgError, KeyError):
    """No cell contains the point (or a cell id is out of range).

    Attributes:
        point: The query point, if the error came from a point lookup.
    """

    def __init__(self, message: str,
                 point: Optional[Tuple[float, float, float]] = None):
        super().__init__(message)
        self.point = point

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ''


class InvalidCsgTreeError(CsgError, ValueError):
    """Malformed expression tree or leaf index out of range."""
