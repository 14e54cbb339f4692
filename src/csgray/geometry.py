# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Regions, CSG expression trees, cells and the geometry container.

A Region pairs a surface with the halfspace sign a point must have. A Cell
holds an ordered list of regions and a boolean expression over their
1-based indices:

    regions = [-sphere, +plane]
    cell = Cell(regions, And(1, Not(2)))

Expression nodes combine with Python operators:
    - `a & b`: And
    - `a | b`: Or
    - `~a`: Not

Trees may also be written directly over regions and bound afterwards:

    cell = Cell.from_region(-sphere & (+plane | -cylinder))

Evaluation always receives the query point as an argument, so cells can be
queried from several threads at once.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Sequence, Tuple, Union
import logging

from .errors import CellNotFoundError, InvalidCsgTreeError
from .surfaces import Box, PointLike, Surface
from .vector import Vector

logger = logging.getLogger(__name__)


class Region:
    """One side of a surface: the atomic CSG predicate.

    Attributes:
        surface: The bounding surface.
        sign: Required halfspace, -1 (negative side) or +1 (positive side).
    """

    __slots__ = ('surface', 'sign')

    def __init__(self, surface: Surface, sign: int):
        """
        Args:
            surface: A Plane, Sphere or InfiniteCylinder.
            sign: -1 or +1.

        Raises:
            TypeError: If ``surface`` is not a Surface (a Box is rejected).
            ValueError: If ``sign`` is not -1 or +1.
        """
        if not isinstance(surface, Surface):
            raise TypeError(
                f"Region requires a Surface, got {type(surface).__name__}"
            )
        if isinstance(sign, bool) or sign not in (-1, 1):
            raise ValueError(f"Region sign must be -1 or +1, got {sign!r}")
        object.__setattr__(self, 'surface', surface)
        object.__setattr__(self, 'sign', int(sign))

    def contains(self, point: PointLike) -> bool:
        """True if ``point`` lies on this region's side of the surface."""
        return self.surface.halfspace(point) == self.sign

    def __contains__(self, point: PointLike) -> bool:
        return self.contains(point)

    def __invert__(self) -> 'Region':
        """The opposite side of the same surface."""
        return Region(self.surface, -self.sign)

    def __and__(self, other: 'Operand') -> 'And':
        return And(self, other)

    def __or__(self, other: 'Operand') -> 'Or':
        return Or(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self.surface is other.surface and self.sign == other.sign

    def __hash__(self) -> int:
        return hash((id(self.surface), self.sign))

    def __setattr__(self, name, value):
        raise AttributeError("Region is immutable")

    def __repr__(self) -> str:
        sign = '+' if self.sign > 0 else '-'
        return f"{sign}{self.surface!r}"


# =========================================================================
# Expression tree
# =========================================================================

class Expression(ABC):
    """Node of a cell's boolean expression tree. Nodes are immutable."""

    __slots__ = ()

    @abstractmethod
    def evaluate(self, point: PointLike, regions: Sequence[Region]) -> bool:
        """Evaluate this subtree at ``point`` against ``regions``."""

    @abstractmethod
    def children(self) -> Tuple['Node', ...]:
        """Direct operands of this node."""

    def leaves(self) -> Iterator['Node']:
        """Yield every leaf operand (Leaf or unbound Region), left to right."""
        for child in self.children():
            if isinstance(child, Expression) and not isinstance(child, Leaf):
                yield from child.leaves()
            else:
                yield child

    def __and__(self, other: 'Operand') -> 'And':
        return And(self, other)

    def __rand__(self, other: 'Operand') -> 'And':
        return And(other, self)

    def __or__(self, other: 'Operand') -> 'Or':
        return Or(self, other)

    def __ror__(self, other: 'Operand') -> 'Or':
        return Or(other, self)

    def __invert__(self) -> 'Not':
        return Not(self)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")


Node = Union[Expression, Region]
Operand = Union[Expression, Region, int]


def _operand(value: Operand) -> Node:
    """Promote an int to a Leaf and reject anything that is not a node."""
    if isinstance(value, (Expression, Region)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Leaf(value)
    raise InvalidCsgTreeError(
        f"Expression operand must be a node, a Region or a region index, "
        f"got {type(value).__name__}"
    )


def _evaluate(node: Node, point: PointLike, regions: Sequence[Region]) -> bool:
    if isinstance(node, Region):
        raise InvalidCsgTreeError(
            "Expression contains an unbound Region; build the cell with "
            "Cell.from_region()"
        )
    return node.evaluate(point, regions)


class Leaf(Expression):
    """Reference to region ``index`` (1-based) of the owning cell."""

    __slots__ = ('index',)

    def __init__(self, index: int):
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidCsgTreeError(
                f"Leaf index must be an int, got {type(index).__name__}"
            )
        if index < 1:
            raise InvalidCsgTreeError(f"Leaf index must be >= 1, got {index}")
        object.__setattr__(self, 'index', index)

    def evaluate(self, point: PointLike, regions: Sequence[Region]) -> bool:
        return regions[self.index - 1].contains(point)

    def children(self) -> Tuple[Node, ...]:
        return ()

    def leaves(self) -> Iterator[Node]:
        yield self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(('leaf', self.index))

    def __repr__(self) -> str:
        return str(self.index)


class _Binary(Expression):
    __slots__ = ('left', 'right')
    symbol = '?'

    def __init__(self, left: Operand, right: Operand):
        object.__setattr__(self, 'left', _operand(left))
        object.__setattr__(self, 'right', _operand(right))

    def children(self) -> Tuple[Node, ...]:
        return (self.left, self.right)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.symbol, self.left, self.right))

    def __repr__(self) -> str:
        return f"({self.left!r} {self.symbol} {self.right!r})"


class And(_Binary):
    """Point is inside only if inside both operands."""

    __slots__ = ()
    symbol = '&'

    def evaluate(self, point: PointLike, regions: Sequence[Region]) -> bool:
        return (_evaluate(self.left, point, regions)
                and _evaluate(self.right, point, regions))


class Or(_Binary):
    """Point is inside if inside either operand."""

    __slots__ = ()
    symbol = '|'

    def evaluate(self, point: PointLike, regions: Sequence[Region]) -> bool:
        return (_evaluate(self.left, point, regions)
                or _evaluate(self.right, point, regions))


class Not(Expression):
    """Point is inside if outside the operand."""

    __slots__ = ('operand',)

    def __init__(self, operand: Operand):
        object.__setattr__(self, 'operand', _operand(operand))

    def evaluate(self, point: PointLike, regions: Sequence[Region]) -> bool:
        return not _evaluate(self.operand, point, regions)

    def children(self) -> Tuple[Node, ...]:
        return (self.operand,)

    def __invert__(self) -> Node:
        """Double negation: ~(~A) = A"""
        return self.operand

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Not):
            return NotImplemented
        return self.operand == other.operand

    def __hash__(self) -> int:
        return hash(('~', self.operand))

    def __repr__(self) -> str:
        return f"~{self.operand!r}"


def evaluate(expression: Expression, point: PointLike,
             regions: Sequence[Region]) -> bool:
    """Evaluate ``expression`` at ``point`` over ``regions``."""
    return _evaluate(expression, Vector.of(point), regions)


# =========================================================================
# Cells and geometry
# =========================================================================

class Cell:
    """A CSG-defined subvolume. Cells are immutable once validated.

    Attributes:
        regions: Tuple of Regions, addressed 1-based by the expression.
        expression: Boolean expression tree over region indices.
        name: Optional cell name.
    """

    regions: Tuple[Region, ...]
    expression: Expression
    name: Optional[str]

    def __init__(self, regions: Sequence[Region], expression: Operand,
                 name: Optional[str] = None):
        """
        Args:
            regions: Ordered regions of the cell.
            expression: Expression tree, or a bare int for a single region.
            name: Optional cell name.

        Raises:
            InvalidCsgTreeError: If the tree is malformed or references a
                region index outside ``1..len(regions)``.
            TypeError: If an entry of ``regions`` is not a Region.
        """
        regions = tuple(regions)
        if not regions:
            raise InvalidCsgTreeError("Cell requires at least one region")
        for region in regions:
            if not isinstance(region, Region):
                raise TypeError(
                    f"Cell regions must be Region objects, got {type(region).__name__}"
                )
        expression = _operand(expression)
        if isinstance(expression, Region):
            raise InvalidCsgTreeError(
                "Expression is an unbound Region; build the cell with Cell.from_region()"
            )
        for leaf in expression.leaves():
            if isinstance(leaf, Region):
                raise InvalidCsgTreeError(
                    "Expression contains an unbound Region; build the cell "
                    "with Cell.from_region()"
                )
            if leaf.index > len(regions):
                raise InvalidCsgTreeError(
                    f"Leaf index {leaf.index} out of range for cell with "
                    f"{len(regions)} region(s)"
                )
        object.__setattr__(self, 'regions', regions)
        object.__setattr__(self, 'expression', expression)
        object.__setattr__(self, 'name', name)

    @classmethod
    def from_region(cls, tree: Node, name: Optional[str] = None) -> 'Cell':
        """Build a cell from an expression written over Regions.

        Distinct regions are numbered in order of first appearance; a
        region used twice maps to the same index.

        Example:
            cell = Cell.from_region(-sphere & ~(-cylinder))
        """
        regions: List[Region] = []

        def bind(node: Node) -> Expression:
            if isinstance(node, Region):
                if node not in regions:
                    regions.append(node)
                return Leaf(regions.index(node) + 1)
            if isinstance(node, Leaf):
                raise InvalidCsgTreeError(
                    "Cannot mix region indices with Regions in Cell.from_region()"
                )
            if isinstance(node, Not):
                return Not(bind(node.operand))
            if isinstance(node, _Binary):
                return type(node)(bind(node.left), bind(node.right))
            raise InvalidCsgTreeError(f"Unknown expression node {node!r}")

        expression = bind(tree)
        return cls(regions, expression, name=name)

    def region(self, index: int) -> Region:
        """Region by 1-based index."""
        if index < 1 or index > len(self.regions):
            raise IndexError(f"Region index {index} out of range")
        return self.regions[index - 1]

    def contains(self, point: PointLike) -> bool:
        return is_in_cell(point, self)

    def __contains__(self, point: PointLike) -> bool:
        return is_in_cell(point, self)

    def __setattr__(self, name, value):
        raise AttributeError("Cell is immutable")

    def __repr__(self) -> str:
        name = f", name='{self.name}'" if self.name else ""
        return f"Cell({len(self.regions)} regions, {self.expression!r}{name})"


class Geometry:
    """The set of cells making up the modelled world.

    Cells are expected to partition the bounding box; this is not checked.
    When cells overlap, lookups return the lowest-numbered cell.

    Attributes:
        cells: Tuple of cells; cell ids are 1-based positions in it.
        bounding_box: Finite extent used for sampling and plotting.
    """

    cells: Tuple[Cell, ...]
    bounding_box: Box

    def __init__(self, cells: Sequence[Cell], bounding_box: Box):
        cells = tuple(cells)
        if not cells:
            raise ValueError("Geometry requires at least one cell")
        for cell in cells:
            if not isinstance(cell, Cell):
                raise TypeError(f"Geometry cells must be Cell objects, got {type(cell).__name__}")
        if not isinstance(bounding_box, Box):
            raise TypeError(f"bounding_box must be a Box, got {type(bounding_box).__name__}")
        object.__setattr__(self, 'cells', cells)
        object.__setattr__(self, 'bounding_box', bounding_box)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def get_cell(self, cell_id: int) -> Cell:
        """Cell by 1-based id.

        Raises:
            CellNotFoundError: If ``cell_id`` is out of range.
        """
        if cell_id < 1 or cell_id > len(self.cells):
            raise CellNotFoundError(f"Cell {cell_id} not found")
        return self.cells[cell_id - 1]

    def __getitem__(self, cell_id: int) -> Cell:
        return self.get_cell(cell_id)

    def find_cell_id(self, point: PointLike) -> int:
        """See :func:`find_cell_id`."""
        return find_cell_id(point, self)

    def find_cell(self, point: PointLike) -> Cell:
        """The Cell containing ``point``.

        Raises:
            CellNotFoundError: If no cell contains the point.
        """
        return self.cells[find_cell_id(point, self) - 1]

    def cell_at(self, x: float, y: float, z: float) -> Optional[int]:
        """Find the id of the cell containing a point.

        Returns:
            Cell id, or None if no cell contains the point.
        """
        try:
            return find_cell_id((x, y, z), self)
        except CellNotFoundError:
            return None

    def cells_at(self, x: float, y: float, z: float) -> List[int]:
        """Ids of every cell containing a point.

        More than one id means the cells overlap at that point.
        """
        p = Vector(float(x), float(y), float(z))
        return [i for i, cell in enumerate(self.cells, start=1) if is_in_cell(p, cell)]

    def __setattr__(self, name, value):
        raise AttributeError("Geometry is immutable")

    def __repr__(self) -> str:
        return f"Geometry({len(self.cells)} cells, {self.bounding_box!r})"


def is_in_cell(point: PointLike, cell: Cell) -> bool:
    """True if ``point`` satisfies the cell's expression."""
    return cell.expression.evaluate(Vector.of(point), cell.regions)


def find_cell_id(point: PointLike, geometry: Geometry) -> int:
    """1-based id of the first cell containing ``point``.

    Raises:
        CellNotFoundError: If no cell contains the point.
    """
    p = Vector.of(point)
    for cell_id, cell in enumerate(geometry.cells, start=1):
        if cell.expression.evaluate(p, cell.regions):
            return cell_id
    raise CellNotFoundError(f"No cell contains point {tuple(p)}", point=tuple(p))
