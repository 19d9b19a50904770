"""Generated graphs whose edges are computed from the vertex on demand.

None of these graphs store vertices or edges; several are infinite. They are
useful as test beds for the search engine and back the ``lazyspf path``
command.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import FrozenSet, Iterable, List, Optional, Tuple

from lazyspf.algorithms.base import Vertex, Weight
from lazyspf.graph.adjacency import Arc

GridCell = Tuple[int, int]

_ORTHOGONAL_MOVES = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIAGONAL_MOVES = ((1, 1), (-1, 1), (-1, -1), (1, -1))


class CycleGraph:
    """Modular cycle over the integers ``0 .. n-1``.

    Edge ``i -> i+1`` for every vertex, closing with ``n-1 -> 0`` unless
    ``closed`` is False (a forward-only chain). With ``bidirectional`` the
    reverse edges ``i -> i-1`` are added as well.
    """

    def __init__(
        self,
        n: int,
        weight: Weight = 1,
        closed: bool = True,
        bidirectional: bool = False,
    ) -> None:
        if n < 1:
            raise ValueError("CycleGraph needs at least one vertex")
        self.n = n
        self.edge_weight = weight
        self.closed = closed
        self.bidirectional = bidirectional

    def _check(self, vertex: Vertex) -> None:
        if not 0 <= vertex < self.n:
            raise ValueError(f"Vertex {vertex!r} is outside 0..{self.n - 1}.")

    def edges(self, vertex: int, out: List[Arc]) -> None:
        self._check(vertex)
        w = self.edge_weight
        if vertex + 1 < self.n:
            out.append(Arc(vertex, vertex + 1, w))
        elif self.closed:
            out.append(Arc(vertex, 0, w))
        if self.bidirectional:
            if vertex > 0:
                out.append(Arc(vertex, vertex - 1, w))
            elif self.closed:
                out.append(Arc(vertex, self.n - 1, w))

    def weight(self, edge: Arc, source: int) -> Weight:
        return edge.weight

    def target(self, edge: Arc) -> int:
        return edge.target


class NumberLatticeGraph:
    """Infinite graph over the non-negative integers.

    From ``v > 0`` there are edges to ``v + 1``, ``v - 1``, ``v // 2`` (for
    even ``v``) and ``2 * v``, all weighing ``1 + 1/v`` as an exact
    :class:`~fractions.Fraction`. Vertex ``0`` has a single edge to ``1`` of
    weight ``1``.

    Edges are represented by their target alone; the weight is derived from
    the source vertex handed to :meth:`weight`.
    """

    def edges(self, vertex: int, out: List[int]) -> None:
        if vertex < 0:
            raise ValueError(f"Vertex {vertex!r} is negative.")
        if vertex == 0:
            out.append(1)
            return
        out.append(vertex + 1)
        out.append(vertex - 1)
        if vertex % 2 == 0:
            out.append(vertex // 2)
        out.append(2 * vertex)

    def weight(self, edge: int, source: int) -> Fraction:
        if source == 0:
            return Fraction(1)
        return 1 + Fraction(1, source)

    def target(self, edge: int) -> int:
        return edge


class BinaryTreeGraph:
    """Infinite binary tree rooted at ``1``: ``v -> 2v`` and ``v -> 2v + 1``."""

    def __init__(self, weight: Weight = 1) -> None:
        self.edge_weight = weight

    def edges(self, vertex: int, out: List[Arc]) -> None:
        if vertex < 1:
            raise ValueError(f"Vertex {vertex!r} is not in the tree.")
        left = 2 * vertex
        out.append(Arc(vertex, left, self.edge_weight))
        out.append(Arc(vertex, left + 1, self.edge_weight))

    def weight(self, edge: Arc, source: int) -> Weight:
        return edge.weight

    def target(self, edge: Arc) -> int:
        return edge.target


class GridGraph:
    """Two-dimensional lattice over ``(x, y)`` cells.

    Unit-weight moves to the four orthogonal neighbours; with ``diagonal``
    also moves to the four diagonal neighbours at weight ``sqrt(2)``. The
    grid is unbounded along an axis whose size is None, otherwise cells
    satisfy ``0 <= x < width`` and ``0 <= y < height``. Blocked cells are
    never entered and have no outgoing edges.
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        blocked: Iterable[GridCell] = (),
        diagonal: bool = False,
    ) -> None:
        if (width is not None and width < 1) or (height is not None and height < 1):
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self.blocked: FrozenSet[GridCell] = frozenset(blocked)
        self.diagonal = diagonal

    def __contains__(self, cell: GridCell) -> bool:
        x, y = cell
        if self.width is not None and not 0 <= x < self.width:
            return False
        if self.height is not None and not 0 <= y < self.height:
            return False
        return cell not in self.blocked

    def edges(self, vertex: GridCell, out: List[Arc]) -> None:
        if vertex not in self:
            return
        x, y = vertex
        for dx, dy in _ORTHOGONAL_MOVES:
            cell = (x + dx, y + dy)
            if cell in self:
                out.append(Arc(vertex, cell, 1))
        if self.diagonal:
            for dx, dy in _DIAGONAL_MOVES:
                cell = (x + dx, y + dy)
                if cell in self:
                    out.append(Arc(vertex, cell, math.sqrt(2)))

    def weight(self, edge: Arc, source: GridCell) -> Weight:
        return edge.weight

    def target(self, edge: Arc) -> GridCell:
        return edge.target
