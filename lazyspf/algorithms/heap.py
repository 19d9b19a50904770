"""Indexed binary min-heap with decrease-key support.

The heap stores :class:`SearchCandidate` records ordered by cumulative weight
and keeps a vertex -> slot map alongside the array, so a queued vertex can be
found in O(1) and re-keyed in O(log n) instead of being pushed a second time.

Extracted vertices stay in the map with the ``FINALIZED`` sentinel, which lets
the search engine classify every vertex as unseen, frontier or finalized with
a single dict lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional

from lazyspf.algorithms.base import Edge, Vertex, VertexState, Weight

#: Position-map value of vertices that have been extracted.
FINALIZED = -1


@dataclass(eq=False)
class SearchCandidate:
    """Best known route to a vertex.

    Attributes:
        vertex: The vertex this candidate reaches.
        edge: Edge arriving at ``vertex`` (None for the start vertex).
        weight: Cumulative weight from the start vertex.
        predecessor: Candidate the arriving edge leaves from (None for start).
    """

    vertex: Vertex
    edge: Optional[Edge]
    weight: Weight
    predecessor: Optional[SearchCandidate] = None


class Lookup(NamedTuple):
    """Result of :meth:`IndexedHeap.lookup`."""

    state: VertexState
    index: Optional[int]


class IndexedHeap:
    """Binary min-heap of search candidates keyed by cumulative weight.

    Ties between equal weights are broken arbitrarily.
    """

    __slots__ = ("_candidates", "_position")

    def __init__(self) -> None:
        self._candidates: List[SearchCandidate] = []
        self._position: Dict[Vertex, int] = {}

    def __len__(self) -> int:
        return len(self._candidates)

    def __bool__(self) -> bool:
        return bool(self._candidates)

    def __contains__(self, vertex: Vertex) -> bool:
        """Return True if ``vertex`` is currently in the frontier."""
        idx = self._position.get(vertex)
        return idx is not None and idx != FINALIZED

    def __getitem__(self, index: int) -> SearchCandidate:
        return self._candidates[index]

    def peek(self) -> SearchCandidate:
        """Return the minimum candidate without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._candidates:
            raise IndexError("peek from an empty heap")
        return self._candidates[0]

    def lookup(self, vertex: Vertex) -> Lookup:
        """Classify ``vertex`` and return its heap slot when in the frontier."""
        idx = self._position.get(vertex)
        if idx is None:
            return Lookup(VertexState.UNSEEN, None)
        if idx == FINALIZED:
            return Lookup(VertexState.FINALIZED, None)
        return Lookup(VertexState.FRONTIER, idx)

    def insert(self, candidate: SearchCandidate) -> None:
        """Add a candidate for a vertex the heap has never seen.

        Raises:
            ValueError: If the vertex is already queued or finalized.
        """
        if candidate.vertex in self._position:
            raise ValueError(f"Vertex '{candidate.vertex}' was already inserted.")
        self._candidates.append(candidate)
        self._sift_up(len(self._candidates) - 1)

    def extract_min(self) -> SearchCandidate:
        """Remove and return the candidate with the smallest weight.

        The extracted vertex is marked finalized.

        Raises:
            IndexError: If the heap is empty.
        """
        candidates = self._candidates
        if not candidates:
            raise IndexError("extract_min from an empty heap")

        last = candidates.pop()
        if candidates:
            top = candidates[0]
            candidates[0] = last
            self._sift_down(0)
        else:
            top = last
        self._position[top.vertex] = FINALIZED
        return top

    def decrease_key(
        self,
        vertex: Vertex,
        weight: Weight,
        edge: Edge,
        predecessor: Optional[SearchCandidate],
    ) -> SearchCandidate:
        """Reroute a frontier vertex through a cheaper edge.

        The candidate is updated in place and the heap order is restored
        around its slot. Callers must only pass a weight strictly smaller
        than the current one.

        Returns:
            The updated candidate.

        Raises:
            KeyError: If ``vertex`` is not in the frontier.
        """
        idx = self._position.get(vertex)
        if idx is None or idx == FINALIZED:
            raise KeyError(f"Vertex '{vertex}' is not in the frontier.")

        candidate = self._candidates[idx]
        candidate.weight = weight
        candidate.edge = edge
        candidate.predecessor = predecessor
        if not self._sift_down(idx):
            self._sift_up(idx)
        return candidate

    def check_invariants(self) -> None:
        """Verify heap order and position-map consistency.

        Raises:
            AssertionError: On the first violated invariant.
        """
        candidates = self._candidates
        for idx, candidate in enumerate(candidates):
            recorded = self._position.get(candidate.vertex)
            if recorded != idx:
                raise AssertionError(
                    f"Position map has {recorded} for vertex "
                    f"'{candidate.vertex}' stored at slot {idx}."
                )
            if idx > 0:
                parent = candidates[(idx - 1) >> 1]
                if candidate.weight < parent.weight:
                    raise AssertionError(
                        f"Heap order violated at slot {idx}: "
                        f"{candidate.weight!r} < parent {parent.weight!r}."
                    )

        queued = sum(1 for idx in self._position.values() if idx != FINALIZED)
        if queued != len(candidates):
            raise AssertionError(
                f"Position map lists {queued} frontier vertices, "
                f"heap holds {len(candidates)}."
            )

    def _sift_up(self, pos: int) -> None:
        candidates = self._candidates
        position = self._position
        item = candidates[pos]
        while pos > 0:
            parent_pos = (pos - 1) >> 1
            parent = candidates[parent_pos]
            if not item.weight < parent.weight:
                break
            candidates[pos] = parent
            position[parent.vertex] = pos
            pos = parent_pos
        candidates[pos] = item
        position[item.vertex] = pos

    def _sift_down(self, pos: int) -> bool:
        """Move the item at ``pos`` towards the leaves; return True if it moved."""
        candidates = self._candidates
        position = self._position
        end = len(candidates)
        start = pos
        item = candidates[pos]
        while True:
            child_pos = 2 * pos + 1
            if child_pos >= end:
                break
            right_pos = child_pos + 1
            if (
                right_pos < end
                and candidates[right_pos].weight < candidates[child_pos].weight
            ):
                child_pos = right_pos
            child = candidates[child_pos]
            if not child.weight < item.weight:
                break
            candidates[pos] = child
            position[child.vertex] = pos
            pos = child_pos
        candidates[pos] = item
        position[item.vertex] = pos
        return pos > start
