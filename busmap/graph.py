"""Bus route graph and cheapest-path search."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from pathlib import Path

UNREACHABLE = 100000


def _int_triples(text: str) -> list[tuple[int, int, int]]:
    """Parse whitespace-separated integers in threes, stopping at the first bad token."""
    tokens = iter(text.split())
    triples = []
    for group in zip(tokens, tokens, tokens):
        try:
            a, b, c = (int(token) for token in group)
        except ValueError:
            break
        triples.append((a, b, c))
    return triples


def read_bus_route(path) -> list[tuple[int, int, int]]:
    """Read ``u v weight`` triples from a route file; a missing file gives no edges."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return _int_triples(text)


class RoadFinder:
    """Undirected weighted graph over numbered stations."""

    def __init__(self, size: int):
        self.size = size
        self.adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size)]

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self.adjacency[u].append((v, weight))
        self.adjacency[v].append((u, weight))

    def load(self, path) -> None:
        """Add every edge listed in the route file at ``path``."""
        for u, v, weight in read_bus_route(path):
            self.add_edge(u, v, weight)

    def find(self, start: int, end: int, blocked: Iterable[int] = ()) -> tuple[list[int], int]:
        """Return the cheapest path from ``start`` to ``end`` and its cost.

        Nodes in ``blocked`` are never entered. When ``end`` cannot be reached the
        path is empty and the cost is ``UNREACHABLE``.
        """
        for node in (start, end):
            if not 0 <= node < self.size:
                raise ValueError(f"station {node} is outside the graph")

        best = [UNREACHABLE] * (self.size + 1)
        previous: list[int | None] = [None] * (self.size + 1)
        closed = set(blocked)

        best[start] = 0
        previous[start] = start
        queue = [(0, start)]
        while queue:
            cost, node = heapq.heappop(queue)
            if node == end:
                break
            for neighbour, weight in self.adjacency[node]:
                if neighbour not in closed and best[neighbour] > cost + weight:
                    previous[neighbour] = node
                    best[neighbour] = cost + weight
                    heapq.heappush(queue, (best[neighbour], neighbour))

        cost = best[end]
        if cost == UNREACHABLE or previous[end] is None:
            return [], cost

        path = [end]
        node = end
        while node != start:
            node = previous[node]
            path.append(node)
        path.reverse()
        return path, cost