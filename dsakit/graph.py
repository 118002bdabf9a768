"""Weighted directed acyclic graphs with single-source shortest paths."""

from __future__ import annotations

import math


class Graph:
    """A weighted directed graph on vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} out of range 0..{self.vertex_count - 1}"
            )

    def add_edge(self, head: int, tail: int, weight: int) -> None:
        """Add an edge from ``head`` to ``tail`` with the given weight."""
        self._check(head)
        self._check(tail)
        self._adjacency[head].append((tail, weight))

    def format(self) -> str:
        """Render the adjacency lists, one ``vertex -> targets`` line per vertex."""
        return "\n".join(
            " ".join([f"{vertex} ->", *(str(tail) for tail, _ in edges)])
            for vertex, edges in enumerate(self._adjacency)
        )

    def topological_order(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in topological order."""
        self._check(source)
        visited = [False] * self.vertex_count
        finished: list[int] = []

        def visit(vertex: int) -> None:
            visited[vertex] = True
            for tail, _ in self._adjacency[vertex]:
                if not visited[tail]:
                    visit(tail)
            finished.append(vertex)

        visit(source)
        finished.reverse()
        return finished

    def shortest_paths(self, source: int) -> list[float]:
        """Return the shortest distance from ``source`` to every vertex.

        Unreachable vertices get ``math.inf``.
        """
        order = self.topological_order(source)
        dist: list[float] = [math.inf] * self.vertex_count
        dist[source] = 0
        for vertex in order:
            if dist[vertex] == math.inf:
                continue
            for tail, weight in self._adjacency[vertex]:
                if dist[tail] > dist[vertex] + weight:
                    dist[tail] = dist[vertex] + weight
        return dist