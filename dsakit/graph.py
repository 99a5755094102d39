"""A graph stored as adjacency lists."""

from __future__ import annotations

from typing import Any


class Graph:
    """Adjacency-list graph; edges are undirected unless asked otherwise."""

    def __init__(self) -> None:
        self.adjacency: dict[Any, list[Any]] = {}

    def add_edge(self, u: Any, v: Any, directed: bool = False) -> None:
        """Add an edge from u to v, and from v to u when undirected."""
        self.adjacency.setdefault(u, []).append(v)
        if not directed:
            self.adjacency.setdefault(v, []).append(u)

    def neighbours(self, node: Any) -> list[Any]:
        """Return the nodes reached from node, in the order edges were added."""
        return list(self.adjacency.get(node, ()))

    def __str__(self) -> str:
        return "\n".join(
            f"{node}->" + "".join(f"{other}," for other in others)
            for node, others in self.adjacency.items()
        )