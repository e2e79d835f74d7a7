"""Immutable undirected graph consumed by the evolutionary engine."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import networkx as nx

from vertexga.exceptions import GraphFormatError

Edge = tuple[int, int]


class Graph:
    """
    Vertex count plus an edge list, frozen after construction.

    Vertices are ``0 .. vertex_count - 1``.  Duplicate edges are kept as
    given (each copy counts once when scoring); self-loops are not
    supported.

    Parameters
    ----------
    vertex_count : int
        Number of vertices, ``>= 0``.
    edges : iterable of (int, int)
        Undirected edges with both endpoints in range.
    name : str
        Label used in logs and batch reports.
    """

    __slots__ = ("_vertex_count", "_edges", "name", "metadata")

    def __init__(
        self,
        vertex_count: int,
        edges: Iterable[Sequence[int]] = (),
        name: str = "graph",
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if vertex_count < 0:
            raise GraphFormatError(f"vertex_count must be >= 0, got {vertex_count}")
        checked: list[Edge] = []
        for edge in edges:
            u, v = int(edge[0]), int(edge[1])
            if not (0 <= u < vertex_count and 0 <= v < vertex_count):
                raise GraphFormatError(
                    f"Edge ({u}, {v}) out of range for {vertex_count} vertices"
                )
            checked.append((u, v))
        self._vertex_count = vertex_count
        self._edges: tuple[Edge, ...] = tuple(checked)
        self.name = name
        self.metadata = dict(metadata or {})

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ------------------------------------------------------------------
    # Cover checks
    # ------------------------------------------------------------------

    def uncovered_edges(self, genome: Sequence[int]) -> int:
        """Count edges with neither endpoint selected in *genome*."""
        return sum(1 for u, v in self._edges if not genome[u] and not genome[v])

    def is_valid_cover(self, genome: Sequence[int]) -> bool:
        return all(genome[u] or genome[v] for u, v in self._edges)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @classmethod
    def from_instance(cls, instance: dict) -> "Graph":
        """
        Build a graph from the standard instance dict::

            {"nodes": [0, 1, ...],
             "edges": [{"source": 0, "target": 1}, ...],
             "metadata": {...}}
        """
        nodes = instance.get("nodes", [])
        index = {node: i for i, node in enumerate(nodes)}
        edges = []
        for edge in instance.get("edges", []):
            try:
                edges.append((index[edge["source"]], index[edge["target"]]))
            except KeyError as exc:
                raise GraphFormatError(f"Edge {edge!r} references unknown node {exc}") from exc
        return cls(
            len(nodes),
            edges,
            name=instance.get("instance_name", "custom"),
            metadata=instance.get("metadata", {}),
        )

    def to_instance(self) -> dict:
        return {
            "nodes": list(range(self._vertex_count)),
            "edges": [{"source": u, "target": v} for u, v in self._edges],
            "metadata": dict(self.metadata),
            "instance_name": self.name,
        }

    @classmethod
    def from_networkx(cls, G, name: str = "graph", metadata: dict | None = None) -> "Graph":  # noqa: N803
        """Relabel *G*'s nodes in sorted order to ``0..n-1`` and freeze it."""
        mapping = {node: idx for idx, node in enumerate(sorted(G.nodes()))}
        edges = [(mapping[u], mapping[v]) for u, v in G.edges()]
        return cls(len(mapping), edges, name=name, metadata=metadata)

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(range(self._vertex_count))
        G.add_edges_from(self._edges)
        return G

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._vertex_count == other._vertex_count and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._vertex_count, self._edges))

    def __repr__(self) -> str:
        return f"<Graph name={self.name!r} n={self._vertex_count} m={self.edge_count}>"
