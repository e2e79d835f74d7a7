"""Minimum Vertex Cover problem checks, independent of the search."""

from __future__ import annotations

from typing import Iterable

from networkx.algorithms.approximation import min_weighted_vertex_cover

from vertexga.graph import Graph


def validate_solution(graph: Graph, vertices: Iterable[int]) -> dict:
    """
    Check if every edge has at least one endpoint in the cover set.

    Returns ``{"feasible", "uncovered_edges", "cover_size"}``.
    """
    cover_set = set(vertices)
    uncovered = [
        (u, v) for u, v in graph.edges
        if u not in cover_set and v not in cover_set
    ]
    return {
        "feasible": len(uncovered) == 0,
        "uncovered_edges": len(uncovered),
        "cover_size": len(cover_set),
    }


def baseline_cover(graph: Graph) -> set[int]:
    """A 2-approximate cover from networkx, used as a reference point."""
    return set(min_weighted_vertex_cover(graph.to_networkx()))
