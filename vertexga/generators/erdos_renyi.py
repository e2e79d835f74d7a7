"""Uniform random graphs for stress-testing the cover search."""

from __future__ import annotations

from typing import Any

import networkx as nx

from vertexga.generators.base import BaseGenerator
from vertexga.graph import Graph


class ErdosRenyiGenerator(BaseGenerator):
    """
    G(n, p) graphs: every vertex pair is an edge with probability *p*.

    Denser graphs push the minimum cover towards ``n - 1``; sparse ones
    leave many isolated vertices that a good cover omits.

    Parameters
    ----------
    p : float, default 0.3
        Edge probability.
    seed : int | None
        Seed for the graph itself; the evolution has its own.
    """

    name = "erdos_renyi"

    def generate(self, size: int, **params: Any) -> Graph:
        p = params.get("p", 0.3)
        seed = params.get("seed", None)

        G = nx.erdos_renyi_graph(size, p, seed=seed)
        return self._from_nx(G, self.name, size, {"p": p, "seed": seed})
