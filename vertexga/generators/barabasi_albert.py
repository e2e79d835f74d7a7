"""Scale-free graphs whose hubs dominate any small cover."""

from __future__ import annotations

from typing import Any

import networkx as nx

from vertexga.generators.base import BaseGenerator
from vertexga.graph import Graph


class BarabasiAlbertGenerator(BaseGenerator):
    """
    Preferential-attachment graphs: each new vertex links to *m*
    existing ones, favouring high degree.

    Selecting the few hubs covers most edges, which makes these a useful
    contrast to the uniform degree of a grid.

    Parameters
    ----------
    m : int, default 3
        Edges added per new vertex; clamped below ``size``.
    seed : int | None
        Seed for the graph itself; the evolution has its own.
    """

    name = "barabasi_albert"

    def generate(self, size: int, **params: Any) -> Graph:
        m = params.get("m", 3)
        seed = params.get("seed", None)

        m = min(m, max(1, size - 1))
        G = nx.barabasi_albert_graph(size, m, seed=seed)
        return self._from_nx(G, self.name, size, {"m": m, "seed": seed})
