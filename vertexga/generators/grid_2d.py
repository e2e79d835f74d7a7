"""2-D grid / lattice graph generator."""

from __future__ import annotations

import math
from typing import Any

import networkx as nx

from vertexga.generators.base import BaseGenerator
from vertexga.graph import Graph


class Grid2DGenerator(BaseGenerator):
    """
    Generates 2-D grid (lattice) graphs.

    Vertex ``r * cols + c`` sits at row ``r``, column ``c``; each vertex
    is joined to its right and lower neighbours.  ``rows=5, cols=3`` gives
    the 15-vertex grid whose minimum vertex cover has size 7.

    If ``rows``/``cols`` are omitted the dimensions are chosen as close to
    square as possible with ``rows * cols == size``.

    Parameters
    ----------
    rows, cols : int, optional
        Explicit dimensions; their product must equal ``size``.
    """

    name = "grid_2d"

    def generate(self, size: int, **params: Any) -> Graph:
        rows = params.get("rows")
        cols = params.get("cols")

        for label, value in (("rows", rows), ("cols", cols)):
            if value is not None and value <= 0:
                raise ValueError(f"Grid {label} must be positive, got {value}")

        if rows is None and cols is None:
            # Find the most-square factorisation of *size*
            rows = int(math.isqrt(size))
            while rows > 0 and size % rows != 0:
                rows -= 1
            if rows == 0:
                rows = 1
            cols = size // rows
        elif rows is None:
            rows = size // cols
        elif cols is None:
            cols = size // rows

        if rows * cols != size:
            raise ValueError(f"Grid {rows}x{cols} does not have {size} vertices")

        G = nx.grid_2d_graph(rows, cols)
        return self._from_nx(G, self.name, size, {"rows": rows, "cols": cols})
