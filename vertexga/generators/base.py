"""Abstract base class for all graph generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from vertexga.graph import Graph


class BaseGenerator(ABC):
    """
    Base class for procedural graph builders.

    Every generator returns a frozen :class:`~vertexga.graph.Graph` whose
    ``metadata`` records how it was built::

        {
            "generator": "grid_2d",
            "size": 15,
            "params": {"rows": 5, "cols": 3},
        }
    """

    name: str = "base"

    @abstractmethod
    def generate(self, size: int, **params: Any) -> Graph:
        """
        Generate a graph.

        Parameters
        ----------
        size : int
            Number of vertices in the generated graph.
        **params
            Generator-specific parameters.
        """

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    @staticmethod
    def _from_nx(
        G,  # noqa: N803  (networkx convention)
        generator_name: str,
        size: int,
        params: dict[str, Any],
    ) -> Graph:
        """Freeze a ``networkx.Graph`` with nodes relabelled in sorted order."""
        return Graph.from_networkx(
            G,
            name=f"{generator_name}_n{size}",
            metadata={
                "generator": generator_name,
                "size": size,
                "params": params,
            },
        )
