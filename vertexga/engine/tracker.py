"""Best-ever valid cover across the generations of one run."""

from __future__ import annotations

import logging
from typing import Optional

from vertexga.genome import Individual
from vertexga.graph import Graph

logger = logging.getLogger(__name__)


class BestSolutionTracker:
    """
    Keeps a private copy of the smallest valid cover observed so far.

    The recorded best is only ever replaced by a strictly smaller valid
    cover, so it never regresses when later generations do worse.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.best: Optional[Individual] = None
        self.found_at: Optional[int] = None

    def observe(self, elite: Individual, iteration: int) -> bool:
        """Offer this generation's elite; return True if it became the best."""
        if not self.graph.is_valid_cover(elite.genome):
            return False
        if self.best is not None and elite.cover_size >= self.best.cover_size:
            return False
        self.best = elite.copy()
        self.found_at = iteration
        logger.info(
            "New best valid cover at iteration %d: size %d", iteration, elite.cover_size,
        )
        return True

    def resolve(self, final_elite: Individual) -> tuple[Individual, bool]:
        """
        Pick the reported individual.

        Returns the recorded best with ``valid=True`` or, if no valid cover
        was ever seen, a copy of *final_elite* with its actual validity.
        """
        if self.best is not None:
            return self.best, True
        logger.warning("No valid cover observed; reporting final elite (possibly invalid)")
        return final_elite.copy(), self.graph.is_valid_cover(final_elite.genome)
