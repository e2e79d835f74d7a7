"""Fitness policy that trades uncovered edges against cover size."""

from __future__ import annotations

from vertexga.config import EvolutionConfig
from vertexga.fitness.base import FitnessStrategy
from vertexga.genome import Genome
from vertexga.graph import Graph


class SizeMinimizingFitness(FitnessStrategy):
    """
    ``-(uncovered_penalty * uncovered) - size_penalty * cover_size``

    Only the empty cover of an edgeless graph reaches ``0``, so the run
    never stops early under this policy; it spends the full budget and
    keeps the smallest valid cover it saw.
    """

    name = "size_minimizing"
    stops_on_optimum = False

    def __init__(self, uncovered_penalty: float, size_penalty: float = 1.0) -> None:
        super().__init__(uncovered_penalty)
        self.size_penalty = float(size_penalty)

    @classmethod
    def from_config(cls, config: EvolutionConfig) -> "SizeMinimizingFitness":
        return cls(config.uncovered_penalty, size_penalty=config.size_penalty)

    def score(self, graph: Graph, genome: Genome) -> float:
        return -self.coverage_penalty(graph, genome) - self.size_penalty * genome.count_ones()
