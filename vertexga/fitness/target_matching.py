"""Fitness policy that rewards covers of one exact size."""

from __future__ import annotations

from vertexga.config import EvolutionConfig
from vertexga.fitness.base import FitnessStrategy
from vertexga.genome import Genome
from vertexga.graph import Graph


class TargetMatchingFitness(FitnessStrategy):
    """
    ``-(uncovered_penalty * uncovered) - deviation_penalty * |cover_size - target|``

    Fitness is ``0`` iff the genome is a valid cover of exactly
    ``target_cover_size`` vertices, at which point the run stops.
    """

    name = "target_matching"
    stops_on_optimum = True

    def __init__(
        self,
        uncovered_penalty: float,
        target_cover_size: int,
        deviation_penalty: float = 10.0,
    ) -> None:
        super().__init__(uncovered_penalty)
        self.target_cover_size = int(target_cover_size)
        self.deviation_penalty = float(deviation_penalty)

    @classmethod
    def from_config(cls, config: EvolutionConfig) -> "TargetMatchingFitness":
        return cls(
            config.uncovered_penalty,
            target_cover_size=config.target_cover_size,
            deviation_penalty=config.deviation_penalty,
        )

    def score(self, graph: Graph, genome: Genome) -> float:
        deviation = abs(genome.count_ones() - self.target_cover_size)
        return -self.coverage_penalty(graph, genome) - self.deviation_penalty * deviation
