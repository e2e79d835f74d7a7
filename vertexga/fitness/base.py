"""Abstract base class for fitness strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vertexga.config import EvolutionConfig
from vertexga.genome import Genome
from vertexga.graph import Graph


class FitnessStrategy(ABC):
    """
    Maps a (graph, genome) pair to a scalar fitness; higher is better.

    Subclasses must be pure: the same genome on the same graph always
    scores the same.  Both built-in policies top out at exactly ``0``.

    Example
    -------
    >>> class CoverSize(FitnessStrategy):
    ...     name = "cover_size"
    ...     @classmethod
    ...     def from_config(cls, config):
    ...         return cls(config.uncovered_penalty)
    ...     def score(self, graph, genome):
    ...         return -float(genome.count_ones())
    """

    name: str = "base"

    #: Whether reaching :attr:`optimum` ends the run early.
    stops_on_optimum: bool = False

    #: Theoretical maximum fitness.
    optimum: float = 0.0

    def __init__(self, uncovered_penalty: float) -> None:
        self.uncovered_penalty = float(uncovered_penalty)

    @classmethod
    @abstractmethod
    def from_config(cls, config: EvolutionConfig) -> "FitnessStrategy":
        """Build the strategy from the penalties in *config*."""

    @abstractmethod
    def score(self, graph: Graph, genome: Genome) -> float:
        """Return the fitness of *genome* on *graph*."""

    def coverage_penalty(self, graph: Graph, genome: Genome) -> float:
        return self.uncovered_penalty * graph.uncovered_edges(genome)

    def is_optimal(self, fitness: float) -> bool:
        return fitness == self.optimum

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
