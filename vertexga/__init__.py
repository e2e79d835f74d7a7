"""Genetic-algorithm search for small vertex covers."""

from vertexga.config import EvolutionConfig, EvolutionResult, FitnessPolicy, TieBreak
from vertexga.engine import EvolutionLoop, evolve
from vertexga.genome import Genome, Individual
from vertexga.graph import Graph

__all__ = [
    "EvolutionConfig",
    "EvolutionLoop",
    "EvolutionResult",
    "FitnessPolicy",
    "Genome",
    "Graph",
    "Individual",
    "TieBreak",
    "evolve",
]
