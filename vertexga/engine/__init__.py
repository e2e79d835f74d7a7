"""Evolution loop, best-solution tracking and batch execution."""

from vertexga.engine.evolution import EvolutionLoop, RunState, evolve
from vertexga.engine.tracker import BestSolutionTracker

__all__ = ["EvolutionLoop", "RunState", "evolve", "BestSolutionTracker"]
