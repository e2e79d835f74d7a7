"""
Generational loop of the vertex cover genetic algorithm.

Each generation runs EVALUATE → RANK → ELITE_TRACK → REPRODUCE until the
iteration budget is spent or the fitness policy reports a perfect score.
All run state lives in a :class:`RunState` owned by one
:class:`EvolutionLoop`; nothing is kept at module level.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from vertexga.config import EvolutionConfig, EvolutionResult, GenerationStats
from vertexga.engine.tracker import BestSolutionTracker
from vertexga.fitness import FitnessStrategy, build_strategy
from vertexga.genome import Individual
from vertexga.graph import Graph
from vertexga.operators import (
    breeding_pair,
    initial_population,
    mutate,
    rank_population,
    two_point_crossover,
)

logger = logging.getLogger(__name__)

ProgressFn = Callable[[GenerationStats], None]


@dataclass
class RunState:
    """Everything that changes from one generation to the next."""
    population: list[Individual]
    iteration: int = 0
    elite: Optional[Individual] = None
    tracker: Optional[BestSolutionTracker] = None
    history: list[GenerationStats] = field(default_factory=list)
    stopped_early: bool = False


class EvolutionLoop:
    """
    Runs the genetic algorithm on one graph.

    Usage
    -----
    >>> loop = EvolutionLoop(graph, EvolutionConfig(seed=7))
    >>> result = loop.run()
    >>> result.valid, result.cover_size

    Parameters
    ----------
    graph : Graph
        The graph to cover; read-only for the whole run.
    config : EvolutionConfig
        Hyperparameters and fitness policy.
    strategy : FitnessStrategy, optional
        Overrides the strategy that *config* would build.
    rng : random.Random, optional
        Shared generator for every random draw.  Defaults to
        ``random.Random(config.seed)``.
    progress_fn : callable, optional
        Called with the :class:`GenerationStats` of every generation.
    """

    def __init__(
        self,
        graph: Graph,
        config: EvolutionConfig,
        strategy: Optional[FitnessStrategy] = None,
        rng: Optional[random.Random] = None,
        progress_fn: Optional[ProgressFn] = None,
    ) -> None:
        self.graph = graph
        self.config = config
        self.strategy = strategy or build_strategy(config)
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.progress_fn = progress_fn

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def initialize(self) -> RunState:
        population = initial_population(
            self.config.population_size, self.graph.vertex_count, self.rng,
        )
        tracker = None if self.strategy.stops_on_optimum else BestSolutionTracker(self.graph)
        return RunState(population=population, tracker=tracker)

    def evaluate(self, state: RunState) -> None:
        """Recompute fitness and cover size of every individual."""
        for ind in state.population:
            ind.cover_size = ind.genome.count_ones()
            ind.fitness = self.strategy.score(self.graph, ind.genome)

    def rank(self, state: RunState) -> Individual:
        state.population = rank_population(state.population, self.config.tie_break)
        state.elite = state.population[0]
        return state.elite

    def track(self, state: RunState) -> bool:
        """Record the elite; return True if the run should stop now."""
        elite = state.elite
        stats = GenerationStats(
            iteration=state.iteration,
            fitness=elite.fitness,
            cover_size=elite.cover_size,
            valid=self.graph.is_valid_cover(elite.genome),
        )
        state.history.append(stats)
        logger.debug(
            "Iteration %d | fitness = %s | coverSize = %d",
            stats.iteration, stats.fitness, stats.cover_size,
        )
        if self.progress_fn:
            self.progress_fn(stats)

        if state.tracker is not None:
            state.tracker.observe(elite, state.iteration)

        if self.strategy.stops_on_optimum and self.strategy.is_optimal(elite.fitness):
            logger.info(
                "Perfect cover of size %d found at iteration %d",
                elite.cover_size, state.iteration,
            )
            state.stopped_early = True
            return True
        return False

    def reproduce(self, state: RunState) -> None:
        """
        Replace the population: a copy of the elite, then mutated
        children of the top two individuals.  When the size is odd the
        surplus child of the last pair is dropped.
        """
        target = self.config.population_size
        next_population = [state.elite.copy()]
        if target > 1:
            parent1, parent2 = breeding_pair(state.population)
            while len(next_population) < target:
                child1, child2 = two_point_crossover(parent1.genome, parent2.genome, self.rng)
                mutate(child1, self.config.mutation_probability, self.rng)
                mutate(child2, self.config.mutation_probability, self.rng)
                next_population.append(Individual(child1))
                if len(next_population) < target:
                    next_population.append(Individual(child2))
        state.population = next_population

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def step(self, state: RunState) -> bool:
        """Run one generation; return True if the run is finished."""
        state.iteration += 1
        self.evaluate(state)
        self.rank(state)
        if self.track(state) or state.iteration >= self.config.max_iterations:
            return True
        self.reproduce(state)
        return False

    def run(self) -> EvolutionResult:
        logger.info(
            "Evolving covers for %r: policy=%s population=%d iterations=%d",
            self.graph, self.strategy.name,
            self.config.population_size, self.config.max_iterations,
        )
        t0 = time.perf_counter()
        state = self.initialize()
        while not self.step(state):
            pass
        elapsed = time.perf_counter() - t0

        if state.tracker is not None:
            chosen, valid = state.tracker.resolve(state.elite)
        else:
            chosen = state.elite.copy()
            valid = self.graph.is_valid_cover(chosen.genome)

        result = EvolutionResult(
            policy=self.strategy.name,
            fitness=chosen.fitness,
            cover_size=chosen.cover_size,
            genome=chosen.genome.to_list(),
            vertices=chosen.genome.vertices(),
            valid=valid,
            iterations=state.iteration,
            stopped_early=state.stopped_early,
            elapsed_seconds=elapsed,
            history=state.history,
        )
        logger.info(
            "Finished after %d iterations: cover size %d, fitness %s, valid=%s",
            result.iterations, result.cover_size, result.fitness, result.valid,
        )
        return result


def evolve(
    graph: Graph,
    config: Optional[EvolutionConfig] = None,
    progress_fn: Optional[ProgressFn] = None,
) -> EvolutionResult:
    """Run one evolution with *config* (defaults if omitted)."""
    return EvolutionLoop(graph, config or EvolutionConfig(), progress_fn=progress_fn).run()
