"""
Genetic operators: initialisation, ranking, crossover, mutation.

Every operator that needs randomness takes the run's shared
``random.Random`` explicitly; none of them creates its own generator.
"""

from __future__ import annotations

import random

from vertexga.config import TieBreak
from vertexga.exceptions import ConfigurationError
from vertexga.genome import Genome, Individual


def initial_population(size: int, length: int, rng: random.Random) -> list[Individual]:
    """Build *size* individuals with uniformly random genes."""
    if size <= 0:
        raise ConfigurationError(f"population size must be positive, got {size}")
    return [Individual(Genome.random(length, rng)) for _ in range(size)]


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def rank_population(
    population: list[Individual],
    tie_break: TieBreak = TieBreak.NONE,
) -> list[Individual]:
    """
    Return *population* sorted by descending fitness.

    With ``TieBreak.NONE`` the order among equal fitness is whatever the
    sort leaves; ``TieBreak.COVER_SIZE`` orders ties by ascending cover
    size, then by genome bits, which is reproducible.
    """
    for ind in population:
        if not ind.evaluated:
            raise RuntimeError(f"Cannot rank unevaluated individual {ind!r}")

    if tie_break == TieBreak.COVER_SIZE:
        return sorted(population, key=lambda ind: (-ind.fitness, ind.cover_size, ind.genome.sort_key()))
    return sorted(population, key=lambda ind: ind.fitness, reverse=True)


def breeding_pair(ranked: list[Individual]) -> tuple[Individual, Individual]:
    """The two top-ranked individuals; every offspring descends from them."""
    if len(ranked) < 2:
        raise ConfigurationError("breeding requires a population of at least 2")
    return ranked[0], ranked[1]


# ---------------------------------------------------------------------------
# Crossover
# ---------------------------------------------------------------------------

def draw_cut_points(length: int, rng: random.Random) -> tuple[int, int]:
    """
    Draw ``a`` uniformly from ``[0, length-2]``, then ``b`` from
    ``[a+1, length-1]``.
    """
    if length < 2:
        raise ConfigurationError(f"two-point crossover needs genomes of length >= 2, got {length}")
    a = rng.randrange(length - 1)
    b = rng.randint(a + 1, length - 1)
    return a, b


def swap_segment(child1: Genome, child2: Genome, a: int, b: int) -> None:
    """Exchange genes ``a..b`` (inclusive) between the two genomes in place."""
    for i in range(a, b + 1):
        g1, g2 = child1.get(i), child2.get(i)
        child1.set(i, g2)
        child2.set(i, g1)


def two_point_crossover(
    parent1: Genome,
    parent2: Genome,
    rng: random.Random,
) -> tuple[Genome, Genome]:
    """
    Produce two children: copies of the parents with one random
    contiguous segment exchanged.  The parents are left untouched.
    """
    if len(parent1) != len(parent2):
        raise ConfigurationError(
            f"parent genomes differ in length ({len(parent1)} != {len(parent2)})"
        )
    a, b = draw_cut_points(len(parent1), rng)
    child1, child2 = parent1.clone(), parent2.clone()
    swap_segment(child1, child2, a, b)
    return child1, child2


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------

def mutate(genome: Genome, probability: float, rng: random.Random) -> int:
    """
    Flip each gene independently with *probability* (in place).

    One uniform draw is consumed per gene regardless of *probability*.
    Returns the number of bits flipped.
    """
    flipped = 0
    for i in range(len(genome)):
        if rng.random() < probability:
            genome.set(i, 1 - genome.get(i))
            flipped += 1
    return flipped
