"""Tests for the generational loop."""

import random

import pytest

from vertexga.config import EvolutionConfig, FitnessPolicy, TieBreak
from vertexga.engine.evolution import EvolutionLoop, evolve
from vertexga.exceptions import ConfigurationError
from vertexga.genome import Genome, Individual
from vertexga.graph import Graph

from conftest import GRID_COVER_7


def _grid_target_config(**overrides):
    params = dict(
        fitness_policy=FitnessPolicy.TARGET_MATCHING,
        target_cover_size=7,
        deviation_penalty=10,
        uncovered_penalty=1000,
        seed=1,
    )
    params.update(overrides)
    return EvolutionConfig(**params)


# ── End-to-end ───────────────────────────────────────────────────────

class TestEndToEnd:
    @pytest.mark.parametrize("seed", [0, 1, 42])
    def test_triangle_minimum_cover(self, triangle, seed):
        result = evolve(triangle, EvolutionConfig(seed=seed))
        assert result.valid
        assert result.cover_size == 2
        assert len(result.vertices) == 2
        assert triangle.is_valid_cover(result.genome)
        assert result.iterations == 50
        assert not result.stopped_early

    def test_same_seed_same_result(self, grid_5x3):
        cfg = EvolutionConfig(seed=123, max_iterations=30)
        a = evolve(grid_5x3, cfg)
        b = evolve(grid_5x3, cfg)
        assert a.genome == b.genome
        assert [h.fitness for h in a.history] == [h.fitness for h in b.history]

    def test_history_matches_iterations(self, grid_5x3):
        result = evolve(grid_5x3, EvolutionConfig(seed=2, max_iterations=12))
        assert len(result.history) == result.iterations == 12
        assert [h.iteration for h in result.history] == list(range(1, 13))

    def test_progress_callback(self, triangle):
        seen = []
        evolve(triangle, EvolutionConfig(seed=0, max_iterations=5), progress_fn=seen.append)
        assert [s.iteration for s in seen] == [1, 2, 3, 4, 5]


# ── Elitism ──────────────────────────────────────────────────────────

class TestElitism:
    @pytest.mark.parametrize("seed", [0, 7, 99])
    def test_elite_fitness_never_decreases(self, grid_5x3, seed):
        cfg = EvolutionConfig(seed=seed, max_iterations=40, mutation_probability=0.1)
        history = evolve(grid_5x3, cfg).history
        for prev, cur in zip(history, history[1:]):
            assert cur.fitness >= prev.fitness

    def test_elite_copied_not_referenced(self, grid_5x3):
        loop = EvolutionLoop(grid_5x3, EvolutionConfig(seed=3, population_size=6))
        state = loop.initialize()
        loop.evaluate(state)
        elite = loop.rank(state)
        loop.reproduce(state)
        carried = state.population[0]
        assert carried is not elite
        assert carried.genome is not elite.genome
        assert carried.genome == elite.genome

    def test_all_offspring_descend_from_top_two(self):
        graph = Graph(10, [(i, i + 1) for i in range(9)])
        loop = EvolutionLoop(graph, EvolutionConfig(seed=0, population_size=7, mutation_probability=0.0))
        state = loop.initialize()
        ones = Individual(Genome([1] * 10))
        zeros = Individual(Genome.zeros(10))
        state.population = [ones, zeros] + state.population[2:]
        loop.evaluate(state)
        # force the complementary pair to the top
        ones.fitness, zeros.fitness = 1.0, 0.5
        state.population.sort(key=lambda ind: ind.fitness, reverse=True)
        state.elite = state.population[0]

        loop.reproduce(state)
        children = state.population[1:]
        for c1, c2 in zip(children[0::2], children[1::2]):
            assert all(c1.genome[i] + c2.genome[i] == 1 for i in range(10))


# ── Population size ──────────────────────────────────────────────────

class TestPopulationSize:
    @pytest.mark.parametrize("size", [1, 2, 5, 6, 41])
    def test_constant_size(self, grid_5x3, size):
        loop = EvolutionLoop(grid_5x3, EvolutionConfig(seed=0, population_size=size))
        state = loop.initialize()
        for _ in range(3):
            loop.evaluate(state)
            loop.rank(state)
            loop.reproduce(state)
            assert len(state.population) == size
            assert all(len(ind.genome) == 15 for ind in state.population)

    def test_new_offspring_are_unevaluated(self, grid_5x3):
        loop = EvolutionLoop(grid_5x3, EvolutionConfig(seed=0, population_size=5))
        state = loop.initialize()
        loop.evaluate(state)
        loop.rank(state)
        loop.reproduce(state)
        assert state.population[0].evaluated
        assert not any(ind.evaluated for ind in state.population[1:])

    def test_single_vertex_graph_cannot_breed(self):
        graph = Graph(1, [])
        with pytest.raises(ConfigurationError, match="length >= 2"):
            EvolutionLoop(graph, EvolutionConfig(seed=0, population_size=4)).run()

    def test_single_individual_needs_no_crossover(self):
        graph = Graph(1, [])
        result = EvolutionLoop(graph, EvolutionConfig(seed=0, population_size=1, max_iterations=3)).run()
        assert result.iterations == 3
        assert result.valid


# ── Edgeless graph ───────────────────────────────────────────────────

class TestEdgeless:
    def test_all_zero_genome_becomes_elite(self, edgeless):
        loop = EvolutionLoop(edgeless, EvolutionConfig(seed=0, population_size=10))
        state = loop.initialize()
        state.population[6] = Individual(Genome.zeros(5))
        loop.evaluate(state)
        elite = loop.rank(state)
        assert elite.genome == Genome.zeros(5)
        assert elite.fitness == 0

    def test_converges_to_empty_cover(self, edgeless):
        result = evolve(edgeless, EvolutionConfig(seed=0, mutation_probability=0.05, max_iterations=200))
        assert result.valid
        assert result.cover_size <= 1


# ── Target matching ──────────────────────────────────────────────────

class TestTargetMatching:
    def test_stops_on_perfect_cover(self, grid_5x3):
        loop = EvolutionLoop(grid_5x3, _grid_target_config())
        state = loop.initialize()
        state.population[-1] = Individual(Genome.from_vertices(15, GRID_COVER_7))
        assert loop.step(state) is True
        assert state.stopped_early
        assert state.elite.fitness == 0
        assert state.elite.cover_size == 7
        assert grid_5x3.is_valid_cover(state.elite.genome)

    def test_budget_exhaustion_reports_final_elite(self, grid_5x3):
        # 16 vertices cannot be chosen from 15, so fitness never reaches 0
        result = evolve(grid_5x3, _grid_target_config(target_cover_size=16, max_iterations=3))
        assert not result.stopped_early
        assert result.iterations == 3
        assert result.fitness < 0
        assert result.fitness == result.history[-1].fitness
        assert result.cover_size == result.history[-1].cover_size
        assert result.valid == grid_5x3.is_valid_cover(result.genome)

    def test_no_tracker(self, grid_5x3):
        state = EvolutionLoop(grid_5x3, _grid_target_config()).initialize()
        assert state.tracker is None

    def test_early_stop_result(self, triangle):
        # every size-2 subset of the triangle is a perfect cover
        cfg = EvolutionConfig(
            fitness_policy=FitnessPolicy.TARGET_MATCHING,
            target_cover_size=2,
            seed=0,
            max_iterations=500,
        )
        result = evolve(triangle, cfg)
        assert result.stopped_early
        assert result.fitness == 0
        assert result.cover_size == 2
        assert result.valid
        assert result.iterations < 500


# ── Size minimizing ──────────────────────────────────────────────────

class TestSizeMinimizing:
    def test_best_never_regresses(self, grid_5x3):
        loop = EvolutionLoop(grid_5x3, EvolutionConfig(seed=4, mutation_probability=0.2, max_iterations=60))
        state = loop.initialize()
        # a full cover in generation 1 guarantees a valid elite from the start
        state.population[0] = Individual(Genome([1] * 15))
        while not loop.step(state):
            pass

        valid_sizes = [h.cover_size for h in state.history if h.valid]
        assert len(valid_sizes) == len(state.history) == 60
        chosen, valid = state.tracker.resolve(state.elite)
        assert valid
        assert chosen.cover_size == min(valid_sizes)
        assert state.tracker.found_at == 1 + valid_sizes.index(min(valid_sizes))

    def test_fallback_flags_invalid(self):
        # large sparse graph, tiny budget: no valid cover appears
        graph = Graph(400, [(i, i + 200) for i in range(200)])
        result = evolve(graph, EvolutionConfig(seed=0, population_size=2, max_iterations=1))
        assert result.valid is False
        assert not graph.is_valid_cover(result.genome)

    def test_shared_rng_injection(self, triangle):
        rng = random.Random(8)
        loop = EvolutionLoop(triangle, EvolutionConfig(), rng=rng)
        assert loop.rng is rng

    def test_deterministic_tie_break_runs(self, grid_5x3):
        cfg = EvolutionConfig(seed=5, tie_break=TieBreak.COVER_SIZE, max_iterations=20)
        assert evolve(grid_5x3, cfg).genome == evolve(grid_5x3, cfg).genome
