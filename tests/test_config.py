"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from vertexga.config import (
    BatchConfig,
    EvolutionConfig,
    FitnessPolicy,
    GeneratorConfig,
    TieBreak,
)


class TestEvolutionConfig:
    def test_defaults(self):
        cfg = EvolutionConfig()
        assert cfg.population_size == 40
        assert cfg.max_iterations == 50
        assert cfg.mutation_probability == 0.01
        assert cfg.fitness_policy == FitnessPolicy.SIZE_MINIMIZING
        assert cfg.tie_break == TieBreak.NONE
        assert cfg.seed is None

    @pytest.mark.parametrize("size", [0, -3])
    def test_non_positive_population(self, size):
        with pytest.raises(ValidationError):
            EvolutionConfig(population_size=size)

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_mutation_probability_range(self, p):
        with pytest.raises(ValidationError):
            EvolutionConfig(mutation_probability=p)

    def test_mutation_probability_bounds_allowed(self):
        assert EvolutionConfig(mutation_probability=0).mutation_probability == 0
        assert EvolutionConfig(mutation_probability=1).mutation_probability == 1

    def test_target_requires_size(self):
        with pytest.raises(ValidationError, match="requires target_cover_size"):
            EvolutionConfig(fitness_policy="target_matching")

    def test_uncovered_penalty_must_dominate_deviation(self):
        with pytest.raises(ValidationError, match="at least 10x deviation_penalty"):
            EvolutionConfig(
                fitness_policy=FitnessPolicy.TARGET_MATCHING,
                target_cover_size=3,
                uncovered_penalty=50,
                deviation_penalty=10,
            )

    def test_uncovered_penalty_must_dominate_size(self):
        with pytest.raises(ValidationError, match="size_penalty"):
            EvolutionConfig(uncovered_penalty=5, size_penalty=1)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            EvolutionConfig(max_iterations=0)

    def test_string_enums(self):
        cfg = EvolutionConfig(tie_break="cover_size")
        assert cfg.tie_break is TieBreak.COVER_SIZE


class TestBatchConfig:
    def test_parameters_alias(self):
        gen = GeneratorConfig(type="erdos_renyi", sizes=[10], parameters={"p": 0.5})
        assert gen.params == {"p": 0.5}

    def test_defaults(self):
        cfg = BatchConfig(instance_config={"generators": []})
        assert cfg.execution_config.runs_per_config == 5
        assert cfg.evolution.population_size == 40
