"""Fitness strategies for the vertex cover search."""

from vertexga.config import EvolutionConfig
from vertexga.fitness.base import FitnessStrategy
from vertexga.fitness.size_minimizing import SizeMinimizingFitness
from vertexga.fitness.target_matching import TargetMatchingFitness

# Registry: name → class
STRATEGY_REGISTRY: dict[str, type[FitnessStrategy]] = {
    "size_minimizing": SizeMinimizingFitness,
    "target_matching": TargetMatchingFitness,
}


def get_strategy(name: str) -> type[FitnessStrategy]:
    """Look up a fitness strategy class by name."""
    if name not in STRATEGY_REGISTRY:
        available = ", ".join(sorted(STRATEGY_REGISTRY))
        raise ValueError(f"Unknown fitness strategy '{name}'. Available: {available}")
    return STRATEGY_REGISTRY[name]


def build_strategy(config: EvolutionConfig) -> FitnessStrategy:
    """Instantiate the strategy selected by *config*."""
    return get_strategy(config.fitness_policy.value).from_config(config)


__all__ = [
    "FitnessStrategy",
    "STRATEGY_REGISTRY",
    "get_strategy",
    "build_strategy",
    "SizeMinimizingFitness",
    "TargetMatchingFitness",
]
