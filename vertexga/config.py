"""Pydantic models defining data contracts for vertexga."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Uncovered-edge penalty must outweigh the size terms by this factor.
PENALTY_DOMINANCE = 10.0


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class FitnessPolicy(str, Enum):
    SIZE_MINIMIZING = "size_minimizing"
    TARGET_MATCHING = "target_matching"


class TieBreak(str, Enum):
    NONE = "none"
    COVER_SIZE = "cover_size"


# ---------------------------------------------------------------------------
# Evolution configuration
# ---------------------------------------------------------------------------

class EvolutionConfig(BaseModel):
    """Hyperparameters of a single evolutionary run."""

    population_size: int = Field(default=40, gt=0, description="Individuals per generation")
    max_iterations: int = Field(default=50, ge=1, description="Generation budget")
    mutation_probability: float = Field(
        default=0.01, ge=0.0, le=1.0,
        description="Per-gene bit-flip probability",
    )
    uncovered_penalty: float = Field(default=1000.0, gt=0, description="Weight per uncovered edge")
    fitness_policy: FitnessPolicy = FitnessPolicy.SIZE_MINIMIZING
    size_penalty: float = Field(default=1.0, gt=0, description="Weight per vertex in the cover")
    target_cover_size: Optional[int] = Field(
        default=None, ge=0,
        description="Cover size sought by the target-matching policy",
    )
    deviation_penalty: float = Field(
        default=10.0, gt=0,
        description="Weight per vertex of distance from the target size",
    )
    seed: Optional[int] = Field(default=None, description="Seed for the shared random generator")
    tie_break: TieBreak = TieBreak.NONE

    @model_validator(mode="after")
    def _check_policy(self) -> "EvolutionConfig":
        if self.fitness_policy == FitnessPolicy.TARGET_MATCHING:
            if self.target_cover_size is None:
                raise ValueError("target_matching policy requires target_cover_size")
            weight, label = self.deviation_penalty, "deviation_penalty"
        else:
            weight, label = self.size_penalty, "size_penalty"
        if self.uncovered_penalty < PENALTY_DOMINANCE * weight:
            raise ValueError(
                f"uncovered_penalty ({self.uncovered_penalty}) must be at least "
                f"{PENALTY_DOMINANCE:g}x {label} ({weight})"
            )
        return self


# ---------------------------------------------------------------------------
# Batch configuration models
# ---------------------------------------------------------------------------

class GeneratorConfig(BaseModel):
    """Configuration for a single graph generator."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Generator type, e.g. 'grid_2d'")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra generator params (e.g. {'p': 0.3})",
        validation_alias=AliasChoices("params", "parameters"),
    )
    sizes: list[int] = Field(..., description="Vertex counts to generate")
    count_per_size: int = Field(default=1, ge=1, description="Instances per size")


class InstanceConfig(BaseModel):
    """Specifies which graphs a batch runs on."""
    generators: list[GeneratorConfig] = Field(default_factory=list)
    graph_files: list[str] = Field(
        default_factory=list,
        description="Paths to PACE, DIMACS or JSON graph files",
    )


class ExecutionConfig(BaseModel):
    """How many seeded runs each instance gets."""
    runs_per_config: int = Field(default=5, ge=1)
    base_seed: int = Field(default=0, description="Run i uses seed base_seed + i")


class BatchConfig(BaseModel):
    """Top-level configuration of a batch of evolutionary runs."""
    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    instance_config: InstanceConfig
    execution_config: ExecutionConfig = Field(default_factory=ExecutionConfig)


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

class GenerationStats(BaseModel):
    """Elite summary for one generation."""
    iteration: int
    fitness: float
    cover_size: int
    valid: bool


class EvolutionResult(BaseModel):
    """Outcome of one evolutionary run."""
    policy: str
    fitness: float
    cover_size: int
    genome: list[int]
    vertices: list[int]
    valid: bool
    iterations: int
    stopped_early: bool = False
    elapsed_seconds: float = 0.0
    history: list[GenerationStats] = Field(default_factory=list)


class BatchResult(BaseModel):
    """A single batch measurement (one instance × one seeded run)."""
    instance_name: str
    instance_generator: str
    vertex_count: int
    edge_count: int
    policy: str
    seed: Optional[int] = None
    run_index: int = 0
    fitness: float
    cover_size: int
    feasible: bool
    uncovered_edges: int = 0
    baseline_cover_size: Optional[int] = None
    iterations: int
    stopped_early: bool = False
    wall_time_seconds: float = 0.0
