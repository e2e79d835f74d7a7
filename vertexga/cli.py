"""
Command-line entry point.

Usage
-----
    vertexga --graph instance.gr --population-size 60 --seed 1
    vertexga --generator grid_2d --size 15 --rows 5 --cols 3 \\
        --policy target_matching --target-cover-size 7
    vertexga --generator erdos_renyi --size 40 --p 0.2 --runs 10
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from vertexga.config import (
    BatchConfig,
    EvolutionConfig,
    ExecutionConfig,
    FitnessPolicy,
    InstanceConfig,
    TieBreak,
)
from vertexga.engine.evolution import EvolutionLoop
from vertexga.engine.runner import BatchRunner, summarize
from vertexga.exceptions import ConfigurationError, VertexGAError
from vertexga.fitness import STRATEGY_REGISTRY
from vertexga.generators import get_generator, list_generators
from vertexga.graph import Graph
from vertexga.reporting import print_progress, print_report
from vertexga.utils.instance_loader import load_graph

logger = logging.getLogger("vertexga")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vertexga",
        description="Genetic-algorithm search for small vertex covers.",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--graph", "-g", type=str, help="PACE (.gr), DIMACS (.col) or JSON graph file.")
    source.add_argument("--generator", type=str, choices=list_generators(), help="Build a graph procedurally.")
    parser.add_argument("--size", "-n", type=int, help="Vertex count for --generator.")
    parser.add_argument("--rows", type=int, help="grid_2d rows.")
    parser.add_argument("--cols", type=int, help="grid_2d columns.")
    parser.add_argument("--p", type=float, help="erdos_renyi edge probability.")
    parser.add_argument("--m", type=int, help="barabasi_albert attachment count.")
    parser.add_argument("--graph-seed", type=int, help="Seed for random generators.")

    evo = parser.add_argument_group("evolution")
    evo.add_argument("--population-size", type=int, default=40)
    evo.add_argument("--max-iterations", type=int, default=50)
    evo.add_argument("--mutation-probability", type=float, default=0.01)
    evo.add_argument("--uncovered-penalty", type=float, default=1000.0)
    evo.add_argument(
        "--policy", type=str, default=FitnessPolicy.SIZE_MINIMIZING.value,
        choices=sorted(STRATEGY_REGISTRY),
    )
    evo.add_argument("--size-penalty", type=float, default=1.0)
    evo.add_argument("--target-cover-size", type=int)
    evo.add_argument("--deviation-penalty", type=float, default=10.0)
    evo.add_argument("--seed", type=int, help="Defaults to $VERTEXGA_SEED.")
    evo.add_argument(
        "--tie-break", type=str, default=TieBreak.NONE.value,
        choices=[t.value for t in TieBreak],
    )

    parser.add_argument("--runs", type=int, default=1, help="Seeded runs; >1 prints a batch summary.")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress per-generation output.")
    return parser


def _build_graph(args: argparse.Namespace) -> Graph:
    if args.graph:
        return load_graph(args.graph)
    if args.size is None:
        raise ConfigurationError("--generator requires --size")
    params = {
        key: getattr(args, attr)
        for key, attr in (("rows", "rows"), ("cols", "cols"), ("p", "p"), ("m", "m"), ("seed", "graph_seed"))
        if getattr(args, attr) is not None
    }
    return get_generator(args.generator)().generate(args.size, **params)


def _seed(args: argparse.Namespace) -> Optional[int]:
    if args.seed is not None:
        return args.seed
    env_seed = os.environ.get("VERTEXGA_SEED")
    if not env_seed:
        return None
    try:
        return int(env_seed)
    except ValueError:
        raise ConfigurationError(f"VERTEXGA_SEED must be an integer, got {env_seed!r}") from None


def _evolution_config(args: argparse.Namespace) -> EvolutionConfig:
    return EvolutionConfig(
        population_size=args.population_size,
        max_iterations=args.max_iterations,
        mutation_probability=args.mutation_probability,
        uncovered_penalty=args.uncovered_penalty,
        fitness_policy=FitnessPolicy(args.policy),
        size_penalty=args.size_penalty,
        target_cover_size=args.target_cover_size,
        deviation_penalty=args.deviation_penalty,
        seed=_seed(args),
        tie_break=TieBreak(args.tie_break),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=os.environ.get("VERTEXGA_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s | %(message)s",
    )

    try:
        config = _evolution_config(args)
        graph = _build_graph(args)

        if args.runs > 1:
            runner = BatchRunner(BatchConfig(
                evolution=config,
                instance_config=InstanceConfig(),
                execution_config=ExecutionConfig(
                    runs_per_config=args.runs,
                    base_seed=config.seed or 0,
                ),
            ))
            runner.add_graph(graph)
            df = runner.run(show_progress=not args.quiet)
            print(df.to_string(index=False))
            print()
            print(summarize(df).to_string(index=False))
            return 0

        progress = None if args.quiet else print_progress
        result = EvolutionLoop(graph, config, progress_fn=progress).run()
        print_report(result)
        return 0
    except (ValidationError, ValueError, VertexGAError, FileNotFoundError) as exc:
        print(f"vertexga: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
