"""
Batch execution engine.

Builds graphs, runs the evolution loop several times per graph with
consecutive seeds, validates every reported cover independently, and
produces a pandas DataFrame of results.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import pandas as pd
from tqdm import tqdm

from vertexga import problem
from vertexga.config import BatchConfig, BatchResult
from vertexga.engine.evolution import EvolutionLoop
from vertexga.generators import get_generator
from vertexga.graph import Graph
from vertexga.utils.instance_loader import load_graphs

logger = logging.getLogger(__name__)


class BatchRunner:
    """
    Runs one :class:`EvolutionConfig` over many graphs and seeds.

    Usage
    -----
    >>> runner = BatchRunner(config)
    >>> df = runner.run()
    """

    def __init__(self, config: BatchConfig) -> None:
        self.config = config
        self._graphs: list[Graph] = []
        self._generated = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_graph(self, graph: Graph) -> None:
        """Queue an already-built graph alongside the configured ones."""
        self._graphs.append(graph)

    def generate_instances(self) -> list[Graph]:
        """
        Build all graphs according to the config.

        Generated graphs are named ``<type>_n<size>_<i>``.
        """
        graphs: list[Graph] = []

        for gen_cfg in self.config.instance_config.generators:
            GenClass = get_generator(gen_cfg.type)
            gen = GenClass()
            for size in gen_cfg.sizes:
                for i in range(gen_cfg.count_per_size):
                    graph = gen.generate(size, **gen_cfg.params)
                    graph.name = f"{gen_cfg.type}_n{size}_{i}"
                    graphs.append(graph)

        for path in self.config.instance_config.graph_files:
            graphs.extend(load_graphs(path))

        self._graphs.extend(graphs)
        self._generated = True
        logger.info("Generated %d instances", len(graphs))
        return list(self._graphs)

    def run(
        self,
        progress_fn: Optional[Callable[[str, int, int], None]] = None,
        show_progress: bool = True,
    ) -> pd.DataFrame:
        """
        Execute every (graph × run) and return a results DataFrame.

        Parameters
        ----------
        progress_fn : callable, optional
            ``progress_fn(instance_name, completed, total)`` after each run.
        show_progress : bool
            Draw a tqdm progress bar.
        """
        if not self._generated:
            self.generate_instances()
        if not self._graphs:
            raise RuntimeError("No graphs to run. Configure generators or graph files.")

        evo_cfg = self.config.evolution
        runs = self.config.execution_config.runs_per_config
        base_seed = self.config.execution_config.base_seed

        records: list[BatchResult] = []
        total = len(self._graphs) * runs
        completed = 0

        with tqdm(total=total, desc="Evolving", unit="run", disable=not show_progress) as pbar:
            for graph in self._graphs:
                baseline = len(problem.baseline_cover(graph))
                for run_idx in range(runs):
                    seed = base_seed + run_idx
                    run_cfg = evo_cfg.model_copy(update={"seed": seed})
                    result = EvolutionLoop(graph, run_cfg).run()

                    check = problem.validate_solution(graph, result.vertices)
                    if check["feasible"] != result.valid:
                        raise RuntimeError(
                            f"Validity mismatch on {graph.name} seed {seed}: "
                            f"loop={result.valid} check={check['feasible']}"
                        )

                    records.append(BatchResult(
                        instance_name=graph.name,
                        instance_generator=graph.metadata.get("generator", "custom"),
                        vertex_count=graph.vertex_count,
                        edge_count=graph.edge_count,
                        policy=result.policy,
                        seed=seed,
                        run_index=run_idx,
                        fitness=result.fitness,
                        cover_size=result.cover_size,
                        feasible=check["feasible"],
                        uncovered_edges=check["uncovered_edges"],
                        baseline_cover_size=baseline,
                        iterations=result.iterations,
                        stopped_early=result.stopped_early,
                        wall_time_seconds=round(result.elapsed_seconds, 6),
                    ))

                    completed += 1
                    pbar.update(1)
                    if progress_fn:
                        progress_fn(graph.name, completed, total)

        df = pd.DataFrame([r.model_dump() for r in records])
        logger.info("Batch complete: %d results collected", len(df))
        return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per-instance aggregate: best/mean cover size, feasibility rate, time."""
    return (
        df.groupby("instance_name")
        .agg(
            vertices=("vertex_count", "first"),
            edges=("edge_count", "first"),
            best_cover=("cover_size", "min"),
            mean_cover=("cover_size", "mean"),
            baseline_cover=("baseline_cover_size", "first"),
            feasible_rate=("feasible", "mean"),
            mean_time_s=("wall_time_seconds", "mean"),
        )
        .reset_index()
    )
