"""Console output for runs: per-generation progress and the final report."""

from __future__ import annotations

from vertexga.config import EvolutionResult, GenerationStats


def format_progress(stats: GenerationStats) -> str:
    return (
        f"Iteration {stats.iteration} | fitness = {stats.fitness:g}"
        f" | coverSize = {stats.cover_size}"
    )


def print_progress(stats: GenerationStats) -> None:
    print(format_progress(stats))


def format_report(result: EvolutionResult) -> str:
    genes = "".join(str(b) for b in result.genome)
    lines = [
        "",
        "===== FINAL BEST SOLUTION =====",
        f"Fitness        = {result.fitness:g}",
        f"Cover size     = {result.cover_size}",
        f"Genes (bits)   = {genes}",
        f"Vertices       = {result.vertices}",
        f"Is valid cover = {result.valid}",
        f"Iterations     = {result.iterations}"
        + (" (stopped early)" if result.stopped_early else ""),
        f"Execution time = {result.elapsed_seconds * 1000:.1f} ms",
    ]
    if not result.valid:
        lines.append("WARNING: no valid cover was found; result may leave edges uncovered")
    return "\n".join(lines)


def print_report(result: EvolutionResult) -> None:
    print(format_report(result))
