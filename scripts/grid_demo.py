"""
Target-matching run on the 5×3 grid, whose minimum vertex cover has size 7.

Run:  python scripts/grid_demo.py [seed]
"""

import logging
import sys

sys.path.insert(0, ".")

from vertexga.config import EvolutionConfig, FitnessPolicy
from vertexga.engine.evolution import EvolutionLoop
from vertexga.generators import Grid2DGenerator
from vertexga.reporting import print_progress, print_report

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    graph = Grid2DGenerator().generate(15, rows=5, cols=3)

    config = EvolutionConfig(
        population_size=40,
        max_iterations=50,
        mutation_probability=0.01,
        uncovered_penalty=1000,
        fitness_policy=FitnessPolicy.TARGET_MATCHING,
        target_cover_size=7,
        deviation_penalty=10,
        seed=seed,
    )

    result = EvolutionLoop(graph, config, progress_fn=print_progress).run()
    print_report(result)


if __name__ == "__main__":
    main()
