"""
Batch comparison of the size-minimizing search against the networkx
2-approximation on generated graphs.

Run:  python scripts/run_batch.py
"""

import logging
import sys

sys.path.insert(0, ".")

from vertexga.config import (
    BatchConfig,
    EvolutionConfig,
    ExecutionConfig,
    GeneratorConfig,
    InstanceConfig,
)
from vertexga.engine.runner import BatchRunner, summarize

logging.basicConfig(level=logging.WARNING, format="%(levelname)s | %(message)s")


def main():
    config = BatchConfig(
        evolution=EvolutionConfig(population_size=60, max_iterations=200, uncovered_penalty=5000),
        instance_config=InstanceConfig(
            generators=[
                GeneratorConfig(type="erdos_renyi", sizes=[20, 40], params={"p": 0.2, "seed": 1}),
                GeneratorConfig(type="grid_2d", sizes=[25, 36]),
                GeneratorConfig(type="barabasi_albert", sizes=[30], params={"m": 2, "seed": 1}),
            ]
        ),
        execution_config=ExecutionConfig(runs_per_config=5),
    )

    runner = BatchRunner(config)
    df = runner.run()

    print()
    print(summarize(df).to_string(index=False))


if __name__ == "__main__":
    main()
