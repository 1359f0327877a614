"""Demo: progress of every stage in a small release pipeline.

Usage:
    cd /path/to/dagprogress
    python examples/demo.py [graph.yaml]
"""
from __future__ import annotations

import logging
import sys

from dagprogress.loader import load_graph, validate_graph
from dagprogress.progress import compute_progress, increments
from dagprogress.report import generate_table_report
from dagprogress.tracking import blocking_info, overall_progress
from dagprogress.weights import critical_path

PIPELINE = {
    "checkout": ["lint", "build"],
    "lint": ["test"],
    "build": ["test", "package"],
    "test": ["package"],
    "package": ["publish"],
    "publish": ["notify"],
}

OPTIONS = {
    "checkout": {"weight": 0},
    "build": {"weight": 3},
    "test": {"weight": 2},
    "notify": {"progress": False},
}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    if len(sys.argv) > 1:
        definition = load_graph(sys.argv[1])
        validate_graph(definition)
        adjacencies, options, title = definition.adjacencies(), definition.node_options(), definition.name
    else:
        adjacencies, options, title = PIPELINE, OPTIONS, "release pipeline"

    progresses = compute_progress(adjacencies, options)
    print(generate_table_report(progresses, title=title))
    print("Critical path:", " -> ".join(map(str, critical_path(adjacencies, options))))

    done = [node for node in ("checkout", "lint", "build") if node in progresses]
    print(f"Done {done}: {overall_progress(progresses, done) * 100:.1f}% overall")
    print("Next up:", blocking_info(adjacencies, done)["unblocked"])

    if "test" in progresses:
        steps = ", ".join(f"{v:.2f}" for v in increments(progresses["test"], 4))
        print(f"'test' animates through: {steps}")


if __name__ == "__main__":
    main()
