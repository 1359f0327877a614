"""Report generation."""
from __future__ import annotations

import json
from collections.abc import Hashable, Mapping

from rich.console import Console
from rich.table import Table

from dagprogress.models import ProgressRecord


def generate_json_report(progresses: Mapping[Hashable, ProgressRecord]) -> str:
    """Generate a JSON report keyed by node."""
    return json.dumps(
        {str(node): record.model_dump(mode="json") for node, record in progresses.items()},
        indent=2,
        ensure_ascii=False,
    )


def generate_table_report(
    progresses: Mapping[Hashable, ProgressRecord],
    title: str = "dagprogress",
) -> str:
    """Generate a Rich table report of node progress."""
    table = Table(title=title)
    for col in ["Node", "Progress", "Before", "Own", "Remaining", "Path total"]:
        table.add_column(col, justify="left" if col == "Node" else "right")
    for node, p in progresses.items():
        table.add_row(
            str(node),
            f"{p.value * 100:.1f}%",
            f"{p.raw_before:g}",
            f"{p.raw_own:g}",
            f"{p.raw_remaining:g}",
            f"{p.path_total:g}",
        )
    console = Console(record=True, width=120)
    console.print(table)
    return console.export_text()
