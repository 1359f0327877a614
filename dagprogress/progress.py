"""Per-node progress composition and the main entry point."""
from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from fractions import Fraction
from typing import Any

from dagprogress.graph import normalize_adjacencies, normalize_node_options, reverse, topological_order
from dagprogress.models import NodeOptions, ProgressRecord
from dagprogress.weights import propagate_path_weights

logger = logging.getLogger(__name__)


def _ratio(part: Fraction, total: Fraction) -> Fraction:
    return part / total if total else Fraction(0)


def compose_progress(
    before: Mapping[Hashable, Fraction],
    remaining: Mapping[Hashable, Fraction],
    node_options: Mapping[Hashable, NodeOptions],
) -> dict[Hashable, ProgressRecord]:
    """Combine ancestor and descendant path weights into progress records."""
    progresses: dict[Hashable, ProgressRecord] = {}
    for node, weight_before in before.items():
        weight_remaining = remaining[node]
        own = node_options[node].exact_weight
        total = weight_before + own + weight_remaining
        fraction = _ratio(weight_before + own, total)
        own_fraction = _ratio(own, total)
        progresses[node] = ProgressRecord(
            value=float(fraction),
            before=float(_ratio(weight_before, total)),
            own=float(own_fraction),
            remaining=float(_ratio(weight_remaining, total)),
            raw_value=float(weight_before + own),
            raw_before=float(weight_before),
            raw_own=float(own),
            raw_remaining=float(weight_remaining),
            path_total=float(total),
            fraction=fraction,
            own_fraction=own_fraction,
        )
    return progresses


def compute_progress(
    adjacencies: Mapping[Hashable, Iterable[Hashable]],
    node_options: Mapping[Hashable, NodeOptions | Mapping[str, Any]] | None = None,
) -> dict[Hashable, ProgressRecord]:
    """Compute the progress record of every node in a DAG.

    Raises CycleError if ``adjacencies`` is not acyclic.
    """
    graph = normalize_adjacencies(adjacencies)
    options = normalize_node_options(graph, node_options)

    graph_reversed = reverse(graph)
    order_forward = topological_order(graph)
    order_reverse = order_forward[::-1]

    before = propagate_path_weights(graph, order_forward, options)
    remaining = propagate_path_weights(graph_reversed, order_reverse, options)
    logger.debug(
        "computed progress for %s nodes, %s edges",
        len(graph), sum(len(s) for s in graph.values()),
    )
    return compose_progress(before, remaining, options)


def increments(record: ProgressRecord, steps: int) -> list[float]:
    """Split a node's own share into ``steps`` equal sub-progress points."""
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    start = record.fraction - record.own_fraction
    return [float(start + record.own_fraction * i / steps) for i in range(1, steps + 1)]
