"""Heaviest-path weight propagation over a topologically ordered DAG."""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from fractions import Fraction
from typing import Any

from dagprogress.graph import normalize_adjacencies, normalize_node_options, topological_order
from dagprogress.models import NodeOptions


def propagate_path_weights(
    adjacencies: Mapping[Hashable, Iterable[Hashable]],
    order: Sequence[Hashable],
    node_options: Mapping[Hashable, NodeOptions],
) -> dict[Hashable, Fraction]:
    """Return, per node, the heaviest weight of any path reaching it.

    The node's own weight is excluded. ``order`` must be topologically
    consistent with ``adjacencies``, so one relaxation pass suffices:
    walking the original graph in forward order yields ancestor weight,
    walking the reversed graph in reverse order yields descendant weight.
    """
    weights: dict[Hashable, Fraction] = {node: Fraction(0) for node in order}
    for node in order:
        candidate = weights[node] + node_options[node].exact_weight
        for successor in adjacencies.get(node, ()):
            if candidate > weights[successor]:
                weights[successor] = candidate
    return weights


def critical_path(
    adjacencies: Mapping[Hashable, Iterable[Hashable]],
    node_options: Mapping[Hashable, NodeOptions | Mapping[str, Any]] | None = None,
) -> list[Hashable]:
    """Return the heaviest source-to-sink path.

    Ties keep the first candidate met in topological order.
    """
    graph = normalize_adjacencies(adjacencies)
    options = normalize_node_options(graph, node_options)
    order = topological_order(graph)
    if not order:
        return []

    dist: dict[Hashable, Fraction] = {node: Fraction(0) for node in order}
    pred: dict[Hashable, Hashable] = {}
    for node in order:
        candidate = dist[node] + options[node].exact_weight
        for successor in graph[node]:
            if successor not in pred or candidate > dist[successor]:
                dist[successor] = candidate
                pred[successor] = node

    # Weights are non-negative, so some sink always ends a heaviest path.
    end, best = order[0], Fraction(-1)
    for node in order:
        if graph[node]:
            continue
        total = dist[node] + options[node].exact_weight
        if total > best:
            end, best = node, total

    path = [end]
    while path[-1] in pred:
        path.append(pred[path[-1]])
    path.reverse()
    return path
