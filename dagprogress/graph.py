"""Graph normalization, reversal, and topological ordering."""
from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from dagprogress.models import Adjacencies, NodeOptions

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """Raised when an adjacency map is not acyclic."""


def normalize_adjacencies(adjacencies: Mapping[Hashable, Iterable[Hashable]]) -> Adjacencies:
    """Give every referenced node a key, with an empty successor list for sinks."""
    normalized: Adjacencies = {}
    for node, successors in adjacencies.items():
        normalized[node] = list(dict.fromkeys(successors))
    for successors in list(normalized.values()):
        for successor in successors:
            normalized.setdefault(successor, [])
    logger.debug("normalized adjacencies: %s keys -> %s nodes", len(adjacencies), len(normalized))
    return normalized


def normalize_node_options(
    adjacencies: Mapping[Hashable, Iterable[Hashable]],
    node_options: Mapping[Hashable, NodeOptions | Mapping[str, Any]] | None = None,
) -> dict[Hashable, NodeOptions]:
    """Return options for every node in the graph, defaulting weight to 1."""
    options: dict[Hashable, NodeOptions] = {
        node: opts if isinstance(opts, NodeOptions) else NodeOptions(**opts)
        for node, opts in (node_options or {}).items()
    }
    for node, successors in adjacencies.items():
        options.setdefault(node, NodeOptions())
        for successor in successors:
            options.setdefault(successor, NodeOptions())
    return options


def reverse(adjacencies: Mapping[Hashable, Iterable[Hashable]]) -> Adjacencies:
    """Return the transpose of an adjacency map."""
    reversed_adjacencies: Adjacencies = {node: [] for node in adjacencies}
    for node, successors in adjacencies.items():
        for successor in successors:
            predecessors = reversed_adjacencies.setdefault(successor, [])
            if node not in predecessors:
                predecessors.append(node)
    return reversed_adjacencies


def topological_order(adjacencies: Mapping[Hashable, Iterable[Hashable]]) -> list[Hashable]:
    """Order every node so that each edge points from an earlier to a later node.

    Raises CycleError if the graph contains a cycle.
    """
    graph = normalize_adjacencies(adjacencies)
    if not any(graph.values()):
        return list(graph)

    in_degree: dict[Hashable, int] = {node: 0 for node in graph}
    for successors in graph.values():
        for successor in successors:
            in_degree[successor] += 1

    queue = deque(node for node, degree in in_degree.items() if degree == 0)
    order: list[Hashable] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in graph[node]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                queue.append(successor)

    if len(order) != len(graph):
        stuck = [node for node, degree in in_degree.items() if degree > 0]
        logger.debug("cycle detected among %s", stuck)
        raise CycleError(
            f"Graph contains a cycle. Visited {len(order)}/{len(graph)} nodes; "
            f"unresolved: {stuck}"
        )
    logger.debug("topological order over %s nodes", len(order))
    return order


def subgraph(
    adjacencies: Mapping[Hashable, Iterable[Hashable]],
    nodes: Iterable[Hashable],
) -> Adjacencies:
    """Return the sub-graph induced by ``nodes``."""
    keep = set(nodes)
    graph = normalize_adjacencies(adjacencies)
    return {
        node: [s for s in successors if s in keep]
        for node, successors in graph.items()
        if node in keep
    }
