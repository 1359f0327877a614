"""Helpers for tracking a partially completed run over a DAG."""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping

from dagprogress.graph import normalize_adjacencies, reverse
from dagprogress.models import ProgressRecord


def blocking_info(
    adjacencies: Mapping[Hashable, Iterable[Hashable]],
    completed: Iterable[Hashable],
) -> dict[str, list[Hashable]]:
    """Split the nodes not yet completed into blocked and unblocked.

    A node is unblocked once every node with an edge into it is in
    ``completed``; sources are always unblocked until completed.
    """
    completed_set = set(completed)
    predecessors = reverse(normalize_adjacencies(adjacencies))
    blocked, unblocked = [], []
    for node, deps in predecessors.items():
        if node in completed_set:
            continue
        if any(d not in completed_set for d in deps):
            blocked.append(node)
        else:
            unblocked.append(node)
    return {"blocked": blocked, "unblocked": unblocked}


def overall_progress(
    progresses: Mapping[Hashable, ProgressRecord],
    completed: Iterable[Hashable],
) -> float:
    """Return the furthest progress value reached by any completed node."""
    return max((progresses[node].value for node in completed), default=0.0)
