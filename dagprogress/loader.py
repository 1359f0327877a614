"""Graph definition loading and validation."""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import yaml

from dagprogress.graph import topological_order
from dagprogress.models import GraphDefinition, NodeSpec

logger = logging.getLogger(__name__)


def load_graph(path: str) -> GraphDefinition:
    """Load a single graph definition from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if "nodes" in data:
        data["nodes"] = [
            NodeSpec(**node) if isinstance(node, dict) else node
            for node in data["nodes"]
        ]
    logger.debug("loaded graph '%s' from %s", data.get("name"), path)
    return GraphDefinition(**data)


def load_graphs_from_dir(directory: str) -> list[GraphDefinition]:
    """Load all graph definitions from .yaml and .yml files in a directory."""
    dir_path = Path(directory)
    paths = sorted(dir_path.glob("*.yaml")) + sorted(dir_path.glob("*.yml"))
    return [load_graph(str(p)) for p in paths]


def validate_graph(definition: GraphDefinition) -> None:
    """Validate that node ids are unique and the graph is acyclic."""
    duplicates = [node_id for node_id, n in Counter(n.id for n in definition.nodes).items() if n > 1]
    if duplicates:
        raise ValueError(
            f"Graph '{definition.name}' declares duplicate nodes: {duplicates}"
        )
    topological_order(definition.adjacencies())
