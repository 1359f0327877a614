"""dagprogress - Heaviest-path progress for every node of a DAG."""
__version__ = "0.1.0"

from dagprogress.graph import (
    CycleError, normalize_adjacencies, normalize_node_options, reverse, subgraph, topological_order,
)
from dagprogress.loader import load_graph, load_graphs_from_dir, validate_graph
from dagprogress.models import GraphDefinition, NodeOptions, NodeSpec, ProgressRecord
from dagprogress.progress import compose_progress, compute_progress, increments
from dagprogress.report import generate_json_report, generate_table_report
from dagprogress.tracking import blocking_info, overall_progress
from dagprogress.weights import critical_path, propagate_path_weights

__all__ = [
    "CycleError", "GraphDefinition", "NodeOptions", "NodeSpec", "ProgressRecord",
    "blocking_info", "compose_progress", "compute_progress", "critical_path",
    "generate_json_report", "generate_table_report", "increments",
    "load_graph", "load_graphs_from_dir", "normalize_adjacencies",
    "normalize_node_options", "overall_progress", "propagate_path_weights",
    "reverse", "subgraph", "topological_order", "validate_graph",
]
