"""Command trace graph engine: mutation, cycle and frame analysis, rendering."""

from .config import PipelineSettings
from .errors import DuplicateEdgeError, DuplicateNodeError, GraphError, MissingNodeError
from .frames import join_nodes_by_frame, join_nodes_with_zero_degree
from .graph import TraceGraph
from .graph_model import GraphEdge, GraphNode
from .pipeline import PipelinePhase, PipelineRunner
from .scc import (
    collapse_by_command_type,
    command_type_projection,
    strongly_connected_component_ids,
)
from .serializers import to_dot, to_pbtxt
from .visualize import build_default_phases, run_pipeline

__all__ = [
    "GraphNode",
    "GraphEdge",
    "TraceGraph",
    "GraphError",
    "DuplicateNodeError",
    "DuplicateEdgeError",
    "MissingNodeError",
    "strongly_connected_component_ids",
    "command_type_projection",
    "collapse_by_command_type",
    "join_nodes_by_frame",
    "join_nodes_with_zero_degree",
    "to_dot",
    "to_pbtxt",
    "PipelineSettings",
    "PipelinePhase",
    "PipelineRunner",
    "build_default_phases",
    "run_pipeline",
]
