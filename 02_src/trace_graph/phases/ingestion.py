"""Graph ingestion phase building a trace graph from node and edge descriptors."""

from typing import Any, Dict, List

from ..errors import MissingNodeError
from ..graph import TraceGraph
from ..pipeline import PipelinePhase


class GraphIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        if isinstance(context.get("graph"), TraceGraph):
            return {"graph": context["graph"]}
        return {"graph": build_graph(context.get("graph_input") or {})}


def build_graph(payload: Dict[str, Any]) -> TraceGraph:
    """Build a graph from ``{"nodes": [...], "edges": [...]}`` descriptors.

    Sub-command references are resolved once every node exists, so a node may
    reference one listed after it.
    """
    graph = TraceGraph()
    pending_sub_commands: List[tuple[int, List[int]]] = []

    for node_payload in payload.get("nodes", []):
        raw_id = node_payload.get("id")
        node = graph.new_node(
            label=str(node_payload.get("label", "")),
            name=str(node_payload.get("name", "")),
            attributes=str(node_payload.get("attributes", "")),
            command_type_id=int(node_payload.get("command_type_id", 0)),
            is_end_of_frame=bool(node_payload.get("is_end_of_frame", False)),
            node_id=None if raw_id is None else int(raw_id),
        )
        sub_commands = [int(sub_id) for sub_id in node_payload.get("sub_commands", [])]
        if sub_commands:
            pending_sub_commands.append((node.id, sub_commands))

    for node_id, sub_commands in pending_sub_commands:
        node = graph.nodes[node_id]
        for sub_id in sub_commands:
            sub_command = graph.get_node(sub_id)
            if sub_command is None:
                raise MissingNodeError(sub_id, role="sub-command node")
            node.add_sub_command_node(sub_command)

    for edge_payload in payload.get("edges", []):
        graph.add_edge_by_id(
            int(edge_payload["source"]),
            int(edge_payload["sink"]),
            label=str(edge_payload.get("label", "")),
        )
    return graph
