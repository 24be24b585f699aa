"""Validation and reporting phase."""

from typing import Any, Dict

from ..pipeline import PipelinePhase
from ..scc import component_count, strongly_connected_component_ids


class ValidationPhase(PipelinePhase):
    phase_name = "validation"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = self.require_graph(context)
        warnings = []
        for node in graph.sorted_nodes():
            missing = [sub_id for sub_id in node.sub_command_ids if graph.get_node(sub_id) is None]
            if missing:
                warnings.append(f"node {node.id} references missing sub-commands {missing}")

        report = {
            "node_count": graph.node_count,
            "edge_count": graph.edge_count,
            "component_count": component_count(strongly_connected_component_ids(graph)),
            "frame_count": context.get("frame_count", 0),
            "unused_count": context.get("unused_count", 0),
            "warnings": warnings,
        }
        return {"validation_report": report}
