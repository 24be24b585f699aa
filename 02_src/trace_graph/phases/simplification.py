"""Graph simplification phases: node elision and zero-degree pruning."""

import logging
from typing import AbstractSet, Any, Dict, List

from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class ElisionPhase(PipelinePhase):
    """Elides nodes of the given command types and any ids listed in ``elide_node_ids``."""

    phase_name = "elision"

    def __init__(self, command_types: AbstractSet[int] = frozenset()) -> None:
        self._command_types = frozenset(command_types)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = self.require_graph(context)
        targets = {
            node.id for node in graph.sorted_nodes() if node.command_type_id in self._command_types
        }
        targets.update(int(node_id) for node_id in context.get("elide_node_ids", []))

        elided: List[int] = []
        for node_id in sorted(targets):
            if graph.get_node(node_id) is None:
                continue
            graph.elide_node_preserving_edges(node_id)
            elided.append(node_id)

        logger.info("Elided %d nodes", len(elided))
        return {"elided_node_ids": elided}


class ZeroDegreePruningPhase(PipelinePhase):
    phase_name = "pruning"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = self.require_graph(context)
        removed = graph.remove_nodes_with_zero_degree()
        logger.info("Pruned %d nodes with zero degree", len(removed))
        return {"pruned_node_ids": removed}
