"""Frame grouping and zero-degree labeling passes."""

import logging
from collections import deque
from typing import Deque, List, Set

from .graph import TraceGraph
from .graph_model import GraphNode

logger = logging.getLogger(__name__)

FRAME_PREFIX = "FRAME"
UNUSED_PREFIX = "UNUSED"


def _collect_frame(graph: TraceGraph, seed: GraphNode, visited: Set[int]) -> List[GraphNode]:
    visited.add(seed.id)
    reached = [seed]
    queue: Deque[GraphNode] = deque([seed])
    while queue:
        current = queue.popleft()
        candidates = graph.sorted_out_neighbours(current)
        for sub_command_id in current.sub_command_ids:
            sub_command = graph.get_node(sub_command_id)
            if sub_command is None:
                logger.debug("Node %d references missing sub-command %d", current.id, sub_command_id)
                continue
            candidates.append(sub_command)

        for candidate in candidates:
            if candidate.id in visited:
                continue
            visited.add(candidate.id)
            reached.append(candidate)
            queue.append(candidate)
    return reached


def join_nodes_by_frame(graph: TraceGraph) -> int:
    """Prefix nodes reachable from each end-of-frame node with ``FRAME<n>/``.

    Seeds are taken in ascending id order and a node keeps the first frame
    that reaches it. Returns the number of frames found.
    """
    visited: Set[int] = set()
    frame_number = 0
    for node in graph.sorted_nodes():
        if not node.is_end_of_frame or node.id in visited:
            continue
        frame_number += 1
        for member in _collect_frame(graph, node, visited):
            member.add_label_prefix(f"{FRAME_PREFIX}{frame_number}/")

    logger.info("Grouped %d of %d nodes into %d frames", len(visited), graph.node_count, frame_number)
    return frame_number


def join_nodes_with_zero_degree(graph: TraceGraph) -> int:
    count = 0
    for node in graph.sorted_nodes():
        if node.degree == 0:
            node.add_label_prefix(f"{UNUSED_PREFIX}/")
            count += 1
    return count
