"""Strongly connected components over the outgoing-edge relation."""

import logging
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from .graph import TraceGraph

logger = logging.getLogger(__name__)

SCC_SUFFIX = "SCC"


class VisitState(Enum):
    UNVISITED = "unvisited"
    ON_STACK = "on_stack"
    ASSIGNED = "assigned"


def strongly_connected_component_ids(graph: TraceGraph) -> Dict[int, int]:
    """Map every node id to the id of its strongly connected component.

    Low-link search with an explicit work stack, so deep graphs do not hit
    the interpreter recursion limit. Roots and neighbours are taken in
    ascending id order, which makes the numbering reproducible. Components
    are numbered from 0 in the order they are closed; a node outside any
    cycle forms a component of its own.
    """
    state: Dict[int, VisitState] = {node_id: VisitState.UNVISITED for node_id in graph.nodes}
    discovery: Dict[int, int] = {}
    low_link: Dict[int, int] = {}
    component_ids: Dict[int, int] = {}
    active: List[int] = []
    clock = 1
    next_component = 0
    work: List[Tuple[int, Iterator[int]]] = []

    def visit(node_id: int) -> None:
        nonlocal clock
        state[node_id] = VisitState.ON_STACK
        discovery[node_id] = clock
        low_link[node_id] = clock
        clock += 1
        active.append(node_id)
        work.append((node_id, iter(sorted(graph.nodes[node_id].out_neighbour_edges))))

    for root in sorted(graph.nodes):
        if state[root] is not VisitState.UNVISITED:
            continue

        visit(root)
        while work:
            node_id, neighbours = work[-1]
            descended = False
            for neighbour_id in neighbours:
                neighbour_state = state[neighbour_id]
                if neighbour_state is VisitState.UNVISITED:
                    visit(neighbour_id)
                    descended = True
                    break
                if neighbour_state is VisitState.ON_STACK:
                    low_link[node_id] = min(low_link[node_id], low_link[neighbour_id])
            if descended:
                continue

            work.pop()
            if low_link[node_id] == discovery[node_id]:
                while True:
                    member = active.pop()
                    state[member] = VisitState.ASSIGNED
                    component_ids[member] = next_component
                    if member == node_id:
                        break
                next_component += 1

            if work and state[node_id] is VisitState.ON_STACK:
                parent_id = work[-1][0]
                low_link[parent_id] = min(low_link[parent_id], low_link[node_id])

    return component_ids


def component_count(component_ids: Dict[int, int]) -> int:
    return len(set(component_ids.values()))


def command_type_projection(graph: TraceGraph) -> TraceGraph:
    """One node per command type, one edge per type pair linked in ``graph``."""
    projection = TraceGraph()
    for node in graph.sorted_nodes():
        if projection.get_node(node.command_type_id) is None:
            projection.new_node(node_id=node.command_type_id)

    for node in graph.sorted_nodes():
        for neighbour in graph.sorted_out_neighbours(node):
            projection.add_edge_by_id(node.command_type_id, neighbour.command_type_id)
    return projection


def collapse_by_command_type(graph: TraceGraph) -> Dict[int, int]:
    """Suffix every label with the component of its command type.

    Returns the command type id -> component id mapping that was applied.
    """
    projection = command_type_projection(graph)
    type_components = strongly_connected_component_ids(projection)
    for node in graph.sorted_nodes():
        node.add_label_suffix(f"/{SCC_SUFFIX}{type_components[node.command_type_id]}")

    logger.info(
        "Collapsed %d command types into %d components",
        projection.node_count,
        component_count(type_components),
    )
    return type_components
