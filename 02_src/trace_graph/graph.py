"""Graph container that owns node and edge identifiers and keeps adjacency consistent."""

import logging
from typing import Any, Dict, List

from .errors import DuplicateEdgeError, DuplicateNodeError, MissingNodeError
from .graph_model import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


class TraceGraph:
    """Owns every node and edge; all mutation goes through this class."""

    def __init__(self) -> None:
        self.nodes: Dict[int, GraphNode] = {}
        self.edges: Dict[int, GraphEdge] = {}
        self.max_node_id = 0
        self.max_edge_id = 0

    @classmethod
    def create(cls, number_of_nodes: int) -> "TraceGraph":
        graph = cls()
        for _ in range(number_of_nodes):
            graph.new_node()
        return graph

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def get_node(self, node_id: int) -> GraphNode | None:
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: int) -> GraphEdge | None:
        return self.edges.get(edge_id)

    def has_edge(self, source_id: int, sink_id: int) -> bool:
        source = self.nodes.get(source_id)
        return source is not None and sink_id in source.out_neighbour_edges

    def add_node(self, node: GraphNode) -> GraphNode:
        if node.id in self.nodes:
            raise DuplicateNodeError(node.id)
        self.nodes[node.id] = node
        if node.id > self.max_node_id:
            self.max_node_id = node.id
        return node

    def new_node(
        self,
        label: str = "",
        name: str = "",
        attributes: str = "",
        command_type_id: int = 0,
        is_end_of_frame: bool = False,
        node_id: int | None = None,
    ) -> GraphNode:
        if node_id is None:
            node_id = self.max_node_id + 1
        node = GraphNode(
            id=node_id,
            base_label=label,
            name=name,
            attributes=attributes,
            command_type_id=command_type_id,
            is_end_of_frame=is_end_of_frame,
        )
        return self.add_node(node)

    def add_edge(
        self,
        source: GraphNode,
        sink: GraphNode,
        edge_id: int | None = None,
        label: str = "",
    ) -> int:
        """Connect source to sink and return the edge id.

        A second edge between the same ordered pair is never created; the id
        of the existing edge is returned instead.
        """
        if self.nodes.get(source.id) is not source:
            raise MissingNodeError(source.id, role="source node")
        if self.nodes.get(sink.id) is not sink:
            raise MissingNodeError(sink.id, role="sink node")

        existing_id = source.out_neighbour_edges.get(sink.id)
        if existing_id is not None:
            return existing_id

        if edge_id is None:
            edge_id = self.max_edge_id + 1
        elif edge_id in self.edges:
            raise DuplicateEdgeError(edge_id)

        self.edges[edge_id] = GraphEdge(id=edge_id, source_id=source.id, sink_id=sink.id, label=label)
        source.out_neighbour_edges[sink.id] = edge_id
        sink.in_neighbour_edges[source.id] = edge_id
        if edge_id > self.max_edge_id:
            self.max_edge_id = edge_id
        return edge_id

    def add_edge_by_id(self, source_id: int, sink_id: int, label: str = "") -> int:
        source = self.nodes.get(source_id)
        if source is None:
            raise MissingNodeError(source_id, role="source node")
        sink = self.nodes.get(sink_id)
        if sink is None:
            raise MissingNodeError(sink_id, role="sink node")
        return self.add_edge(source, sink, label=label)

    def remove_edge_by_id(self, edge_id: int) -> None:
        edge = self.edges.pop(edge_id, None)
        if edge is None:
            logger.debug("Edge %d already absent", edge_id)
            return
        self.nodes[edge.source_id].out_neighbour_edges.pop(edge.sink_id, None)
        self.nodes[edge.sink_id].in_neighbour_edges.pop(edge.source_id, None)

    def remove_node_by_id(self, node_id: int) -> None:
        node = self.nodes.get(node_id)
        if node is None:
            logger.debug("Node %d already absent", node_id)
            return

        touching = list(node.in_neighbour_edges.values()) + list(node.out_neighbour_edges.values())
        for edge_id in touching:
            self.remove_edge_by_id(edge_id)
        del self.nodes[node_id]

    def remove_nodes_with_zero_degree(self) -> List[int]:
        isolated = [node.id for node in self.sorted_nodes() if node.degree == 0]
        for node_id in isolated:
            self.remove_node_by_id(node_id)
        logger.debug("Removed %d nodes with zero degree", len(isolated))
        return isolated

    def elide_node_preserving_edges(self, node_id: int) -> None:
        """Remove a node, linking each in-neighbour to each out-neighbour."""
        node = self.nodes.get(node_id)
        if node is None:
            return

        sources = sorted(node.in_neighbour_edges)
        sinks = sorted(node.out_neighbour_edges)
        for source_id in sources:
            for sink_id in sinks:
                self.add_edge_by_id(source_id, sink_id)
        self.remove_node_by_id(node_id)

    def sorted_nodes(self) -> List[GraphNode]:
        return [self.nodes[node_id] for node_id in sorted(self.nodes)]

    def sorted_edges(self) -> List[GraphEdge]:
        return [self.edges[edge_id] for edge_id in sorted(self.edges)]

    def sorted_in_neighbours(self, node: GraphNode) -> List[GraphNode]:
        return self._sorted_neighbours(node.in_neighbour_edges)

    def sorted_out_neighbours(self, node: GraphNode) -> List[GraphNode]:
        return self._sorted_neighbours(node.out_neighbour_edges)

    def to_json(self) -> Dict[str, Any]:
        return {
            "nodes": [
                {
                    "id": node.id,
                    "label": node.label,
                    "name": node.name,
                    "attributes": node.attributes,
                    "command_type_id": node.command_type_id,
                    "is_end_of_frame": node.is_end_of_frame,
                    "sub_commands": list(node.sub_command_ids),
                }
                for node in self.sorted_nodes()
            ],
            "edges": [
                {"id": edge.id, "source": edge.source_id, "sink": edge.sink_id, "label": edge.label}
                for edge in self.sorted_edges()
            ],
        }

    def _sorted_neighbours(self, neighbour_edges: Dict[int, int]) -> List[GraphNode]:
        return [self.nodes[neighbour_id] for neighbour_id in sorted(neighbour_edges)]
