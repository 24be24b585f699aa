"""Node and edge records for command trace graphs."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class GraphNode:
    """A command in the trace.

    Adjacency is kept as neighbour id -> edge id, one map per direction.
    Labels are assembled from a base string and the tags added by analysis
    passes; prefixes added later wrap the earlier ones.
    """

    id: int
    base_label: str = ""
    name: str = ""
    attributes: str = ""
    command_type_id: int = 0
    is_end_of_frame: bool = False
    sub_command_ids: List[int] = field(default_factory=list)
    in_neighbour_edges: Dict[int, int] = field(default_factory=dict)
    out_neighbour_edges: Dict[int, int] = field(default_factory=dict)
    label_prefixes: List[str] = field(default_factory=list)
    label_suffixes: List[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        prefix = "".join(reversed(self.label_prefixes))
        return prefix + self.base_label + "".join(self.label_suffixes)

    @label.setter
    def label(self, value: str) -> None:
        self.base_label = value
        self.label_prefixes.clear()
        self.label_suffixes.clear()

    def add_label_prefix(self, tag: str) -> None:
        self.label_prefixes.append(tag)

    def add_label_suffix(self, tag: str) -> None:
        self.label_suffixes.append(tag)

    def add_sub_command_node(self, sub_command: "GraphNode") -> None:
        self.sub_command_ids.append(sub_command.id)

    @property
    def in_degree(self) -> int:
        return len(self.in_neighbour_edges)

    @property
    def out_degree(self) -> int:
        return len(self.out_neighbour_edges)

    @property
    def degree(self) -> int:
        return self.in_degree + self.out_degree


@dataclass
class GraphEdge:
    id: int
    source_id: int
    sink_id: int
    label: str = ""
