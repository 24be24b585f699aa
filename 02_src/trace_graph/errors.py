"""Error types raised by trace graph mutations."""


class GraphError(ValueError):
    """Base class for rejected graph mutations."""


class DuplicateNodeError(GraphError):
    def __init__(self, node_id: int) -> None:
        super().__init__(f"Trying to add an existing node with id {node_id}")
        self.node_id = node_id


class DuplicateEdgeError(GraphError):
    def __init__(self, edge_id: int) -> None:
        super().__init__(f"Trying to add an existing edge with id {edge_id}")
        self.edge_id = edge_id


class MissingNodeError(GraphError):
    def __init__(self, node_id: int, role: str = "node") -> None:
        super().__init__(f"Referencing non-existent {role} with id {node_id}")
        self.node_id = node_id
        self.role = role
