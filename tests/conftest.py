import pytest

from trace_graph import TraceGraph


@pytest.fixture
def cycle_graph():
    """Nodes 1..4: a 1 -> 2 -> 3 -> 1 cycle and an isolated node 4."""
    graph = TraceGraph.create(4)
    for node in graph.sorted_nodes():
        node.label = f"n{node.id}"
    graph.add_edge_by_id(1, 2)
    graph.add_edge_by_id(2, 3)
    graph.add_edge_by_id(3, 1)
    return graph


@pytest.fixture(autouse=True)
def clean_trace_graph_env(monkeypatch):
    for name in (
        "TRACE_GRAPH_OUTPUT_FORMATS",
        "TRACE_GRAPH_ELIDE_COMMAND_TYPES",
        "TRACE_GRAPH_REMOVE_UNUSED",
        "TRACE_GRAPH_MARK_UNUSED",
        "TRACE_GRAPH_COLLAPSE_COMMAND_TYPES",
        "TRACE_GRAPH_JOIN_FRAMES",
    ):
        monkeypatch.delenv(name, raising=False)
