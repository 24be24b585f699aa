"""Tests for strongly connected components and command-type collapsing."""

from trace_graph import (
    TraceGraph,
    collapse_by_command_type,
    command_type_projection,
    strongly_connected_component_ids,
)
from trace_graph.scc import component_count


def reachable(graph, start):
    seen = {start}
    stack = [start]
    while stack:
        for neighbour_id in graph.nodes[stack.pop()].out_neighbour_edges:
            if neighbour_id not in seen:
                seen.add(neighbour_id)
                stack.append(neighbour_id)
    return seen


def test_cycle_and_isolated_node(cycle_graph):
    ids = strongly_connected_component_ids(cycle_graph)
    assert set(ids) == {1, 2, 3, 4}
    assert ids[1] == ids[2] == ids[3]
    assert ids[4] != ids[1]
    assert component_count(ids) == 2


def test_acyclic_graph_has_singleton_components():
    graph = TraceGraph.create(5)
    for source_id, sink_id in [(1, 2), (2, 3), (1, 3), (3, 4), (4, 5)]:
        graph.add_edge_by_id(source_id, sink_id)
    ids = strongly_connected_component_ids(graph)
    assert sorted(ids.values()) == [0, 1, 2, 3, 4]


def test_component_ids_match_mutual_reachability():
    graph = TraceGraph.create(8)
    edges = [(1, 2), (2, 1), (2, 3), (3, 4), (4, 5), (5, 3), (5, 6), (6, 6), (7, 8), (8, 7), (8, 1)]
    for source_id, sink_id in edges:
        graph.add_edge_by_id(source_id, sink_id)
    ids = strongly_connected_component_ids(graph)
    closure = {node_id: reachable(graph, node_id) for node_id in graph.nodes}
    for a in graph.nodes:
        for b in graph.nodes:
            mutual = b in closure[a] and a in closure[b]
            assert (ids[a] == ids[b]) == mutual
    assert component_count(ids) == 4


def test_numbering_is_deterministic(cycle_graph):
    first = strongly_connected_component_ids(cycle_graph)
    second = strongly_connected_component_ids(cycle_graph)
    assert first == second
    # {1, 2, 3} closes before the isolated root 4 is visited.
    assert first == {1: 0, 2: 0, 3: 0, 4: 1}


def test_long_chain_does_not_recurse():
    graph = TraceGraph.create(5000)
    for node_id in range(1, 5000):
        graph.add_edge_by_id(node_id, node_id + 1)
    graph.add_edge_by_id(5000, 1)
    ids = strongly_connected_component_ids(graph)
    assert component_count(ids) == 1


def test_empty_graph():
    assert strongly_connected_component_ids(TraceGraph()) == {}


def build_typed_graph():
    graph = TraceGraph()
    graph.new_node(label="bind", command_type_id=10)
    graph.new_node(label="draw", command_type_id=20)
    graph.new_node(label="bind", command_type_id=10)
    graph.new_node(label="present", command_type_id=30)
    graph.add_edge_by_id(1, 2)
    graph.add_edge_by_id(2, 3)
    graph.add_edge_by_id(3, 4)
    return graph


def test_command_type_projection():
    projection = command_type_projection(build_typed_graph())
    assert sorted(projection.nodes) == [10, 20, 30]
    assert projection.has_edge(10, 20)
    assert projection.has_edge(20, 10)
    assert projection.has_edge(10, 30)
    assert projection.edge_count == 3


def test_collapse_by_command_type_suffixes_labels():
    graph = build_typed_graph()
    type_components = collapse_by_command_type(graph)
    assert type_components[10] == type_components[20]
    assert type_components[30] != type_components[10]

    shared = type_components[10]
    assert graph.nodes[1].label == f"bind/SCC{shared}"
    assert graph.nodes[2].label == f"draw/SCC{shared}"
    assert graph.nodes[3].label == f"bind/SCC{shared}"
    assert graph.nodes[4].label == f"present/SCC{type_components[30]}"


def test_collapse_groups_by_type_not_by_node():
    graph = TraceGraph()
    graph.new_node(label="a", command_type_id=1)
    graph.new_node(label="b", command_type_id=2)
    graph.new_node(label="c", command_type_id=2)
    graph.new_node(label="d", command_type_id=1)
    graph.add_edge_by_id(1, 2)
    graph.add_edge_by_id(3, 4)
    # No node-level cycle, but types 1 and 2 reach each other.
    assert component_count(strongly_connected_component_ids(graph)) == 4
    type_components = collapse_by_command_type(graph)
    assert type_components[1] == type_components[2]
    assert len({node.label.split("/")[-1] for node in graph.nodes.values()}) == 1
