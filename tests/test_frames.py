"""Tests for frame grouping and zero-degree labeling."""

from trace_graph import TraceGraph, join_nodes_by_frame, join_nodes_with_zero_degree


def test_frame_reaches_successors_only():
    graph = TraceGraph()
    graph.new_node(label="A", is_end_of_frame=True)
    graph.new_node(label="B")
    graph.new_node(label="C")
    graph.add_edge_by_id(1, 2)

    assert join_nodes_by_frame(graph) == 1
    assert graph.nodes[1].label == "FRAME1/A"
    assert graph.nodes[2].label == "FRAME1/B"
    assert graph.nodes[3].label == "C"


def test_frames_follow_sub_commands():
    graph = TraceGraph()
    submit = graph.new_node(label="submit", is_end_of_frame=True)
    draw = graph.new_node(label="draw")
    nested = graph.new_node(label="nested")
    tail = graph.new_node(label="tail")
    submit.add_sub_command_node(draw)
    draw.add_sub_command_node(nested)
    graph.add_edge_by_id(nested.id, tail.id)

    join_nodes_by_frame(graph)
    assert [node.label for node in graph.sorted_nodes()] == [
        "FRAME1/submit",
        "FRAME1/draw",
        "FRAME1/nested",
        "FRAME1/tail",
    ]


def test_first_frame_wins():
    graph = TraceGraph()
    graph.new_node(label="end1", is_end_of_frame=True)
    graph.new_node(label="end2", is_end_of_frame=True)
    graph.new_node(label="shared")
    graph.new_node(label="only2")
    graph.add_edge_by_id(1, 3)
    graph.add_edge_by_id(2, 3)
    graph.add_edge_by_id(2, 4)

    assert join_nodes_by_frame(graph) == 2
    assert graph.nodes[3].label == "FRAME1/shared"
    assert graph.nodes[2].label == "FRAME2/end2"
    assert graph.nodes[4].label == "FRAME2/only2"


def test_seed_inside_earlier_frame_does_not_start_new_frame():
    graph = TraceGraph()
    graph.new_node(label="a", is_end_of_frame=True)
    graph.new_node(label="b", is_end_of_frame=True)
    graph.new_node(label="c", is_end_of_frame=True)
    graph.add_edge_by_id(1, 2)

    assert join_nodes_by_frame(graph) == 2
    assert graph.nodes[2].label == "FRAME1/b"
    assert graph.nodes[3].label == "FRAME2/c"


def test_every_node_gets_at_most_one_frame_prefix():
    graph = TraceGraph.create(6)
    for node in graph.sorted_nodes():
        node.label = f"n{node.id}"
    graph.nodes[1].is_end_of_frame = True
    graph.nodes[4].is_end_of_frame = True
    for source_id, sink_id in [(1, 2), (2, 1), (2, 3), (4, 3), (4, 5), (5, 4)]:
        graph.add_edge_by_id(source_id, sink_id)
    graph.nodes[3].add_sub_command_node(graph.nodes[1])

    join_nodes_by_frame(graph)
    for node in graph.sorted_nodes():
        assert node.label.count("FRAME") <= 1
    assert graph.nodes[6].label == "n6"


def test_missing_sub_command_is_skipped():
    graph = TraceGraph()
    end = graph.new_node(label="end", is_end_of_frame=True)
    gone = graph.new_node(label="gone")
    end.add_sub_command_node(gone)
    graph.remove_node_by_id(gone.id)

    assert join_nodes_by_frame(graph) == 1
    assert end.label == "FRAME1/end"


def test_join_nodes_with_zero_degree(cycle_graph):
    assert join_nodes_with_zero_degree(cycle_graph) == 1
    assert cycle_graph.nodes[4].label == "UNUSED/n4"
    assert cycle_graph.nodes[1].label == "n1"


def test_zero_degree_labeling_after_pruning_sees_nothing(cycle_graph):
    cycle_graph.remove_nodes_with_zero_degree()
    assert join_nodes_with_zero_degree(cycle_graph) == 0
