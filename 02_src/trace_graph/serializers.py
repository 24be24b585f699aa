"""Text renderings of a trace graph for external viewers.

Both formats walk nodes in ascending id order so repeated renders of the
same graph are byte-identical. Labels are written verbatim; callers must
keep quotes, brackets and newlines out of them.
"""

from io import StringIO

from .graph import TraceGraph


def to_dot(graph: TraceGraph) -> bytes:
    output = StringIO()
    output.write("digraph g {\n")
    for node in graph.sorted_nodes():
        output.write(f"{node.id}[label={node.label}];\n")
    for node in graph.sorted_nodes():
        for neighbour in graph.sorted_in_neighbours(node):
            output.write(f"{neighbour.id} -> {node.id};\n")
    output.write("}\n")
    return output.getvalue().encode("utf-8")


def to_pbtxt(graph: TraceGraph) -> bytes:
    """Render one ``node { ... }`` record per node.

    ``name`` and ``op`` both carry the decorated label, not ``GraphNode.name``.
    """
    output = StringIO()
    for node in graph.sorted_nodes():
        output.write("node {\n")
        output.write(f'name: "{node.label}"\n')
        output.write(f'op: "{node.label}"\n')
        for neighbour in graph.sorted_in_neighbours(node):
            output.write(f'input: "{neighbour.label}"\n')
        output.write("attr {\n")
        output.write(f'key: "{node.attributes}"\n')
        output.write("}\n")
        output.write("}\n")
    return output.getvalue().encode("utf-8")


SERIALIZERS = {
    "dot": to_dot,
    "pbtxt": to_pbtxt,
}
