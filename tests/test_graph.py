import pytest

from automaton_dot.graph import Edge, Graph


def test_empty_graph():
    assert Graph().to_dot() == "digraph G {\n}\n"


def test_small_graph_dot():
    graph = Graph(["S0", "S1"], [Edge(0, 1, "x/y")])
    assert graph.to_dot() == (
        'digraph G {\n0 [label="S0"];\n1 [label="S1"];\n0->1 [label="x/y"];\n}\n'
    )


def test_vertices_precede_edges_and_line_count():
    graph = Graph(["a", "b", "c"], [Edge(2, 0, "p"), Edge(1, 1, "q")])
    lines = graph.to_dot().splitlines()
    assert len(lines) == 2 + len(graph.vertices) + len(graph.edges)
    assert lines[1:4] == ['0 [label="a"];', '1 [label="b"];', '2 [label="c"];']
    assert lines[4:6] == ['2->0 [label="p"];', '1->1 [label="q"];']


def test_edges_keep_insertion_order():
    graph = Graph(["v"], [Edge(0, 0, "second"), Edge(0, 0, "first")])
    text = graph.to_dot()
    assert text.index("second") < text.index("first")


def test_write_matches_to_dot(tmp_path):
    graph = Graph(["S0 (F)"], [Edge(0, 0, "a")])
    path = tmp_path / "out.dot"
    graph.write(path)
    assert path.read_bytes().decode("utf-8") == graph.to_dot()


def test_write_to_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        Graph(["a"]).write(tmp_path / "missing" / "out.dot")