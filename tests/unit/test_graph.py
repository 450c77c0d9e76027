"""Unit tests for the Graph container."""

import copy

import pytest

from wdgraph.core.graph import Graph


@pytest.fixture
def sample_graph() -> Graph:
    """Create a graph: B -> A (5), B -> C (3.5), B -> C (-1), C -> A (2.2)."""
    graph = Graph(nodes=["A", "B", "C"])
    graph.insert_edge("B", "A", 5)
    graph.insert_edge("B", "C", 3.5)
    graph.insert_edge("B", "C", -1)
    graph.insert_edge("C", "A", 2.2)
    return graph


@pytest.fixture
def words_graph() -> Graph:
    """Create the sample word graph used throughout the examples."""
    return Graph.from_edges(
        [
            ("hello", "how", 5),
            ("hello", "are", 8),
            ("hello", "are", 2),
            ("how", "you?", 3),
            ("how", "are", 10),
            ("how", "you?", 1),
            ("how", "hello", 4),
            ("are", "you?", 3),
            ("are", "are", 10),
        ]
    )


class TestConstruction:
    """Tests for the construction surfaces."""

    def test_empty(self) -> None:
        graph = Graph()
        assert len(graph) == 0
        assert graph.get_nodes() == []
        assert list(graph) == []

    def test_from_nodes_ignores_duplicates(self) -> None:
        graph = Graph.from_nodes(["b", "a", "b", "c", "a"])
        assert graph.get_nodes() == ["a", "b", "c"]
        assert graph.num_edges == 0

    def test_from_edges_adds_missing_endpoints(self) -> None:
        graph = Graph.from_edges([("Hello", "how", 5.4), ("how", "are", 7.6)])
        assert graph.get_nodes() == ["Hello", "are", "how"]
        assert graph.get_weights("Hello", "how") == [5.4]
        assert graph.get_weights("how", "are") == [7.6]

    def test_from_edges_duplicate_triples(self) -> None:
        graph = Graph.from_edges([("a", "b", 1), ("a", "b", 1)])
        assert graph.num_edges == 1

    def test_nodes_and_edges_together(self) -> None:
        graph = Graph(nodes=["z"], edges=[("a", "b", 1)])
        assert graph.get_nodes() == ["a", "b", "z"]

    def test_integer_nodes(self) -> None:
        graph = Graph.from_nodes([10, 2, 33, 1])
        assert graph.get_nodes() == [1, 2, 10, 33]


class TestNodes:
    """Tests for node insertion, deletion and lookup."""

    def test_insert_node(self) -> None:
        graph = Graph()
        assert graph.is_node("hello") is False
        assert graph.insert_node("hello") is True
        assert graph.is_node("hello") is True
        assert "hello" in graph

    def test_insert_duplicate_node(self) -> None:
        graph = Graph()
        graph.insert_node("hello")
        assert graph.insert_node("hello") is False
        assert graph.get_nodes() == ["hello"]

    def test_delete_node(self, sample_graph: Graph) -> None:
        assert sample_graph.delete_node("C") is True
        assert sample_graph.is_node("C") is False
        assert sample_graph.get_nodes() == ["A", "B"]

    def test_delete_absent_node(self, sample_graph: Graph) -> None:
        assert sample_graph.delete_node("Z") is False
        assert sample_graph.get_nodes() == ["A", "B", "C"]

    def test_delete_node_hides_incoming_edges(self, sample_graph: Graph) -> None:
        sample_graph.delete_node("C")
        assert sample_graph.get_connected("B") == ["A"]
        assert sample_graph.num_edges == 1
        assert list(sample_graph) == [("B", "A", 5)]

    def test_reinserted_node_does_not_revive_edges(self, sample_graph: Graph) -> None:
        sample_graph.delete_node("C")
        sample_graph.insert_node("C")
        assert sample_graph.get_weights("B", "C") == []
        assert sample_graph.is_connected("B", "C") is False

    def test_clear(self, sample_graph: Graph) -> None:
        sample_graph.clear()
        assert sample_graph == Graph()
        assert sample_graph.get_nodes() == []
        assert sample_graph.insert_node("A") is True

    def test_len_and_counts(self, sample_graph: Graph) -> None:
        assert len(sample_graph) == 3
        assert sample_graph.num_nodes == 3
        assert sample_graph.num_edges == 4
        assert repr(sample_graph) == "Graph(nodes=3, edges=4)"


class TestEdges:
    """Tests for edge insertion, erasure and queries."""

    def test_insert_edge(self) -> None:
        graph = Graph(nodes=["a", "b"])
        assert graph.insert_edge("a", "b", 1) is True
        assert graph.insert_edge("a", "b", 1) is False
        assert graph.get_weights("a", "b") == [1]

    def test_insert_edge_same_pair_new_weight(self) -> None:
        graph = Graph(nodes=["a", "b"])
        graph.insert_edge("a", "b", 1)
        assert graph.insert_edge("a", "b", 2) is True
        assert graph.get_weights("a", "b") == [1, 2]

    def test_self_loop(self) -> None:
        graph = Graph(nodes=["a"])
        assert graph.insert_edge("a", "a", 0) is True
        assert graph.is_connected("a", "a") is True

    def test_is_connected(self, words_graph: Graph) -> None:
        assert words_graph.is_connected("how", "hello") is True
        assert words_graph.is_connected("how", "how") is False
        assert words_graph.is_connected("you?", "how") is False

    def test_get_connected(self, words_graph: Graph) -> None:
        assert words_graph.get_connected("how") == ["are", "hello", "you?"]
        assert words_graph.get_connected("you?") == []

    def test_get_connected_collapses_multi_edges(self, words_graph: Graph) -> None:
        assert words_graph.get_connected("hello") == ["are", "how"]

    def test_get_weights_sorted(self, words_graph: Graph) -> None:
        assert words_graph.get_weights("how", "you?") == [1, 3]
        assert words_graph.get_weights("hello", "are") == [2, 8]

    def test_get_weights_no_edges(self, words_graph: Graph) -> None:
        assert words_graph.get_weights("you?", "hello") == []

    def test_erase_missing_edge(self, words_graph: Graph) -> None:
        before = str(words_graph)
        assert words_graph.erase("how", "hello", 0) is False
        assert str(words_graph) == before

    def test_erase_missing_endpoint(self, words_graph: Graph) -> None:
        assert words_graph.erase("how", "nowhere", 4) is False
        assert words_graph.erase("nowhere", "how", 4) is False

    def test_erase_edge(self, words_graph: Graph) -> None:
        edges_before = words_graph.num_edges
        assert words_graph.erase("how", "hello", 4) is True
        assert words_graph.is_connected("how", "hello") is False
        assert words_graph.num_edges == edges_before - 1

    def test_erase_one_of_multi_edge(self, words_graph: Graph) -> None:
        assert words_graph.erase("hello", "are", 8) is True
        assert words_graph.get_weights("hello", "are") == [2]

    def test_erase_prunes_stale_edges(self, words_graph: Graph) -> None:
        words_graph.delete_node("you?")
        assert words_graph.erase("how", "hello", 4) is True
        assert list(words_graph.get_connected("how")) == ["are"]


class TestCopyAndMove:
    """Tests for copy and move semantics."""

    def test_copy_is_equal(self, sample_graph: Graph) -> None:
        clone = sample_graph.copy()
        assert clone == sample_graph
        assert clone is not sample_graph

    def test_copy_independent_of_original(self, sample_graph: Graph) -> None:
        clone = sample_graph.copy()
        sample_graph.insert_edge("A", "B", 1)
        sample_graph.replace("C", "D")
        assert clone.get_nodes() == ["A", "B", "C"]
        assert clone.get_connected("A") == []
        assert clone != sample_graph

    def test_original_independent_of_copy(self, sample_graph: Graph) -> None:
        clone = sample_graph.copy()
        clone.delete_node("A")
        assert sample_graph.get_connected("B") == ["A", "C"]

    def test_copy_drops_stale_edges(self, sample_graph: Graph) -> None:
        sample_graph.delete_node("A")
        clone = sample_graph.copy()
        assert list(clone) == [("B", "C", -1), ("B", "C", 3.5)]

    def test_copy_module(self, sample_graph: Graph) -> None:
        assert copy.copy(sample_graph) == sample_graph

    def test_deepcopy_copies_values(self) -> None:
        weight = [1, 2]
        graph = Graph.from_edges([("a", "b", weight)])
        clone = copy.deepcopy(graph)
        weight.append(3)
        assert clone.get_weights("a", "b") == [[1, 2]]

    def test_copy_empty(self) -> None:
        assert Graph().copy() == Graph()

    def test_move(self, sample_graph: Graph) -> None:
        expected = str(sample_graph)
        moved = sample_graph.move()
        assert str(moved) == expected
        assert len(sample_graph) == 0
        assert str(sample_graph) == ""

    def test_moved_from_is_reusable(self, sample_graph: Graph) -> None:
        moved = sample_graph.move()
        assert sample_graph.insert_node("A") is True
        assert sample_graph.get_nodes() == ["A"]
        assert moved.get_nodes() == ["A", "B", "C"]

    def test_assign_copy(self, sample_graph: Graph) -> None:
        target = Graph(nodes=["x"])
        target.assign(sample_graph)
        assert target == sample_graph
        sample_graph.clear()
        assert target.get_nodes() == ["A", "B", "C"]

    def test_assign_move(self, sample_graph: Graph) -> None:
        expected = sample_graph.copy()
        target = Graph(nodes=["x"])
        target.assign(sample_graph, move=True)
        assert target == expected
        assert len(sample_graph) == 0

    def test_assign_self(self, sample_graph: Graph) -> None:
        expected = sample_graph.copy()
        sample_graph.assign(sample_graph, move=True)
        assert sample_graph == expected


class TestEquality:
    """Tests for structural equality."""

    def test_empty_graphs_equal(self) -> None:
        assert Graph() == Graph()

    def test_empty_and_non_empty(self) -> None:
        assert Graph() != Graph(nodes=["a"])

    def test_identical_graphs(self) -> None:
        edges = [("Hello", "how", 5), ("Hello", "are", 8), ("how", "you?", 3)]
        assert Graph.from_edges(edges) == Graph.from_edges(reversed(edges))

    def test_extra_edge(self) -> None:
        g1 = Graph(nodes=["a", "b"])
        g2 = Graph(nodes=["a", "b"])
        g2.insert_edge("a", "b", 1)
        assert g1 != g2

    def test_different_weight(self) -> None:
        g1 = Graph.from_edges([("a", "b", 1)])
        g2 = Graph.from_edges([("a", "b", 2)])
        assert g1 != g2

    def test_stale_edges_ignored(self) -> None:
        g1 = Graph.from_edges([("a", "b", 1), ("a", "c", 1)])
        g1.delete_node("c")
        g2 = Graph.from_edges([("a", "b", 1)])
        assert g1 == g2

    def test_not_equal_to_other_types(self) -> None:
        assert Graph() != ""
        assert Graph() != []

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Graph())


class TestRenderingEquality:
    """Tests that equality agrees with the canonical rendering."""

    def test_int_and_float_weights_differ(self) -> None:
        g1 = Graph.from_edges([("a", "b", 1)])
        g2 = Graph.from_edges([("a", "b", 1.0)])
        assert str(g1) != str(g2)
        assert g1 != g2

    def test_same_rendering_is_equal(self) -> None:
        g1 = Graph(nodes=["1"])
        g2 = Graph(nodes=[1])
        assert str(g1) == str(g2)
        assert g1 == g2


class TestEdgeCount:
    """Tests for counting edges without touching the edge lists."""

    def test_num_edges_ignores_stale(self) -> None:
        graph = Graph.from_edges([("A", "B", 1), ("A", "C", 2), ("A", "D", 3)])
        graph.delete_node("B")
        assert graph.num_edges == 2
        assert repr(graph) == "Graph(nodes=3, edges=2)"

    def test_num_edges_does_not_prune(self) -> None:
        graph = Graph.from_edges([("A", "B", 1), ("A", "C", 2)])
        graph.delete_node("B")
        record = graph._index.get("A")
        assert record is not None
        repr(graph)
        assert len(record.edges) == 2
