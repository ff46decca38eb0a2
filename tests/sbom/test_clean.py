import logging

from bomgraph.sbom.clean import clean_edges, orphan_node_ids
from bomgraph.sbom.nodelist import NodeList
from bomgraph.sbom.types import Edge, EdgeType, Node

# Helpers


def edge(origin: str, *to: str, edge_type: EdgeType = EdgeType.DEPENDS_ON) -> Edge:
    return Edge(type=edge_type, origin=origin, to=list(to))


def flat(edges: list[Edge]) -> list[tuple[str, str, list[str]]]:
    return [(e.origin, e.type.value, e.to) for e in edges]


# clean_edges


def test_clean_drops_edges_with_unknown_origin():
    out = clean_edges([edge("x", "a"), edge("a", "b")], {"a", "b"})
    assert flat(out) == [("a", "dependsOn", ["b"])]


def test_clean_drops_unknown_destinations():
    out = clean_edges([edge("a", "b", "ghost", "c")], {"a", "b", "c"})
    assert flat(out) == [("a", "dependsOn", ["b", "c"])]


def test_clean_collapses_same_origin_and_type_in_first_occurrence_order():
    edges = [
        edge("a", "c"),
        edge("a", "b", edge_type=EdgeType.CONTAINS),
        edge("a", "b", "c", "d"),
    ]
    out = clean_edges(edges, {"a", "b", "c", "d"})

    assert flat(out) == [
        ("a", "dependsOn", ["c", "b", "d"]),
        ("a", "contains", ["b"]),
    ]


def test_clean_removes_duplicate_destinations():
    out = clean_edges([edge("a", "b", "b", "b")], {"a", "b"})
    assert out[0].to == ["b"]


def test_clean_keeps_edges_left_without_destinations():
    out = clean_edges([edge("a", "gone")], {"a"})
    assert flat(out) == [("a", "dependsOn", [])]


def test_clean_does_not_mutate_input_edges():
    original = edge("a", "b", "b", "ghost")
    clean_edges([original], {"a", "b"})
    assert original.to == ["b", "b", "ghost"]


def test_clean_is_idempotent():
    nl = NodeList(
        nodes=[Node(id=i) for i in "abc"],
        edges=[edge("a", "b"), edge("a", "c", "b"), edge("z", "a"), edge("b", "x", "c")],
    )
    nl.clean_edges()
    once = flat(nl.edges)
    nl.clean_edges()
    assert flat(nl.edges) == once


def test_clean_logs_discarded_counts(caplog):
    with caplog.at_level(logging.DEBUG, logger="bomgraph.sbom.clean"):
        clean_edges([edge("x", "a"), edge("a", "ghost")], {"a"})
    assert "1 edge(s) and 1 dangling destination(s)" in caplog.text


# orphan_node_ids


def test_orphans_are_nodes_without_out_edges_and_not_roots():
    nodes = [Node(id=i) for i in "abcd"]
    edges = [edge("a", "b"), edge("b", "c")]

    assert orphan_node_ids(nodes, edges, ["a"]) == ["c", "d"]
    assert orphan_node_ids(nodes, edges, ["a", "d"]) == ["c"]


def test_reconnect_orphan_nodes_appends_to_roots():
    nl = NodeList(
        nodes=[Node(id=i) for i in "abc"],
        edges=[edge("a", "b")],
        root_elements=["a"],
    )
    nl.reconnect_orphan_nodes()
    assert nl.root_elements == ["a", "b", "c"]

    nl.reconnect_orphan_nodes()
    assert nl.root_elements == ["a", "b", "c"]
