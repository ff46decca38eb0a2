from bomgraph.sbom.keys import stable_str
from bomgraph.sbom.types import PURL, Edge, EdgeType, Identifier, Node, NodeType

# Helpers


def purl(value: str) -> Identifier:
    return Identifier(type=PURL, value=value)


# Node


def test_node_copy_is_independent():
    n = Node(
        id="pkg-a",
        name="a",
        licenses=["MIT"],
        hashes={"SHA256": "abc"},
        identifiers=[purl("pkg:deb/debian/a@1")],
    )

    c = n.copy()
    c.licenses.append("Apache-2.0")
    c.hashes["SHA1"] = "def"
    c.identifiers.append(purl("pkg:deb/debian/a@2"))
    c.name = "changed"

    assert n.licenses == ["MIT"]
    assert n.hashes == {"SHA256": "abc"}
    assert n.identifiers == [purl("pkg:deb/debian/a@1")]
    assert n.name == "a"
    assert c.id == n.id


def test_node_update_overlays_non_empty_fields():
    n = Node(id="x", name="old", version="1.0", description="keep me", licenses=["MIT"])
    incoming = Node(id="x", name="new", version="", licenses=["GPL-2.0"], copyright="ACME")

    n.update(incoming)

    assert n.name == "new"
    assert n.version == "1.0"
    assert n.description == "keep me"
    assert n.licenses == ["GPL-2.0"]
    assert n.copyright == "ACME"


def test_node_update_never_changes_id():
    n = Node(id="x")
    n.update(Node(id="y", name="y"))
    assert n.id == "x"


def test_node_update_hashes_incoming_wins():
    n = Node(id="x", hashes={"SHA1": "old", "MD5": "m"})
    n.update(Node(id="x", hashes={"SHA1": "new"}))
    assert n.hashes == {"SHA1": "new", "MD5": "m"}


def test_node_augment_only_fills_gaps():
    n = Node(id="x", name="mine", version="", licenses=[])
    incoming = Node(id="x", name="theirs", version="2.0", licenses=["MIT"], url_home="https://example.com")

    n.augment(incoming)

    assert n.name == "mine"
    assert n.version == "2.0"
    assert n.licenses == ["MIT"]
    assert n.url_home == "https://example.com"


def test_node_augment_keeps_existing_hashes():
    n = Node(id="x", hashes={"SHA1": "mine"})
    n.augment(Node(id="x", hashes={"SHA1": "theirs", "SHA256": "s"}))
    assert n.hashes == {"SHA1": "mine", "SHA256": "s"}


def test_node_merges_identifiers_as_ordered_union():
    a = purl("pkg:deb/debian/a@1")
    b = Identifier(type="cpe23", value="cpe:2.3:a:acme:a:1:*:*:*:*:*:*:*")

    n1 = Node(id="x", identifiers=[a])
    n1.update(Node(id="x", identifiers=[b, a]))
    assert n1.identifiers == [a, b]

    n2 = Node(id="x", identifiers=[a])
    n2.augment(Node(id="x", identifiers=[a, b]))
    assert n2.identifiers == [a, b]


def test_node_merge_with_none_is_noop():
    n = Node(id="x", name="a")
    n.update(None)
    n.augment(None)
    assert n.name == "a"


def test_node_purl_returns_first_purl_identifier():
    n = Node(
        id="x",
        identifiers=[
            Identifier(type="cpe22", value="cpe:/a:acme:a:1"),
            purl("pkg:npm/left-pad@1.3.0"),
            purl("pkg:npm/left-pad@1.3.1"),
        ],
    )
    assert n.purl() == "pkg:npm/left-pad@1.3.0"
    assert Node(id="y").purl() == ""


def test_node_flat_string_reflects_fields():
    n1 = Node(id="x", name="a", hashes={"b": "2", "a": "1"})
    n2 = Node(id="x", name="a", hashes={"a": "1", "b": "2"})
    n3 = Node(id="x", name="b")

    assert n1.flat_string() == n2.flat_string()
    assert n1.flat_string() != n3.flat_string()


def test_node_dict_conversion_keeps_every_field():
    n = Node(
        id="x",
        type=NodeType.FILE,
        name="a.c",
        file_types=["SOURCE"],
        hashes={"SHA1": "abc"},
        identifiers=[purl("pkg:generic/a")],
    )

    data = n.to_dict()
    assert data["type"] == "file"
    assert Node.from_dict(data) == n


# Edge


def test_edge_copy_is_independent():
    e = Edge(type=EdgeType.DEPENDS_ON, origin="a", to=["b"])
    c = e.copy()
    c.to.append("c")
    assert e.to == ["b"]


def test_edge_points_to():
    e = Edge(type=EdgeType.CONTAINS, origin="a", to=["b", "c"])
    assert e.points_to("c")
    assert not e.points_to("a")


def test_edge_flat_string_ignores_destination_order():
    e1 = Edge(type=EdgeType.DEPENDS_ON, origin="a", to=["c", "b"])
    e2 = Edge(type=EdgeType.DEPENDS_ON, origin="a", to=["b", "c"])
    e3 = Edge(type=EdgeType.CONTAINS, origin="a", to=["b", "c"])

    assert e1.flat_string() == e2.flat_string()
    assert e1.flat_string() != e3.flat_string()


def test_edge_dict_uses_from_key():
    e = Edge(type=EdgeType.DEPENDS_ON, origin="a", to=["b"])
    assert e.to_dict() == {"type": "dependsOn", "from": "a", "to": ["b"]}
    assert Edge.from_dict(e.to_dict()) == e


# Enums / keys


def test_edge_type_values():
    assert EdgeType.DEPENDS_ON == "dependsOn"
    assert EdgeType.UNKNOWN.value == "unknown"
    assert EdgeType("contains") is EdgeType.CONTAINS
    assert str(NodeType.PACKAGE) == "package"


def test_stable_str_sorts_dict_keys_and_sets():
    assert stable_str({"b": 1, "a": None}) == "{a=,b=1}"
    assert stable_str({"y", "x"}) == "[x,y]"
    assert stable_str(["y", "x"]) == "[y,x]"


def test_node_update_keeps_type_when_incoming_is_default():
    n = Node(id="x", type=NodeType.FILE, name="a.c")
    n.update(Node(id="x", version="1"))
    assert n.type == NodeType.FILE
    assert n.version == "1"

    p = Node(id="y")
    p.update(Node(id="y", type=NodeType.FILE))
    assert p.type == NodeType.FILE
