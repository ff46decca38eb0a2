# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Bomgraph Contributors
#
# This file is part of Bomgraph.
#
# Bomgraph is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Bomgraph is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from bomgraph.sbom.clean import clean_edges, orphan_node_ids
from bomgraph.sbom.errors import NodeNotFoundError
from bomgraph.sbom.index import first_edge, index_edges, index_nodes, index_root_elements
from bomgraph.sbom.keys import edge_flat_string, node_flat_string, unique_ids
from bomgraph.sbom.select import NodeFilter, match_purl_type, select_nodes
from bomgraph.sbom.types import Edge, EdgeType, Identifier, Node

logger = logging.getLogger(__name__)


def copy_edge_list(edges: Iterable[Edge]) -> list[Edge]:
    return [e.copy() for e in edges]


@dataclass(eq=False, slots=True)
class NodeList:
    """
    A fragment of an SBOM graph: nodes, the edges between them and the ids
    of the top level (root) elements.

    Invariants re-established by every structural operation:
    - every edge origin and destination is a node of this list
    - at most one edge per (origin, type)

    Root ids are kept best-effort: a root id without a backing node is
    tolerated.

    Not safe for concurrent mutation.
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    root_elements: list[str] = field(default_factory=list)

    # Construction

    def add_node(self, node: Node) -> None:
        self.nodes.append(node)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def copy(self) -> "NodeList":
        return NodeList(
            nodes=[n.copy() for n in self.nodes],
            edges=copy_edge_list(self.edges),
            root_elements=list(self.root_elements),
        )

    # Cleanup

    def clean_edges(self) -> None:
        """
        Drop dangling edges and destinations, collapse edges sharing
        (origin, type). Idempotent.
        """
        self.edges = clean_edges(self.edges, index_nodes(self.nodes))

    def reconnect_orphan_nodes(self) -> None:
        """
        Append to the root elements every node that is not the origin of
        any edge and not already a root.
        """
        self.root_elements.extend(orphan_node_ids(self.nodes, self.edges, self.root_elements))

    # Algebra

    def add(self, other: "NodeList | None") -> None:
        """
        Combine `other` into this list in place.

        - nodes with a known id gap-fill the existing node (augment)
        - unknown nodes are appended as copies
        - destinations of edges matching an existing (origin, type) are
          appended to it; other edges are appended as copies
        - unknown root ids are appended
        """
        if other is None:
            return

        existing_nodes = index_nodes(self.nodes)
        for n in other.nodes:
            current = existing_nodes.get(n.id)
            if current is not None:
                current.augment(n)
                continue
            added = n.copy()
            self.nodes.append(added)
            existing_nodes[added.id] = added

        existing_edges = index_edges(self.edges)
        for e in other.edges:
            current_edge = first_edge(existing_edges, e.origin, e.type)
            if current_edge is not None:
                # duplicates are removed by clean_edges() below
                current_edge.to.extend(e.to)
                continue
            added_edge = e.copy()
            self.edges.append(added_edge)
            existing_edges.setdefault(added_edge.origin, {})[added_edge.type] = [added_edge]

        self.root_elements = unique_ids([*self.root_elements, *other.root_elements])

        self.clean_edges()

    def union(self, other: "NodeList | None") -> "NodeList":
        """
        New list with all nodes of both lists.

        Nodes present in both are copied from this list and overlaid with the
        data from `other` (update). Root ids keep this list's order first.
        Neither input is modified.
        """
        ret = self.copy()
        ret.root_elements = unique_ids(ret.root_elements)
        if other is None:
            ret.clean_edges()
            return ret

        node_index = index_nodes(ret.nodes)
        for n in other.nodes:
            current = node_index.get(n.id)
            if current is not None:
                current.update(n)
                continue
            added = n.copy()
            ret.nodes.append(added)
            node_index[added.id] = added

        edge_index = index_edges(ret.edges)
        for e in other.edges:
            current_edge = first_edge(edge_index, e.origin, e.type)
            if current_edge is None:
                added_edge = e.copy()
                ret.edges.append(added_edge)
                edge_index.setdefault(added_edge.origin, {})[added_edge.type] = [added_edge]
                continue
            for dst in e.to:
                if not current_edge.points_to(dst):
                    current_edge.to.append(dst)

        ret.clean_edges()

        ret.root_elements = unique_ids([*ret.root_elements, *other.root_elements])
        return ret

    def intersect(self, other: "NodeList | None") -> "NodeList":
        """
        New list with the nodes whose id is in both lists.

        - each node is a copy from this list overlaid with `other`'s data
        - a node is a root if it was a root in either list
        - edges come from this list; `other` only widens edges whose
          (origin, type) already exists, it never introduces new ones
        """
        ret = NodeList()
        if other is None:
            return ret

        roots = index_root_elements(self.root_elements)
        other_roots = index_root_elements(other.root_elements)
        other_nodes = index_nodes(other.nodes)

        ret.edges = copy_edge_list(self.edges)

        seen: set[str] = set()
        for n in self.nodes:
            if n.id in seen or n.id not in other_nodes:
                continue
            seen.add(n.id)

            merged = n.copy()
            merged.update(other_nodes[n.id])
            ret.nodes.append(merged)

            if n.id in roots or n.id in other_roots:
                ret.root_elements.append(n.id)

        edge_index = index_edges(ret.edges)
        for e in other.edges:
            current_edge = first_edge(edge_index, e.origin, e.type)
            if current_edge is None:
                continue
            for dst in e.to:
                if not current_edge.points_to(dst):
                    current_edge.to.append(dst)

        ret.clean_edges()
        return ret

    def remove_nodes(self, ids: Iterable[str]) -> None:
        """
        Remove the nodes with the given ids and every edge touching them.
        """
        drop = set(ids)
        self.nodes = [n for n in self.nodes if n.id not in drop]
        self.clean_edges()

    def relate_at_id(self, other: "NodeList | None", node_id: str, edge_type: EdgeType) -> None:
        """
        Hang the root elements of `other` under node `node_id` with an edge
        of `edge_type`, and add `other`'s nodes not yet present (as copies,
        without merging).

        The anchor edge is extended as-is: destinations are not deduplicated
        and edges are not cleaned. `other`'s own edges are merged like add()
        does: an existing (origin, type) edge gains the missing destinations,
        and edges or destinations outside the merged node set are skipped.
        This list's own root elements are left unchanged.

        Raises:
            NodeNotFoundError if node_id is not in this list.
        """
        node_index = index_nodes(self.nodes)
        if node_id not in node_index:
            raise NodeNotFoundError(node_id)

        if other is None:
            return

        edge = first_edge(index_edges(self.edges), node_id, edge_type)
        if edge is None:
            self.edges.append(Edge(type=edge_type, origin=node_id, to=list(other.root_elements)))
        else:
            edge.to.extend(other.root_elements)

        for n in other.nodes:
            if n.id in node_index:
                continue
            added = n.copy()
            self.nodes.append(added)
            node_index[added.id] = added

        # carried edges merge per (origin, type) and stay inside the node set
        edge_index = index_edges(self.edges)
        for e in other.edges:
            if e.origin not in node_index:
                continue
            to = [dst for dst in unique_ids(e.to) if dst in node_index]
            current_edge = first_edge(edge_index, e.origin, e.type)
            if current_edge is None:
                added_edge = Edge(type=e.type, origin=e.origin, to=to)
                self.edges.append(added_edge)
                edge_index.setdefault(added_edge.origin, {})[added_edge.type] = [added_edge]
                continue
            for dst in to:
                if not current_edge.points_to(dst):
                    current_edge.to.append(dst)

    def filter_by_purl_type(self, purl_type: str) -> "NodeList":
        return filter_by_purl_type(self, purl_type)

    # Queries

    def get_nodes_by_name(self, name: str) -> list[Node]:
        return select_nodes(self.nodes, NodeFilter(name=name))

    def get_node_by_id(self, node_id: str) -> Node | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def get_nodes_by_identifier(self, id_type: str, value: str) -> list[Node]:
        """
        Nodes carrying the identifier (id_type, value).

        Plain string comparison: no interpretation is made of the identifier
        (a purl with a different qualifier order does not match).
        """
        return select_nodes(self.nodes, NodeFilter(identifier=Identifier(type=id_type, value=value)))

    def get_edge_by_type(self, origin: str, edge_type: EdgeType) -> Edge | None:
        for e in self.edges:
            if e.origin == origin and e.type == edge_type:
                return e
        return None

    def get_root_nodes(self) -> list[Node]:
        """
        Nodes listed in root_elements, in node order.

        Root ids without a backing node are skipped, so the result may be
        shorter than root_elements. Use validate_node_list() to detect it.
        """
        wanted = index_root_elements(self.root_elements)
        resolved: set[str] = set()
        ret: list[Node] = []
        for n in self.nodes:
            if n.id in wanted and n.id not in resolved:
                resolved.add(n.id)
                ret.append(n)
                if len(resolved) == len(wanted):
                    break

        if len(ret) < len(wanted):
            logger.debug("%d root element(s) have no matching node", len(wanted) - len(ret))
        return ret

    # Comparison

    def equal(self, other: "NodeList | None") -> bool:
        """
        Structural equality.

        Compares root ids, flattened edges (destination order ignored) and
        flattened nodes by id. Sorts root_elements and edges of BOTH lists
        in place.
        """
        if other is None:
            return False

        if (
            len(self.edges) != len(other.edges)
            or len(self.nodes) != len(other.nodes)
            or len(self.root_elements) != len(other.root_elements)
        ):
            return False

        self.root_elements.sort()
        other.root_elements.sort()
        if self.root_elements != other.root_elements:
            return False

        self.edges.sort(key=edge_flat_string)
        other.edges.sort(key=edge_flat_string)
        if [edge_flat_string(e) for e in self.edges] != [edge_flat_string(e) for e in other.edges]:
            return False

        mine = {n.id: node_flat_string(n) for n in self.nodes}
        theirs = {n.id: node_flat_string(n) for n in other.nodes}
        if mine != theirs:
            logger.info("NodeList nodes differ:\n  left:  %s\n  right: %s", mine, theirs)
            return False

        return True

    # Serialization helpers

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "root_elements": list(self.root_elements),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "NodeList":
        return NodeList(
            nodes=[Node.from_dict(n) for n in data.get("nodes") or []],
            edges=[Edge.from_dict(e) for e in data.get("edges") or []],
            root_elements=list(data.get("root_elements") or []),
        )


def filter_by_purl_type(node_list: NodeList | None, purl_type: str) -> NodeList:
    """
    New list with the nodes whose purl has type `purl_type`.

    - copies of matching nodes and of the edges leaving them
    - surviving root ids of `node_list` are kept as roots, so roots are not
      derived from orphan reconnection alone; orphaned nodes are then added
    - a blank purl_type or a None list yields an empty list
    """
    ret = NodeList()
    if node_list is None or not purl_type or not purl_type.strip():
        return ret

    ret.nodes = [n.copy() for n in node_list.nodes if match_purl_type(n.purl(), purl_type)]
    kept = index_nodes(ret.nodes)
    ret.edges = [e.copy() for e in node_list.edges if e.origin in kept]
    ret.root_elements = unique_ids(r for r in node_list.root_elements if r in kept)

    ret.reconnect_orphan_nodes()
    ret.clean_edges()
    return ret
