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

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bomgraph.sbom.types import Edge, EdgeType, Node

if TYPE_CHECKING:
    from bomgraph.sbom.nodelist import NodeList

NodeIndex = dict[str, Node]
EdgeIndex = dict[str, dict[EdgeType, list[Edge]]]
RootElementsIndex = set[str]


def index_nodes(nodes: Iterable[Node]) -> NodeIndex:
    """
    id -> node. Ids are expected to be unique; on collision the last node wins.
    """
    return {n.id: n for n in nodes}


def index_edges(edges: Iterable[Edge]) -> EdgeIndex:
    """
    origin -> type -> edges, in list order.

    Uncleaned lists may hold several edges per (origin, type); all are kept.
    """
    index: EdgeIndex = {}
    for e in edges:
        index.setdefault(e.origin, {}).setdefault(e.type, []).append(e)
    return index


def index_root_elements(root_elements: Iterable[str]) -> RootElementsIndex:
    return set(root_elements)


def first_edge(index: EdgeIndex, origin: str, edge_type: EdgeType) -> Edge | None:
    bucket = index.get(origin, {}).get(edge_type)
    if not bucket:
        return None
    return bucket[0]


@dataclass(frozen=True, slots=True)
class NodeListIndex:
    """
    Read-only lookups over a NodeList snapshot.

    Notes:
    - Built on demand and never cached on the NodeList; any mutation of the
      list makes the index stale.
    """

    nodes_by_id: Mapping[str, Node]
    edges_by_origin: Mapping[str, Mapping[EdgeType, list[Edge]]]
    root_elements: frozenset[str]

    def get_node(self, node_id: str) -> Node | None:
        return self.nodes_by_id.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes_by_id

    def is_root(self, node_id: str) -> bool:
        return node_id in self.root_elements

    def has_out_edges(self, node_id: str) -> bool:
        return node_id in self.edges_by_origin

    def out_edges(self, node_id: str) -> tuple[Edge, ...]:
        by_type = self.edges_by_origin.get(node_id, {})
        return tuple(e for edges in by_type.values() for e in edges)


def build_index(node_list: "NodeList") -> NodeListIndex:
    return NodeListIndex(
        nodes_by_id=index_nodes(node_list.nodes),
        edges_by_origin=index_edges(node_list.edges),
        root_elements=frozenset(node_list.root_elements),
    )
