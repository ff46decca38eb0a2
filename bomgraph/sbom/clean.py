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
from collections.abc import Collection, Iterable, Sequence

from bomgraph.sbom.index import index_edges, index_root_elements
from bomgraph.sbom.keys import EdgeKey, edge_key
from bomgraph.sbom.types import Edge, Node

logger = logging.getLogger(__name__)


def clean_edges(edges: Iterable[Edge], node_ids: Collection[str]) -> list[Edge]:
    """
    Rebuild an edge list so that it satisfies the NodeList edge invariants.

    Guarantees:
    - edges whose origin is not in node_ids are dropped
    - one edge per (origin, type), destinations merged from all input edges
    - destinations not in node_ids are dropped, duplicates removed
    - edge and destination order follow first occurrence

    Input edges are never mutated; the result holds new Edge objects.
    Edges left without destinations are kept.
    """
    merged: dict[EdgeKey, Edge] = {}
    seen_to: dict[EdgeKey, set[str]] = {}
    dropped_edges = 0
    dropped_to = 0

    for e in edges:
        if e.origin not in node_ids:
            dropped_edges += 1
            continue

        k = edge_key(e)
        out = merged.get(k)
        if out is None:
            out = Edge(type=e.type, origin=e.origin, to=[])
            merged[k] = out
            seen_to[k] = set()
        else:
            dropped_edges += 1

        seen = seen_to[k]
        for dst in e.to:
            if dst not in node_ids:
                dropped_to += 1
                continue
            if dst in seen:
                continue
            seen.add(dst)
            out.to.append(dst)

    if dropped_edges or dropped_to:
        logger.debug(
            "Edge cleanup dropped or collapsed %d edge(s) and %d dangling destination(s)",
            dropped_edges,
            dropped_to,
        )

    return list(merged.values())


def orphan_node_ids(nodes: Iterable[Node], edges: Iterable[Edge], root_elements: Sequence[str]) -> list[str]:
    """
    Ids of nodes that are neither the origin of an edge nor a root element,
    in node order.
    """
    by_origin = index_edges(edges)
    roots = index_root_elements(root_elements)

    out: list[str] = []
    for n in nodes:
        if n.id in by_origin or n.id in roots:
            continue
        roots.add(n.id)
        out.append(n.id)
    return out
