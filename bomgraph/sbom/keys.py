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

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bomgraph.sbom.types import Edge, EdgeType, Node

# Helpers


def stable_str(value: Any) -> str:
    """
    Convert arbitrary values to a stable string representation.

    Rules:
    - dicts are sorted by key
    - lists/tuples keep their order
    - sets are sorted
    - None becomes empty string
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        return "{" + ",".join(f"{k}={stable_str(v)}" for k, v in sorted(value.items())) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(stable_str(v) for v in value) + "]"
    if isinstance(value, (set, frozenset)):
        return "[" + ",".join(sorted(stable_str(v) for v in value)) + "]"
    return str(value)


# Keys

EdgeKey = tuple[str, "EdgeType"]


def edge_key(edge: "Edge") -> EdgeKey:
    """
    Identity of an edge inside a clean NodeList: (origin, type).

    Destinations are not part of the key; edges sharing a key
    are collapsed into one by the sanitation pass.
    """
    return (edge.origin, edge.type)


# Flattened representations (used by NodeList.equal)


def node_flat_string(node: "Node") -> str:
    """
    Deterministic rendering of every field of a node.
    """
    return stable_str(node.to_dict())


def edge_flat_string(edge: "Edge") -> str:
    """
    type + origin + sorted destinations.

    Destination order does not take part in the comparison.
    """
    return f"{edge.type.value}:{edge.origin}:{','.join(sorted(edge.to))}"


# Batch helpers


def unique_ids(ids: Iterable[str]) -> list[str]:
    """
    Dedupe ids, keeping the first occurrence order.
    """
    seen: set[str] = set()
    out: list[str] = []
    for i in ids:
        if i in seen:
            continue
        seen.add(i)
        out.append(i)
    return out
