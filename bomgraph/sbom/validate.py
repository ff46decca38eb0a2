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

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import auto
from typing import Any

from bomgraph.sbom.keys import EdgeKey, edge_key
from bomgraph.sbom.nodelist import NodeList
from bomgraph.utils.enum import StrEnum


class IssueType(StrEnum):
    EMPTY_NODE_ID = auto()
    DUPLICATE_NODE_ID = auto()
    DANGLING_EDGE_ORIGIN = auto()
    DANGLING_EDGE_DESTINATION = auto()
    DUPLICATE_EDGE = auto()
    DUPLICATE_EDGE_DESTINATION = auto()
    DUPLICATE_ROOT_ELEMENT = auto()
    MISSING_ROOT_NODE = auto()


@dataclass(frozen=True, slots=True)
class GraphIssue:
    type: IssueType
    message: str
    details: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NodeListValidationOptions:
    """
    strict_roots:
      - If True: every root id must have a backing node.
      - If False: unbacked root ids are tolerated (they are skipped by
        NodeList.get_root_nodes()).
    """

    strict_roots: bool = False


def validate_node_list(
    node_list: NodeList,
    *,
    opts: NodeListValidationOptions | None = None,
) -> list[GraphIssue]:
    """
    Report invariant violations without repairing them.

    A list produced by the NodeList algebra (other than relate_at_id) yields
    no edge issues.
    """
    opts = opts or NodeListValidationOptions()
    issues: list[GraphIssue] = []

    # node identity
    node_ids: set[str] = set()
    for n in node_list.nodes:
        if not n.id or not n.id.strip():
            issues.append(
                GraphIssue(
                    type=IssueType.EMPTY_NODE_ID,
                    message="Node has an empty id",
                    details={"name": n.name},
                )
            )
            continue
        if n.id in node_ids:
            issues.append(
                GraphIssue(
                    type=IssueType.DUPLICATE_NODE_ID,
                    message="Duplicate node id detected",
                    details={"node_id": n.id},
                )
            )
        else:
            node_ids.add(n.id)

    # edges
    seen_keys: set[EdgeKey] = set()
    for e in node_list.edges:
        if e.origin not in node_ids:
            issues.append(
                GraphIssue(
                    type=IssueType.DANGLING_EDGE_ORIGIN,
                    message="Edge origin is not a node of the list",
                    details={"from": e.origin, "type": e.type.value},
                )
            )

        k = edge_key(e)
        if k in seen_keys:
            issues.append(
                GraphIssue(
                    type=IssueType.DUPLICATE_EDGE,
                    message="More than one edge for the same origin and type",
                    details={"from": e.origin, "type": e.type.value},
                )
            )
        seen_keys.add(k)

        missing = [dst for dst in e.to if dst not in node_ids]
        if missing:
            issues.append(
                GraphIssue(
                    type=IssueType.DANGLING_EDGE_DESTINATION,
                    message="Edge points to node(s) missing from the list",
                    details={"from": e.origin, "type": e.type.value, "missing": missing},
                )
            )

        if len(set(e.to)) != len(e.to):
            issues.append(
                GraphIssue(
                    type=IssueType.DUPLICATE_EDGE_DESTINATION,
                    message="Edge lists the same destination more than once",
                    details={"from": e.origin, "type": e.type.value},
                )
            )

    # root elements
    seen_roots: set[str] = set()
    for root_id in node_list.root_elements:
        if root_id in seen_roots:
            issues.append(
                GraphIssue(
                    type=IssueType.DUPLICATE_ROOT_ELEMENT,
                    message="Root element listed more than once",
                    details={"node_id": root_id},
                )
            )
            continue
        seen_roots.add(root_id)

        if opts.strict_roots and root_id not in node_ids:
            issues.append(
                GraphIssue(
                    type=IssueType.MISSING_ROOT_NODE,
                    message="Root element has no matching node (strict mode)",
                    details={"node_id": root_id},
                )
            )

    return issues
