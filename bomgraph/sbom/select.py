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
from dataclasses import dataclass

from bomgraph.sbom.types import Identifier, Node, NodeType

# Matching helpers


def purl_type_prefixes(purl_type: str) -> tuple[str, ...]:
    """
    Accepted prefixes for a purl of the given type.

    Some SPDX tooling emits an extra slash after the scheme ("pkg:/deb/...");
    both forms are accepted.
    """
    return (f"pkg:{purl_type}/", f"pkg:/{purl_type}/")


def match_purl_type(purl: str | None, purl_type: str) -> bool:
    """
    Prefix match of a package URL against a purl type.
    - None / empty purl never matches
    - blank purl_type never matches
    """
    if not purl or not purl_type or not purl_type.strip():
        return False
    return purl.startswith(purl_type_prefixes(purl_type))


def has_identifier(node: Node, identifier: Identifier) -> bool:
    """
    Exact string match on (type, value).
    """
    return identifier in node.identifiers


# Node selection


@dataclass(frozen=True, slots=True)
class NodeFilter:
    node_type: NodeType | None = None
    name: str | None = None
    purl_type: str | None = None
    identifier: Identifier | None = None

    def matches(self, n: Node) -> bool:
        if self.node_type is not None and n.type != self.node_type:
            return False
        if self.name is not None and n.name != self.name:
            return False
        if self.purl_type is not None and not match_purl_type(n.purl(), self.purl_type):
            return False
        if self.identifier is not None and not has_identifier(n, self.identifier):
            return False
        return True


def select_nodes(nodes: Iterable[Node], flt: NodeFilter | None = None) -> list[Node]:
    """
    Selection preserving incoming order. Returns the node objects themselves.
    """
    if flt is None:
        return list(nodes)
    return [n for n in nodes if flt.matches(n)]
