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

# Cleanup
from bomgraph.sbom.clean import clean_edges, orphan_node_ids

# Errors
from bomgraph.sbom.errors import NodeListError, NodeNotFoundError

# Indexing
from bomgraph.sbom.index import (
    NodeListIndex,
    build_index,
    index_edges,
    index_nodes,
    index_root_elements,
)

# Identity / keys
from bomgraph.sbom.keys import edge_flat_string, edge_key, node_flat_string

# Graph container
from bomgraph.sbom.nodelist import NodeList, filter_by_purl_type

# Selection
from bomgraph.sbom.select import NodeFilter, match_purl_type, select_nodes
from bomgraph.sbom.types import (
    CPE22,
    CPE23,
    GITOID,
    PURL,
    Edge,
    EdgeType,
    Identifier,
    Node,
    NodeType,
)

# Validation
from bomgraph.sbom.validate import (
    GraphIssue,
    IssueType,
    NodeListValidationOptions,
    validate_node_list,
)

# Public export control

__all__ = (
    # types
    "Node",
    "NodeType",
    "Edge",
    "EdgeType",
    "Identifier",
    "PURL",
    "CPE22",
    "CPE23",
    "GITOID",
    # container
    "NodeList",
    "filter_by_purl_type",
    # keys
    "edge_key",
    "edge_flat_string",
    "node_flat_string",
    # indexing
    "NodeListIndex",
    "build_index",
    "index_nodes",
    "index_edges",
    "index_root_elements",
    # cleanup
    "clean_edges",
    "orphan_node_ids",
    # selection
    "NodeFilter",
    "match_purl_type",
    "select_nodes",
    # errors
    "NodeListError",
    "NodeNotFoundError",
    # validation
    "validate_node_list",
    "NodeListValidationOptions",
    "GraphIssue",
    "IssueType",
)
