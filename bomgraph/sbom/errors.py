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
from typing import Any


class NodeListError(Exception):
    """
    Base class for graph errors.

    Structural problems (dangling or duplicated edges) are repaired silently
    and never raised; only operations that cannot proceed raise.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "nodelist_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class NodeNotFoundError(NodeListError, LookupError):
    """Raised when an operation requires a node id that is not in the list."""

    node_id: str

    def __init__(self, node_id: str) -> None:
        super().__init__(
            f"node with ID {node_id} not found",
            code="node_not_found",
            details={"node_id": node_id},
        )
        self.node_id = node_id
