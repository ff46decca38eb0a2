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

from bomgraph.sbom.keys import edge_flat_string, node_flat_string
from bomgraph.utils.enum import StrEnum

# Enums


class NodeType(StrEnum):
    PACKAGE = auto()
    FILE = auto()


class EdgeType(StrEnum):
    """
    Relationship kinds between components.

    Values are the camelCase relationship names used by SPDX documents.
    """

    UNKNOWN = auto()
    AMENDS = "amends"
    ANCESTOR = "ancestor"
    BUILD_DEPENDENCY = "buildDependency"
    BUILD_TOOL = "buildTool"
    CONTAINS = "contains"
    CONTAINED_BY = "containedBy"
    COPY = "copy"
    DATA_FILE = "dataFile"
    DEPENDENCY_MANIFEST = "dependencyManifest"
    DEPENDS_ON = "dependsOn"
    DEPENDENCY_OF = "dependencyOf"
    DESCENDANT = "descendant"
    DESCRIBES = "describes"
    DESCRIBED_BY = "describedBy"
    DEV_DEPENDENCY = "devDependency"
    DEV_TOOL = "devTool"
    DISTRIBUTION_ARTIFACT = "distributionArtifact"
    DOCUMENTATION = "documentation"
    DYNAMIC_LINK = "dynamicLink"
    EXAMPLE = "example"
    EXPANDED_FROM_ARCHIVE = "expandedFromArchive"
    FILE_ADDED = "fileAdded"
    FILE_DELETED = "fileDeleted"
    FILE_MODIFIED = "fileModified"
    GENERATES = "generates"
    GENERATED_FROM = "generatedFrom"
    METAFILE = "metafile"
    OPTIONAL_COMPONENT = "optionalComponent"
    OPTIONAL_DEPENDENCY = "optionalDependency"
    OTHER = "other"
    PACKAGES = "packages"
    PATCH = "patch"
    PREREQUISITE = "prerequisite"
    PREREQUISITE_FOR = "prerequisiteFor"
    PROVIDED_DEPENDENCY = "providedDependency"
    REQUIREMENT_FOR = "requirementFor"
    RUNTIME_DEPENDENCY = "runtimeDependency"
    SPECIFICATION_FOR = "specificationFor"
    STATIC_LINK = "staticLink"
    TEST = "test"
    TEST_CASE = "testCase"
    TEST_DEPENDENCY = "testDependency"
    TEST_TOOL = "testTool"
    VARIANT = "variant"


# Software identifiers

PURL = "purl"
CPE22 = "cpe22"
CPE23 = "cpe23"
GITOID = "gitoid"


@dataclass(frozen=True, slots=True)
class Identifier:
    """
    A (type, value) pair, e.g. ("purl", "pkg:deb/debian/bash@5.1").

    Types are plain strings; no interpretation is made of the value.
    """

    type: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Identifier":
        return Identifier(type=data["type"], value=data["value"])


def _merge_identifiers(base: list[Identifier], incoming: list[Identifier]) -> list[Identifier]:
    # ordered union, base first
    out = list(base)
    seen = set(base)
    for i in incoming:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out


# Node

_SCALAR_FIELDS = (
    "name",
    "version",
    "file_name",
    "url_home",
    "url_download",
    "license_concluded",
    "license_comments",
    "copyright",
    "source_info",
    "summary",
    "description",
    "comment",
)

_LIST_FIELDS = (
    "licenses",
    "attribution",
    "suppliers",
    "originators",
    "file_types",
    "primary_purpose",
)


@dataclass(slots=True)
class Node:
    """
    A software component (package or file) in an SBOM graph.

    The graph algebra only relies on:
      - id, name, identifiers, purl()
      - copy(), update() (overlay) and augment() (gap-fill)
      - flat_string() for equality
    """

    id: str
    type: NodeType = NodeType.PACKAGE

    name: str = ""
    version: str = ""
    file_name: str = ""
    url_home: str = ""
    url_download: str = ""
    license_concluded: str = ""
    license_comments: str = ""
    copyright: str = ""
    source_info: str = ""
    summary: str = ""
    description: str = ""
    comment: str = ""

    licenses: list[str] = field(default_factory=list)
    attribution: list[str] = field(default_factory=list)
    suppliers: list[str] = field(default_factory=list)
    originators: list[str] = field(default_factory=list)
    file_types: list[str] = field(default_factory=list)
    primary_purpose: list[str] = field(default_factory=list)

    hashes: dict[str, str] = field(default_factory=dict)
    identifiers: list[Identifier] = field(default_factory=list)

    def copy(self) -> "Node":
        """
        Deep copy; the result shares no mutable state with this node.
        """
        return Node.from_dict(self.to_dict())

    def update(self, other: "Node | None") -> None:
        """
        Overlay merge: non-empty fields of `other` replace ours.
        The type counts as empty when it is the default (package), so a
        sparse incoming node never turns a file into a package.

        Hashes are merged with `other` winning per algorithm. Identifiers are
        merged as an ordered union. The id is never touched.
        """
        if other is None:
            return

        if other.type != NodeType.PACKAGE:
            self.type = other.type
        for name in _SCALAR_FIELDS:
            value = getattr(other, name)
            if value:
                setattr(self, name, value)
        for name in _LIST_FIELDS:
            value = getattr(other, name)
            if value:
                setattr(self, name, list(value))

        self.hashes = {**self.hashes, **other.hashes}
        self.identifiers = _merge_identifiers(self.identifiers, other.identifiers)

    def augment(self, other: "Node | None") -> None:
        """
        Gap-fill merge: only fields empty on this node are taken from `other`.
        """
        if other is None:
            return

        for name in _SCALAR_FIELDS:
            if not getattr(self, name):
                setattr(self, name, getattr(other, name))
        for name in _LIST_FIELDS:
            if not getattr(self, name):
                setattr(self, name, list(getattr(other, name)))

        for algo, digest in other.hashes.items():
            self.hashes.setdefault(algo, digest)
        self.identifiers = _merge_identifiers(self.identifiers, other.identifiers)

    def purl(self) -> str:
        for i in self.identifiers:
            if i.type == PURL:
                return i.value
        return ""

    def flat_string(self) -> str:
        return node_flat_string(self)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type.value}
        for name in _SCALAR_FIELDS:
            data[name] = getattr(self, name)
        for name in _LIST_FIELDS:
            data[name] = list(getattr(self, name))
        data["hashes"] = dict(self.hashes)
        data["identifiers"] = [i.to_dict() for i in self.identifiers]
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Node":
        return Node(
            id=data["id"],
            type=NodeType(data["type"]) if data.get("type") else NodeType.PACKAGE,
            **{name: data.get(name) or "" for name in _SCALAR_FIELDS},
            **{name: list(data.get(name) or []) for name in _LIST_FIELDS},
            hashes=dict(data.get("hashes") or {}),
            identifiers=[Identifier.from_dict(i) for i in data.get("identifiers") or []],
        )


# Edge


@dataclass(slots=True)
class Edge:
    """
    Directed, typed relationship from one node to an ordered list of nodes.
    """

    type: EdgeType
    origin: str
    to: list[str] = field(default_factory=list)

    def copy(self) -> "Edge":
        return Edge(type=self.type, origin=self.origin, to=list(self.to))

    def points_to(self, node_id: str) -> bool:
        return node_id in self.to

    def flat_string(self) -> str:
        return edge_flat_string(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "from": self.origin,
            "to": list(self.to),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Edge":
        return Edge(
            type=EdgeType(data["type"]),
            origin=data["from"],
            to=list(data.get("to") or []),
        )
