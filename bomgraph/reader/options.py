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

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from bomgraph.utils.enum import StrEnum


class FormatDriver(StrEnum):
    """
    Serializer drivers that accept format specific options.
    """

    SPDX23_JSON = "spdx23json"
    SPDX22_JSON = "spdx22json"
    SPDX23_TV = "spdx23tv"
    CDX14_JSON = "cdx14json"
    CDX15_JSON = "cdx15json"
    PROTOBOM = "protobom"


# A sniffer inspects the head of a document and returns its format name.
Sniffer = Callable[[bytes], str]


def _driver_key(key: FormatDriver | str) -> FormatDriver | None:
    if isinstance(key, FormatDriver):
        return key
    if not key or not key.strip():
        return None
    return FormatDriver(key.strip())


@dataclass
class ReaderOptions:
    format: str | None = None
    unserialize_options: Mapping[str, Any] | None = None
    sniffer: Sniffer | None = None
    _format_options: dict[FormatDriver, Any] = field(default_factory=dict, repr=False)

    def get_format_options(self, driver: FormatDriver | str) -> Any:
        """
        Options registered for `driver`, or None.

        Raises:
            ValueError if `driver` is a string that names no known driver.
        """
        key = _driver_key(driver)
        if key is None:
            return None
        return self._format_options.get(key)

    def set_format_options(self, driver: FormatDriver | str, opts: Any) -> None:
        """
        Register options for `driver`. A blank driver name is ignored.
        """
        key = _driver_key(driver)
        if key is None:
            return
        self._format_options[key] = opts


ReaderOption = Callable[[ReaderOptions], None]


def with_format_options(driver: FormatDriver | str, opts: Any) -> ReaderOption:
    def apply(o: ReaderOptions) -> None:
        o.set_format_options(driver, opts)

    return apply


def with_unserialize_options(uo: Mapping[str, Any] | None) -> ReaderOption:
    def apply(o: ReaderOptions) -> None:
        if uo is not None:
            o.unserialize_options = dict(uo)

    return apply


def with_sniffer(sniffer: Sniffer | None) -> ReaderOption:
    def apply(o: ReaderOptions) -> None:
        if sniffer is not None:
            o.sniffer = sniffer

    return apply


def build_reader_options(*opts: ReaderOption, format: str | None = None) -> ReaderOptions:
    """
    Apply functional options in order; later options win.
    """
    options = ReaderOptions(format=format)
    for opt in opts:
        opt(options)
    return options
