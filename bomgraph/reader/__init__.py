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

from bomgraph.reader.options import (
    FormatDriver,
    ReaderOption,
    ReaderOptions,
    Sniffer,
    build_reader_options,
    with_format_options,
    with_sniffer,
    with_unserialize_options,
)

__all__ = (
    "FormatDriver",
    "ReaderOptions",
    "ReaderOption",
    "Sniffer",
    "build_reader_options",
    "with_format_options",
    "with_unserialize_options",
    "with_sniffer",
)
