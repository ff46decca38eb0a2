import pytest

from bomgraph.reader.options import (
    FormatDriver,
    ReaderOptions,
    build_reader_options,
    with_format_options,
    with_sniffer,
    with_unserialize_options,
)

# Tests


def test_format_options_keyed_by_driver():
    opts = ReaderOptions()
    opts.set_format_options(FormatDriver.SPDX23_JSON, {"strict": True})

    assert opts.get_format_options(FormatDriver.SPDX23_JSON) == {"strict": True}
    assert opts.get_format_options("spdx23json") == {"strict": True}
    assert opts.get_format_options(FormatDriver.CDX15_JSON) is None


def test_blank_driver_is_ignored():
    opts = ReaderOptions()
    opts.set_format_options("", {"x": 1})
    opts.set_format_options("   ", {"x": 1})

    assert opts.get_format_options("") is None
    assert opts == ReaderOptions()


def test_unknown_driver_raises():
    with pytest.raises(ValueError):
        ReaderOptions().set_format_options("yaml", {})
    with pytest.raises(ValueError):
        ReaderOptions().get_format_options("yaml")


def test_build_reader_options_applies_in_order():
    def sniff(head: bytes) -> str:
        return "spdx23json"

    opts = build_reader_options(
        with_format_options(FormatDriver.CDX14_JSON, "first"),
        with_format_options("cdx14json", "second"),
        with_unserialize_options({"lenient": True}),
        with_sniffer(sniff),
        format="text/spdx+json",
    )

    assert opts.format == "text/spdx+json"
    assert opts.get_format_options(FormatDriver.CDX14_JSON) == "second"
    assert opts.unserialize_options == {"lenient": True}
    assert opts.sniffer is sniff


def test_none_options_are_ignored():
    def sniff(head: bytes) -> str:
        return "protobom"

    opts = build_reader_options(
        with_sniffer(sniff),
        with_unserialize_options({"a": 1}),
        with_sniffer(None),
        with_unserialize_options(None),
    )

    assert opts.sniffer is sniff
    assert opts.unserialize_options == {"a": 1}
