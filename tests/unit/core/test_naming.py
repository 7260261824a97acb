"""Unit tests for core/utils/naming.py"""

from datetime import datetime

import pytest

from vaultpress.core.utils.naming import FALLBACK_NAME, derive_name, timestamp


STAMP = "20240101_120000"


@pytest.mark.parametrize("source,ext,expected", [
    ("Campaign.md",       "pdf",  "Campaign_20240101_120000.pdf"),
    ("Campaign.md",       "html", "Campaign_20240101_120000.html"),
    ("Session 1.md",      "pdf",  "Session 1_20240101_120000.pdf"),
    ("archive.tar.gz",    "pdf",  "archive.tar_20240101_120000.pdf"),
    ("NoExtension",       "pdf",  "NoExtension_20240101_120000.pdf"),
    ("Campaign.md",       ".pdf", "Campaign_20240101_120000.pdf"),
])
def test_derive_name(source, ext, expected):
    """The source extension is replaced by _<stamp>.<ext>."""
    assert derive_name(source, ext, STAMP) == expected


@pytest.mark.parametrize("source", [None, "", ".md"])
def test_derive_name_fallback(source):
    """Missing or empty source names use the fallback base."""
    assert derive_name(source, "html", STAMP) == f"{FALLBACK_NAME}_{STAMP}.html"


def test_derive_name_custom_fallback():
    """The fallback base name can be supplied by the caller."""
    assert derive_name(None, "pdf", STAMP, fallback="Notes") == f"Notes_{STAMP}.pdf"


def test_timestamp_format():
    """timestamp renders yyyyMMdd_HHmmss."""
    assert timestamp(datetime(2024, 1, 1, 12, 0, 0)) == STAMP


def test_timestamp_defaults_to_now():
    """Without an argument the current time is used."""
    stamp = timestamp()
    assert len(stamp) == 15
    assert stamp[8] == "_"
