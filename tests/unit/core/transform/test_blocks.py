"""Unit tests for core/transform/blocks.py"""

import re

import pytest

from vaultpress.core.models import BlockKind
from vaultpress.core.transform.blocks import classify_line, transform_blocks


def test_single_h1():
    """'# Title' yields exactly one h1 and no other heading tags."""
    out = transform_blocks("# Title")
    assert out.count("<h1>Title</h1>") == 1
    assert re.findall(r"<h[1-6]>", out) == ["<h1>"]


@pytest.mark.parametrize("md,expected", [
    ("# One",    "<h1>One</h1>"),
    ("## Two",   "<h2>Two</h2>"),
    ("### Three", "<h3>Three</h3>"),
    ("#### Four", "<h4>Four</h4>"),
])
def test_heading_levels(md, expected):
    """Each marker length maps to its own heading level."""
    assert transform_blocks(md) == expected


@pytest.mark.parametrize("md", [
    "##### Five",
    "#NoSpace",
    "Issue # 12 was fixed",
    "  # indented",
])
def test_non_headings_untouched(md):
    """Unsupported depths, missing spaces and mid-line markers are not headings."""
    assert transform_blocks(md) == md


def test_headings_on_multiple_lines():
    """Heading rules apply per line across the whole document."""
    out = transform_blocks("# A\ntext\n## B\n### C")
    assert out == "<h1>A</h1>\ntext\n<h2>B</h2>\n<h3>C</h3>"


def test_blockquote():
    """'> ' lines become a blockquote paragraph."""
    assert transform_blocks("> The ravine yawns.") == "<blockquote><p>The ravine yawns.</p></blockquote>"


def test_lists_literal_by_default():
    """List markers stay literal text unless enabled."""
    md = "- sword\n- shield"
    assert transform_blocks(md) == md


def test_lists_grouped_when_enabled():
    """Consecutive '- ' lines become a single <ul> line."""
    out = transform_blocks("Loot:\n- sword\n- shield\nDone", convert_lists=True)
    assert out == "Loot:\n<ul><li>sword</li><li>shield</li></ul>\nDone"


def test_table_syntax_untouched():
    """Pipe and dash characters of a table survive the block pass."""
    md = "|a|b|\n|-|-|\n|1|2|"
    assert transform_blocks(md, convert_lists=True) == md


@pytest.mark.parametrize("line,lists,expected", [
    ("# Title",    False, BlockKind.heading),
    ("#### Deep",  False, BlockKind.heading),
    ("> quote",    False, BlockKind.quote),
    ("- item",     True,  BlockKind.list_item),
    ("- item",     False, BlockKind.paragraph),
    ("plain text", False, BlockKind.paragraph),
])
def test_classify_line(line, lists, expected):
    """classify_line follows the block rule precedence."""
    assert classify_line(line, convert_lists=lists) == expected


def test_every_block_kind_is_classified():
    """Each BlockKind is produced by some line."""
    lines = ["# a", "> b", "- c", "d"]
    assert {classify_line(line, convert_lists=True) for line in lines} == set(BlockKind)
