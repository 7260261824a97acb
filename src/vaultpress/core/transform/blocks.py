"""Line-oriented block rewriting: headings, blockquotes and optional list items"""

import re

from vaultpress.core.models import BlockKind


# Longest marker first; each pattern requires its exact marker length plus a space.
HEADING_RULES: list[tuple[int, re.Pattern]] = [
    (level, re.compile(rf'^{"#" * level} (.+)$', re.MULTILINE))
    for level in (4, 3, 2, 1)
]
QUOTE_RE = re.compile(r'^> (.+)$', re.MULTILINE)
LIST_ITEM_RE = re.compile(r'^- (.+)$')


def classify_line(line: str, convert_lists: bool = False) -> BlockKind:
    """Return the block kind the first matching rule assigns to a raw source line."""
    for _, pattern in HEADING_RULES:
        if pattern.match(line):
            return BlockKind.heading
    if QUOTE_RE.match(line):
        return BlockKind.quote
    if convert_lists and LIST_ITEM_RE.match(line):
        return BlockKind.list_item
    return BlockKind.paragraph


def _convert_lists(text: str) -> str:
    """Group runs of '- ' lines into one <ul> line each."""
    out: list[str] = []
    items: list[str] = []

    def _flush() -> None:
        if items:
            out.append('<ul>' + ''.join(f'<li>{i}</li>' for i in items) + '</ul>')
            items.clear()

    for line in text.split('\n'):
        m = LIST_ITEM_RE.match(line)
        if m:
            items.append(m.group(1))
            continue
        _flush()
        out.append(line)
    _flush()
    return '\n'.join(out)


def transform_blocks(text: str, convert_lists: bool = False) -> str:
    """Rewrite heading and blockquote lines (and '- ' items when enabled) into HTML."""
    for level, pattern in HEADING_RULES:
        text = pattern.sub(rf'<h{level}>\1</h{level}>', text)
    text = QUOTE_RE.sub(r'<blockquote><p>\1</p></blockquote>', text)
    if convert_lists:
        text = _convert_lists(text)
    return text
