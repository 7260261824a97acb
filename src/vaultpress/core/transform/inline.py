"""Inline span rewriting: bold and italic emphasis"""

import re


BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
ITALIC_RE = re.compile(r'\*(.+?)\*')


def transform_inline(text: str, count: int = 0) -> str:
    """Rewrite **bold** then *italic* spans; count=0 replaces every match, count=n the first n."""
    text = BOLD_RE.sub(r'<strong>\1</strong>', text, count=count)
    return ITALIC_RE.sub(r'<em>\1</em>', text, count=count)
