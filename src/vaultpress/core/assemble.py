"""Themed document assembly: transform passes, paragraph folding and the page template"""

import logging
import re
from collections import Counter
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from vaultpress.core.models import BlockKind, ConvertOptions
from vaultpress.core.transform.blocks import classify_line, transform_blocks
from vaultpress.core.transform.inline import transform_inline
from vaultpress.core.transform.tables import convert_tables, find_tables


THEMES_DIR = Path(__file__).parent / 'themes'
THEME = 'phb.html'
DOCTYPE = '<!DOCTYPE html>'

# A line holding one complete converted element; folding leaves these alone.
OPAQUE_RE = re.compile(r'^<(h[1-4]|blockquote|table|ul|p)>.*</\1>$')

logger = logging.getLogger(__name__)

_env = Environment(
    loader=FileSystemLoader(str(THEMES_DIR)),
    undefined=StrictUndefined,
    autoescape=True,
)


def wrap_paragraphs(text: str) -> str:
    """Wrap text in <p>..</p> unless it holds an <h1>, a <div>, or is already wrapped."""
    if '<h1>' in text or '<div' in text:
        return text
    if text.startswith('<p>') and text.endswith('</p>'):
        return text
    return f'<p>{text}</p>'


def _fold_run(lines: list[str]) -> str:
    """Fold one prose run: blank lines become paragraph breaks, single newlines <br>."""
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ''
    text = '\n'.join(lines)
    return wrap_paragraphs(text.replace('\n\n', '</p><p>').replace('\n', '<br>'))


def fold_paragraphs(text: str) -> str:
    """Fold newlines into paragraph and line breaks, skipping converted block lines."""
    parts: list[str] = []
    run: list[str] = []
    for line in text.split('\n'):
        if OPAQUE_RE.match(line):
            parts.append(_fold_run(run))
            run = []
            parts.append(line)
        else:
            run.append(line)
    parts.append(_fold_run(run))
    return ''.join(parts)


def _log_summary(log: logging.Logger, markdown: str, options: ConvertOptions) -> None:
    kinds = Counter(classify_line(line, options.convert_lists) for line in markdown.split('\n'))
    log.debug(
        "Converting %d lines: %d heading, %d quote, %d list, %d table(s)",
        sum(kinds.values()), kinds[BlockKind.heading], kinds[BlockKind.quote], kinds[BlockKind.list_item],
        len(find_tables(markdown)),
    )


def render_body(markdown: str, options: ConvertOptions = None, log: logging.Logger = None) -> str:
    """Run block -> inline -> table passes, then fold paragraphs. Returns the HTML body."""
    options = options or ConvertOptions()
    log = log or logger
    text = markdown.replace('\r\n', '\n')
    if log.isEnabledFor(logging.DEBUG):
        _log_summary(log, text, options)

    text = transform_blocks(text, convert_lists=options.convert_lists)
    text = transform_inline(text)
    text = convert_tables(text)
    return fold_paragraphs(text)


def render_page(body: str) -> str:
    """Substitute an HTML body into the fixed theme template."""
    return _env.get_template(THEME).render(body=body)


def assemble(markdown: str, options: ConvertOptions = None, log: logging.Logger = None) -> str:
    """Convert markdown into a complete themed HTML document.

    A document that is already assembled is returned unchanged.
    """
    if markdown.lstrip().startswith(DOCTYPE):
        return markdown
    html = render_page(render_body(markdown, options, log))
    (log or logger).debug("Assembled %d bytes of HTML", len(html))
    return html
