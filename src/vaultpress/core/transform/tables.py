"""Pipe table detection and rendering"""

import re

from vaultpress.core.models import Table


SEPARATOR_RE = re.compile(r'^\|[-:\s|]*-[-:\s|]*\|$')


def _is_pipe_row(line: str) -> bool:
    """True for '|...|' lines with something between the outer pipes."""
    s = line.strip()
    return len(s) > 2 and s.startswith('|') and s.endswith('|')


def _is_separator(line: str) -> bool:
    return _is_pipe_row(line) and bool(SEPARATOR_RE.match(line.strip()))


def split_row(line: str) -> list[str]:
    """Split a pipe row into trimmed cells, dropping empty ones."""
    return [c.strip() for c in line.strip().split('|') if c.strip()]


def parse_table(lines: list[str], start: int = 0) -> Table | None:
    """Parse a table at lines[start]; None unless header, separator and a data row are present."""
    if len(lines) - start < 3:
        return None
    header, separator = lines[start], lines[start + 1]
    if not _is_pipe_row(header) or _is_separator(header) or not _is_separator(separator):
        return None
    rows = []
    for line in lines[start + 2:]:
        if not _is_pipe_row(line):
            break
        rows.append(split_row(line))
    if not rows:
        return None
    return Table(header=split_row(header), rows=rows)


def _scan(lines: list[str]):
    """Yield (start, end, table) for every table block, top to bottom."""
    i = 0
    while i < len(lines):
        table = parse_table(lines, i)
        if table is None:
            i += 1
            continue
        end = i + 2 + len(table.rows)
        yield i, end, table
        i = end


def find_tables(text: str) -> list[Table]:
    """Return every well-formed table in text."""
    return [t for _, _, t in _scan(text.split('\n'))]


def render_table(table: Table) -> str:
    """Render a Table as a single-line <table> element; cells are inserted as-is."""
    head = ''.join(f'<th>{h}</th>' for h in table.header)
    body = ''.join(
        '<tr>' + ''.join(f'<td>{c}</td>' for c in row) + '</tr>'
        for row in table.rows
    )
    return f'<table><tr>{head}</tr>{body}</table>'


def convert_tables(text: str) -> str:
    """Replace each table block with its HTML; everything else is left untouched."""
    lines = text.split('\n')
    out: list[str] = []
    last = 0
    for start, end, table in _scan(lines):
        out.extend(lines[last:start])
        out.append(render_table(table))
        last = end
    if not out:
        return text
    out.extend(lines[last:])
    return '\n'.join(out)
