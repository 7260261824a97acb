"""Source loading: markdown files or text, with YAML frontmatter removal"""

import re
from pathlib import Path
from typing import Any

import yaml

from vaultpress.core.models import SourceDoc


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.markdown', '.txt'}


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def load_source(name: str | None, text: str, strip: bool = True) -> SourceDoc:
    """Build a SourceDoc from already-read text (shared text, a resolved vault note)."""
    text = text.replace('\r\n', '\n')
    if strip:
        _, text = strip_frontmatter(text)
    return SourceDoc(name=name, markdown=text)


def read_source(path: Path, strip: bool = True) -> SourceDoc:
    """Read a single markdown file into a SourceDoc named after the file."""
    if path.suffix.lower() not in MD_EXTENSIONS:
        raise ValueError(f"Not a markdown file: {path}")
    return load_source(path.name, path.read_text(encoding='utf-8'), strip)
