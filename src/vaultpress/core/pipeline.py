"""Pipeline step functions: convert a source note and write HTML/PDF outputs"""

import logging
from pathlib import Path

from vaultpress.config import Settings
from vaultpress.core.assemble import assemble
from vaultpress.core.models import ConvertOptions, SourceDoc
from vaultpress.core.parse import load_source
from vaultpress.core.utils.naming import derive_name, timestamp
from vaultpress.export.pdf import render_pdf
from vaultpress.export.sinks import default_sinks, write_first
from vaultpress.vault.local_tree import LocalTree
from vaultpress.vault.resolve import resolve_url


logger = logging.getLogger(__name__)


def _formats(output_format: str) -> list[str]:
    return ['html', 'pdf'] if output_format == 'both' else [output_format]


def run_convert(
    source: SourceDoc,
    settings: Settings,
    stamp: str = None,
    sinks: list = None,
    ) -> list[Path]:
    """Assemble source and write each configured format. Returns the written paths."""
    stamp = stamp or timestamp()
    sinks = sinks if sinks is not None else default_sinks(settings.output_dir, settings.fallback_dir)
    html = assemble(source.markdown, ConvertOptions(convert_lists=settings.convert_lists))

    written = []
    for ext in _formats(settings.output_format):
        data = html.encode('utf-8') if ext == 'html' else render_pdf(html)
        name = derive_name(source.name, ext, stamp, fallback=settings.fallback_name)
        written.append(write_first(sinks, name, data))
    return written


def run_open(
    url: str,
    vault_dir: Path,
    settings: Settings,
    stamp: str = None,
    sinks: list = None,
    ) -> list[Path]:
    """Resolve a note URL inside vault_dir, then convert it like run_convert."""
    name, content = resolve_url(LocalTree(vault_dir), url)
    logger.info("Resolved %s in %s", name, vault_dir)
    source = load_source(name, content, strip=settings.strip_frontmatter)
    return run_convert(source, settings, stamp, sinks)
