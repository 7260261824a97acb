"""CLI command implementations"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from vaultpress.config import Settings, load_config
from vaultpress.core.assemble import assemble
from vaultpress.core.models import ConvertOptions, SourceDoc
from vaultpress.core.parse import load_source, read_source
from vaultpress.core.pipeline import run_convert, run_open
from vaultpress.export.pdf import PdfRenderError
from vaultpress.export.sinks import SinkError
from vaultpress.vault.errors import EntryNotFound, HintNotFound, ReadFailure
from vaultpress.vault.hints import extract_hint


STDIN = "-"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _echo_written(paths: list[Path]) -> None:
    for p in paths:
        typer.echo(f"  -> {p}")
    typer.echo(f"Wrote {len(paths)} file(s)")


def _source(path: str, settings: Settings) -> SourceDoc:
    """Read a markdown file, or raw shared text from stdin when path is '-'."""
    try:
        if path == STDIN:
            return load_source(None, sys.stdin.read(), strip=settings.strip_frontmatter)
        return read_source(Path(path), strip=settings.strip_frontmatter)
    except (ValueError, OSError) as e:
        _fail(f"Could not read {path}", e)


def convert_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to convert, or - to read text from stdin")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html, pdf or both")] = None,
    lists: Annotated[Optional[bool], typer.Option("--lists/--no-lists", help="Render '- ' lines as list items")] = None,
    ):
    """Convert a markdown file, or shared text from stdin, to themed HTML and PDF."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "convert_lists": lists})
    source = _source(path, settings)
    try:
        written = run_convert(source, settings)
    except (PdfRenderError, SinkError) as e:
        _fail("Conversion failed", e)
    _echo_written(written)


def open_cmd(
    url: Annotated[str, typer.Argument(help="Note URL, e.g. obsidian://open?vault=V&file=Note")],
    vault: Annotated[Optional[str], typer.Option("--vault", help="Vault root folder")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html, pdf or both")] = None,
    lists: Annotated[Optional[bool], typer.Option("--lists/--no-lists", help="Render '- ' lines as list items")] = None,
    ):
    """Find the note a URL refers to inside the vault and convert it."""
    settings = _settings(overrides={
        "vault_dir": vault, "output_dir": out, "output_format": fmt, "convert_lists": lists,
    })
    if not settings.vault_dir:
        _fail("No vault selected. Pass --vault or set VAULTPRESS_VAULT_DIR.")
    vault_dir = Path(settings.vault_dir).expanduser()
    if not vault_dir.is_dir():
        _fail(f"Vault folder does not exist: {vault_dir}")

    try:
        written = run_open(url, vault_dir, settings)
    except HintNotFound as e:
        _fail(str(e))
    except EntryNotFound as e:
        _fail(f"File not found: {e.hint}", e)
    except ReadFailure as e:
        _fail(f"File found but unreadable: {e.name}", e)
    except (ValueError, PdfRenderError, SinkError) as e:
        _fail("Conversion failed", e)
    _echo_written(written)


def hint_cmd(
    url: Annotated[str, typer.Argument(help="Note URL to inspect")],
    ):
    """Print the note name a URL refers to."""
    hint = extract_hint(url)
    if hint is None:
        _fail(f"Could not extract a filename from URL: {url}")
    typer.echo(hint)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render, or - to read text from stdin")],
    lists: Annotated[Optional[bool], typer.Option("--lists/--no-lists", help="Render '- ' lines as list items")] = None,
    ):
    """Print the themed HTML for a markdown file to stdout."""
    settings = _settings(overrides={"convert_lists": lists})
    source = _source(path, settings)
    typer.echo(assemble(source.markdown, ConvertOptions(convert_lists=settings.convert_lists)))
