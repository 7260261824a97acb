"""CLI entrypoint: Typer app definition and command registration"""

import typer

from vaultpress.cli.commands import convert_cmd, hint_cmd, open_cmd, render_cmd


app = typer.Typer(name="vaultpress", no_args_is_help=True, help="Themed HTML and PDF from markdown vault notes")

app.command(name="convert")(convert_cmd)
app.command(name="open")(open_cmd)
app.command(name="hint")(hint_cmd)
app.command(name="render")(render_cmd)
