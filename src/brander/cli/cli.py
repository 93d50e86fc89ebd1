"""CLI entrypoint: Typer app definition and command registration"""

import typer

from brander.cli.commands import generate_cmd, providers_cmd


app = typer.Typer(name="brander", no_args_is_help=True, help="Generate branding assets and documentation")

app.command(name="generate")(generate_cmd)
app.command(name="providers")(providers_cmd)
