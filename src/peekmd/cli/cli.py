"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from peekmd.cli.commands import describe_cmd, render_cmd, version_callback


app = typer.Typer(name="peekmd", no_args_is_help=True, help="GitHub-style previews of local Markdown files")


@app.callback()
def main(
    version: Annotated[bool, typer.Option(
        "--version", "-v", callback=version_callback, is_eager=True, help="Show the version and exit",
    )] = False,
    ):
    """Render Markdown the way GitHub shows it in a file view."""


app.command(name="render")(render_cmd)
app.command(name="describe")(describe_cmd)
