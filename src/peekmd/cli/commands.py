"""CLI command implementations"""

import logging
import webbrowser
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated, Optional

import typer

from peekmd.config import Settings, load_config
from peekmd.core.parse import extract_description, extract_topics
from peekmd.core.pipeline import read_markdown, render_file, write_page


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def version_callback(value: bool) -> None:
    if not value:
        return
    try:
        typer.echo(version("peekmd"))
    except PackageNotFoundError:
        typer.echo("unknown")
    raise typer.Exit()


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to preview")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    style: Annotated[Optional[str], typer.Option("--style", help="Pygments style for code blocks")] = None,
    fragment: Annotated[bool, typer.Option("--fragment", help="Write the HTML fragment without the page")] = False,
    no_html: Annotated[bool, typer.Option("--no-html", help="Escape raw HTML in the markdown")] = False,
    open_browser: Annotated[bool, typer.Option("--open", help="Open the page in the default browser")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log debug output")] = False,
    ):
    """Render a markdown file to a GitHub-style HTML page."""
    settings = _settings(overrides={
        "output_dir": out,
        "highlight_style": style,
        "html": False if no_html else None,
        "log_level": "DEBUG" if verbose else None,
    })
    try:
        doc = render_file(path, settings)
        out_file = write_page(doc, Path(settings.output_dir), settings, fragment=fragment)
    except ValueError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Could not write output", e)

    typer.echo(f"Markdown: {doc.path}")
    typer.echo(f"Preview:  {out_file}")
    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())


def describe_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to summarize")],
    ):
    """Print the description and topics a preview page would show."""
    _settings()
    try:
        content = read_markdown(path)
    except ValueError as e:
        _fail(str(e))
    typer.echo(extract_description(content))
    typer.echo(f"Topics: {', '.join(extract_topics(path.resolve().parent.name))}")
