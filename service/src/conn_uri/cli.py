"""Typer CLI interface for conn-uri."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import settings
from .exceptions import ConnURIError
from .logging_config import setup_logging
from .models.uri import ConnectionURI
from .utils.uri_utils import append_segment_to_path, parse_uri, remove_query

app = typer.Typer(
    name="conn-uri",
    help="conn-uri - Normalize connection strings into http(s) URIs",
    add_completion=False,
)
console = Console()


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _default_uri(value: Optional[str]) -> ConnectionURI:
    if value is None:
        return settings.default_uri()
    try:
        return ConnectionURI.from_string(value)
    except ConnURIError as e:
        _fail(f"Invalid default URI: {e.message}")


def _show(uri: ConnectionURI, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(uri.components(), indent=2))
        return

    table = Table(title=escape(str(uri)), show_header=False)
    table.add_column("Component", style="bold")
    table.add_column("Value")
    for name, value in uri.components().items():
        if name == "uri":
            continue
        table.add_row(name, "" if value is None else escape(str(value)))
    console.print(table)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_level: str = typer.Option(
        settings.LOG_LEVEL, "--log-level", help="Log level when not in debug mode"
    ),
):
    """Configure logging before running a command."""
    setup_logging(level=log_level, debug=debug or settings.DEBUG)


@app.command()
def parse(
    connection_string: str = typer.Argument(..., help="Connection string to resolve"),
    default_uri: Optional[str] = typer.Option(
        None, "--default-uri", "-d", help="URI supplying missing components"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print components as JSON"),
):
    """Resolve a connection string against the default URI."""
    defaults = _default_uri(default_uri)
    try:
        uri = parse_uri(connection_string, defaults)
    except ConnURIError as e:
        _fail(e.message)
    _show(uri, as_json)


@app.command("strip-query")
def strip_query(
    connection_string: str = typer.Argument(..., help="Connection string to resolve"),
    default_uri: Optional[str] = typer.Option(
        None, "--default-uri", "-d", help="URI supplying missing components"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print components as JSON"),
):
    """Resolve a connection string, then drop its query."""
    defaults = _default_uri(default_uri)
    try:
        uri = remove_query(parse_uri(connection_string, defaults), connection_string, defaults)
    except ConnURIError as e:
        _fail(e.message)
    _show(uri, as_json)


@app.command("append-segment")
def append_segment(
    uri: str = typer.Argument(..., help="Base URI"),
    segment: str = typer.Argument(..., help="Path segment to append"),
    as_json: bool = typer.Option(False, "--json", help="Print components as JSON"),
):
    """Append a path segment to a URI."""
    try:
        result = append_segment_to_path(ConnectionURI.from_string(uri), segment)
    except ConnURIError as e:
        _fail(e.message)
    _show(result, as_json)


if __name__ == "__main__":
    app()
