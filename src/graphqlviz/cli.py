"""CLI interface for graphqlviz using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphqlviz import __description__, __version__
from graphqlviz.config import LogLevel, load_config
from graphqlviz.fetch import FetchError, fetch_schema
from graphqlviz.graph import GraphGenerator, GraphvizRenderer, RenderError
from graphqlviz.models import SchemaError, load_schema

USAGE = "Usage: graphqlviz <url-or-file> <output-name>"

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

app = typer.Typer(
    name="graphqlviz",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"graphqlviz version {__version__}")
        raise typer.Exit()


def _configure_logging(level: int) -> None:
    """Send package log records to stderr through rich."""
    package_logger = logging.getLogger("graphqlviz")
    package_logger.handlers = [
        RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    ]
    package_logger.setLevel(level)


@app.command()
def main(
    args: Annotated[
        Optional[List[str]],
        typer.Argument(help="<url-or-file> <output-name>", show_default=False)
    ] = None,
    expand_args: Annotated[
        Optional[bool],
        typer.Option("--expand-args/--collapse-args", help="Show field arguments instead of '...'")
    ] = None,
    expand_arg_types: Annotated[
        Optional[bool],
        typer.Option("--expand-arg-types/--hide-arg-types", help="Show argument types when arguments are expanded")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .graphqlviz.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """Draw a GraphQL schema from a URL or introspection JSON file."""
    if not args or len(args) != 2:
        console.print(USAGE)
        return

    source, output = args

    try:
        settings = load_config(config).with_label_overrides(expand_args, expand_arg_types)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging(logging.DEBUG if verbose else LOG_LEVELS[settings.logging.level])

    try:
        console.print(f"[dim]Reading schema from {escape(source)}...[/dim]")
        schema_file = fetch_schema(source, output, settings.fetch)
        console.print(f"[green]OK[/green] Schema saved to {schema_file}")

        schema = load_schema(schema_file)

        renderer = GraphvizRenderer(settings.render)
        spec = GraphGenerator(settings).generate_from_schema(schema, title=Path(output).name)
        console.print(f"[green]OK[/green] Graph with {len(spec.nodes)} nodes and {len(spec.edges)} edges")

        dot_path, svg_path = renderer.write(spec, output)
        console.print(f"[green]Diagram written:[/green] {dot_path}, {svg_path}")
        console.print("Done!")

    except (OSError, FetchError, SchemaError, RenderError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
