"""Command-line interface for rendering head meta documents."""

import logging
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from headmeta import __version__
from headmeta.dispatch import HeadMetaError
from headmeta.document import HeadMetaDocument
from headmeta.logging_config import setup_logging

app = typer.Typer(
    name="headmeta",
    help="Render HTML <meta> and <link> head elements from YAML definitions.",
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def render(
    path: Path = typer.Argument(
        ...,
        help="YAML head meta document",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    charset: str | None = typer.Option(
        None,
        "--charset",
        "-c",
        help="Charset to render (overrides the document)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log registry operations to stderr",
    ),
) -> None:
    """Render a head meta document as an HTML fragment."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        document = HeadMetaDocument.from_yaml_file(path)
        meta = document.to_head_meta()
        if charset is not None:
            meta.set_charset(charset)
        html = meta.render()
    except (HeadMetaError, ValueError, yaml.YAMLError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e

    # Raw markup; bypass rich so brackets and tags are printed untouched
    typer.echo(html)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"headmeta {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
