"""CLI entry point for notedoc.

Invoked as::

    notedoc [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m notedoc.cli.main

Commands
--------
parse        Parse a markup file and dump the document as JSON or YAML
render       Render a stored document file back to markup
normalize    Normalize stored content of any shape to {markup, document}
project      Show the native display blocks of stored content
tables       Report whether stored content contains a table
text-decode  Read plain-text shorthand into a document
text-encode  Write stored content as plain-text shorthand
version      Show version information

Content files given to ``normalize``, ``project``, ``tables`` and
``text-encode`` are read as JSON when they parse as JSON and as markup
otherwise.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from notedoc.config import Settings
    from notedoc.model.nodes import Document

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read an input file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_content(path: str) -> object:
    """Read stored content: JSON when it parses, raw markup otherwise."""
    source = _read_source(path)
    try:
        return json.loads(source)
    except json.JSONDecodeError:
        return source


def _load_document_or_exit(path: str, settings: "Settings") -> "Document":
    """Read a stored document file (JSON, or YAML by extension)."""
    from notedoc.model import DocumentFormatError, DocumentSerializer

    source = _read_source(path)
    serializer = DocumentSerializer(max_depth=settings.max_depth)
    try:
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            return serializer.from_yaml(source)
        return serializer.from_json(source)
    except DocumentFormatError as exc:
        err_console.print(f"[red]Format error[/red] in {path}: {exc}")
        sys.exit(1)


def _emit(text: str, lang: str, output: str | None, what: str) -> None:
    """Write ``text`` to ``output`` or stdout (highlighted on a terminal)."""
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]{what} written to[/green] {output}")
    elif console.is_terminal:
        console.print(Syntax(text, lang, line_numbers=False))
    else:
        click.echo(text)


def _settings(ctx: click.Context) -> "Settings":
    return ctx.obj["settings"]


_output_option = click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="notedoc")
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False), help="Settings file (defaults to ./notedoc.yaml)")
@click.option("--max-depth", type=int, default=None, help="Override the nesting depth limit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log conversion details to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, max_depth: int | None, verbose: bool) -> None:
    """Convert note content between markup, documents, display blocks and plain text."""
    from notedoc.config import load_config

    try:
        settings = load_config(config_path, overrides={"max_depth": max_depth})
    except (ValueError, ValidationError) as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from notedoc import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]notedoc[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# parse / render commands
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Document output format",
)
@_output_option
@click.pass_context
def parse_command(ctx: click.Context, file: str, output_format: str, output: str | None) -> None:
    """Parse a markup file and dump the document.

    FILE is the path to the markup file to parse.
    """
    import notedoc
    from notedoc.model import DocumentSerializer

    settings = _settings(ctx)
    document = notedoc.to_document(_read_source(file), settings=settings)
    serializer = DocumentSerializer(max_depth=settings.max_depth)

    if output_format.lower() == "json":
        _emit(serializer.to_json(document, indent=2), "json", output, "Document")
    else:
        _emit(serializer.to_yaml(document), "yaml", output, "Document")


@cli.command(name="render")
@click.argument("file", type=click.Path(exists=False))
@_output_option
@click.pass_context
def render_command(ctx: click.Context, file: str, output: str | None) -> None:
    """Render a stored document back to markup.

    FILE is a document in JSON (or YAML, by .yaml/.yml extension).
    """
    import notedoc

    settings = _settings(ctx)
    document = _load_document_or_exit(file, settings)
    _emit(notedoc.to_markup(document, settings=settings), "html", output, "Markup")


# ---------------------------------------------------------------------------
# normalize / project / tables commands
# ---------------------------------------------------------------------------


@cli.command(name="normalize")
@click.argument("file", type=click.Path(exists=False))
@_output_option
@click.pass_context
def normalize_command(ctx: click.Context, file: str, output: str | None) -> None:
    """Normalize stored content to {markup, document}.

    FILE holds content of any accepted shape.
    """
    import notedoc

    result = notedoc.normalize(_load_content(file), settings=_settings(ctx))
    text = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    _emit(text, "json", output, "Normalized content")


@cli.command(name="project")
@click.argument("file", type=click.Path(exists=False))
@_output_option
@click.pass_context
def project_command(ctx: click.Context, file: str, output: str | None) -> None:
    """Show the native display blocks of stored content.

    FILE holds content of any accepted shape.
    """
    import notedoc

    settings = _settings(ctx)
    document = notedoc.normalize(_load_content(file), settings=settings).document
    blocks = notedoc.project_native(document, settings=settings)
    text = json.dumps([block.to_dict() for block in blocks], indent=2, ensure_ascii=False)
    _emit(text, "json", output, "Blocks")


@cli.command(name="tables")
@click.argument("file", type=click.Path(exists=False))
@click.option("--check", is_flag=True, default=False, help="Exit with status 1 when a table is found")
@click.pass_context
def tables_command(ctx: click.Context, file: str, check: bool) -> None:
    """Report whether stored content contains a table.

    FILE holds content of any accepted shape.
    """
    import notedoc

    found = notedoc.contains_table(_load_content(file), settings=_settings(ctx))
    if found:
        console.print(f"[yellow]TABLE[/yellow] {file} contains a table")
        if check:
            sys.exit(1)
    else:
        console.print(f"[green]OK[/green] {file} contains no table")


# ---------------------------------------------------------------------------
# plain-text commands
# ---------------------------------------------------------------------------


@cli.command(name="text-decode")
@click.argument("file", type=click.Path(exists=False))
@_output_option
@click.pass_context
def text_decode_command(ctx: click.Context, file: str, output: str | None) -> None:
    """Read plain-text shorthand into a document.

    FILE is the path to the shorthand text file.
    """
    import notedoc
    from notedoc.model import DocumentSerializer

    settings = _settings(ctx)
    document = notedoc.decode_text(_read_source(file), settings=settings)
    text = DocumentSerializer(max_depth=settings.max_depth).to_json(document, indent=2)
    _emit(text, "json", output, "Document")


@cli.command(name="text-encode")
@click.argument("file", type=click.Path(exists=False))
@_output_option
@click.pass_context
def text_encode_command(ctx: click.Context, file: str, output: str | None) -> None:
    """Write stored content as plain-text shorthand.

    FILE holds content of any accepted shape.
    """
    import notedoc

    settings = _settings(ctx)
    document = notedoc.normalize(_load_content(file), settings=settings).document
    _emit(notedoc.encode_text(document, settings=settings), "markdown", output, "Text")


if __name__ == "__main__":
    cli()
