"""spec-command CLI for inspecting the reference registry.

Renders the reference manual and lists compiled snippets outside an editor,
using the same registry the editor front end uses.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from spec_command.config import get_settings
from spec_command.models.kinds import (
    KIND_METADATA,
    ReferenceItemKind,
    to_completion_item_kind,
    to_symbol_kind,
)
from spec_command.registry import MalformedDatabase, SystemRegistry
from spec_command.uris import BUILTIN_URI, SOURCE_NAMES, with_query

console = Console()

SYSTEM_SOURCES = ["built-in", "motor", "counter", "snippet"]


def print_error(text: str) -> None:
    """Print error message."""
    console.print(f"[red]Error: {text}[/red]")


def _build_registry(
    motors: Tuple[str, ...],
    counters: Tuple[str, ...],
    templates: Tuple[str, ...],
    database: Optional[str] = None,
) -> SystemRegistry:
    """Create a registry from the global settings overridden by CLI options."""
    updates = {}
    if motors:
        updates["mnemonic_motors"] = list(motors)
    if counters:
        updates["mnemonic_counters"] = list(counters)
    if templates:
        updates["editor_code_snippets"] = list(templates)
    if database:
        updates["api_reference_path"] = Path(database)
    settings = get_settings().model_copy(update=updates)
    return SystemRegistry(settings=settings)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Inspect spec reference symbols and snippets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--source",
    type=click.Choice(SYSTEM_SOURCES),
    default="built-in",
    help="Source to render",
)
@click.option("--kind", default=None, help="Only render this kind label (e.g. macro)")
@click.option("--database", default=None, help="API reference database JSON file")
@click.option("--motor", "motors", multiple=True, help="Motor mnemonic 'name # description'")
@click.option("--counter", "counters", multiple=True, help="Counter mnemonic")
@click.option("--template", "templates", multiple=True, help="Extra snippet template")
@click.option("--render", is_flag=True, help="Render the Markdown in the terminal")
def manual(
    source: str,
    kind: Optional[str],
    database: Optional[str],
    motors: Tuple[str, ...],
    counters: Tuple[str, ...],
    templates: Tuple[str, ...],
    render: bool,
):
    """Print the reference manual of a source as Markdown."""
    registry = _build_registry(motors, counters, templates, database)
    uri = SOURCE_NAMES[source]

    if uri == BUILTIN_URI:
        try:
            asyncio.run(registry.load_builtin())
        except MalformedDatabase as e:
            print_error(str(e))
            sys.exit(1)

    text = registry.provide_text_document_content(with_query(uri, kind))
    if text is None:
        print_error(f"Source '{source}' is not available")
        sys.exit(1)

    if render:
        console.print(Markdown(text))
    else:
        click.echo(text, nl=False)


@cli.command()
def kinds():
    """List reference item kinds and their LSP mappings."""
    table = Table(title="Reference Item Kinds")
    table.add_column("Kind", style="cyan")
    table.add_column("Label", style="white", no_wrap=True)
    table.add_column("Icon", style="magenta")
    table.add_column("Completion Kind", style="green")
    table.add_column("Symbol Kind", style="yellow")

    for kind, metadata in KIND_METADATA.items():
        completion_item_kind = to_completion_item_kind(kind)
        table.add_row(
            kind.name,
            metadata.label,
            metadata.icon,
            completion_item_kind.name if completion_item_kind else "-",
            to_symbol_kind(kind).name,
        )

    console.print(table)


@cli.command()
@click.option("--motor", "motors", multiple=True, help="Motor mnemonic 'name # description'")
@click.option("--counter", "counters", multiple=True, help="Counter mnemonic")
@click.option("--template", "templates", multiple=True, help="Extra snippet template")
def snippets(
    motors: Tuple[str, ...], counters: Tuple[str, ...], templates: Tuple[str, ...]
):
    """List compiled snippets for the given mnemonics."""
    registry = _build_registry(motors, counters, templates)
    snippet_map = registry.storage.get_map(
        SOURCE_NAMES["snippet"], ReferenceItemKind.SNIPPET
    )

    if not snippet_map:
        console.print("No snippets.", style="yellow")
        return

    table = Table(title="Snippets")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Signature", style="white")
    table.add_column("Body", style="green")
    table.add_column("Description", style="yellow")

    for key, item in snippet_map.items():
        table.add_row(key, item.signature, item.snippet or "", item.description or "")

    console.print(table)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
