#!/usr/bin/env python3
"""Visualize the typed node tree built from a markdown file.

Parses a markdown file, transforms it and prints the resulting node tree plus
any diagnostics for content the tree could not represent.

Usage:
    uv run scripts/dev/visualize_tree.py [--path input.md] [--show-ids] [--json]

    Defaults to scripts/dev/sample_document.md
"""
# /// script
# requires-python = ">=3.11"
# dependencies = ["tyro", "rich"]
# ///

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro
from rich import box
from rich.console import Console
from rich.table import Table

from markview import Settings, markdown_to_document
from markview.logging_config import configure_logging
from markview.markdown import NodeKind, build_rich_tree
from markview.markdown.options import CodeTrimMode, SublistPlacement

console = Console()


def main(
    path: Path = Path(__file__).parent / "sample_document.md",
    show_ids: bool = False,
    json: bool = False,
    code_trim: CodeTrimMode | None = None,
    sublist_placement: SublistPlacement | None = None,
) -> None:
    """Print the node tree for a markdown file.

    Args:
        path: Markdown file to visualize.
        show_ids: Append node ids to each label.
        json: Print the tree as JSON instead of a tree view.
        code_trim: Override the configured code block trim mode.
        sublist_placement: Override the configured nested list placement.
    """
    settings = Settings()
    configure_logging(settings.log_level, settings.log_file)

    updates = {}
    if code_trim is not None:
        updates["code_trim"] = code_trim
    if sublist_placement is not None:
        updates["sublist_placement"] = sublist_placement
    if updates:
        settings = settings.model_copy(update={"transform": settings.transform.model_copy(update=updates)})

    if not path.exists():
        console.print(f"[red]Error: Input file not found: {path}[/red]")
        sys.exit(1)

    doc = markdown_to_document(path.read_text(), settings)

    if json:
        console.print_json(doc.model_dump_json())
        return

    console.print(build_rich_tree(doc.root, show_ids=show_ids))

    counts = {kind: len(doc.root.get_all(kind)) for kind in NodeKind}
    summary = ", ".join(f"{kind}={count}" for kind, count in counts.items() if count)
    console.print(f"\n[bold]Top-level blocks:[/bold] {len(doc.root.children)} ({summary})")

    if not doc.diagnostics:
        console.print("[green]All content representable[/green]")
        return

    table = Table(title="Diagnostics", box=box.SIMPLE)
    table.add_column("Kind", style="yellow")
    table.add_column("Node type")
    table.add_column("Line", justify="right")
    for diagnostic in doc.diagnostics:
        line = "" if diagnostic.line is None else str(diagnostic.line + 1)
        table.add_row(diagnostic.kind, diagnostic.node_type, line)
    console.print(table)


if __name__ == "__main__":
    tyro.cli(main)
