"""CLI for the link portal (search, browse, expand/collapse)."""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from link_portal.config import DEFAULT_SOURCE, resolve_state_directory
from link_portal.controller import PortalController, PortalState
from link_portal.core.importer.loader import make_source
from link_portal.core.state.store import ExpansionStateStore
from link_portal.core.tree.markdown import render_tree_as_markdown
from link_portal.logging_config import configure_logging
from link_portal.models.node import Category, Node, Tree
from link_portal.storage import FileStorage

app = typer.Typer(help="Link portal: search and browse a directory of links.")

SourceOption = Annotated[
    str,
    typer.Option("--source", "-s", help="Portal document (path or http(s) URL)"),
]
StateDirOption = Annotated[
    Path | None,
    typer.Option("--state-dir", help="Directory holding persisted expansion state"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _open_store(state_dir: Path | None) -> ExpansionStateStore:
    return ExpansionStateStore(FileStorage(state_dir or resolve_state_directory()))


def _start(source: str, state_dir: Path | None) -> PortalController:
    """Load the portal, exiting with status 1 if the document cannot be loaded."""
    controller = PortalController(make_source(source), _open_store(state_dir))
    asyncio.run(controller.start())
    if controller.state is PortalState.ERROR:
        raise typer.Exit(1)
    return controller


def _to_json(items: tuple[Node, ...]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for node in items:
        if isinstance(node, Category):
            out.append(
                {
                    "id": node.id,
                    "type": "category",
                    "title": node.title,
                    "matched": node.matched,
                    "children": _to_json(node.children),
                }
            )
        else:
            out.append({"id": node.id, "type": "link", "title": node.title, "url": node.url})
    return out


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    source: SourceOption = DEFAULT_SOURCE,
    state_dir: StateDirOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Filter the portal by a query and print the matching branches."""
    controller = _start(source, state_dir)
    controller.perform_search(query)
    tree = controller.filtered_tree or Tree()

    if output_json:
        data = {
            "query": query,
            "count": controller.match_count,
            "auto_expand": sorted(controller.auto_expand_ids),
            "items": _to_json(tree.items),
        }
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if controller.no_results:
        typer.echo("No results found.")
        return
    if controller.result_summary:
        typer.echo(f"{controller.result_summary}\n")
    typer.echo(render_tree_as_markdown(tree, query=query), nl=False)


@app.command()
def show(
    source: SourceOption = DEFAULT_SOURCE,
    state_dir: StateDirOption = None,
    show_all: bool = typer.Option(False, "--all", "-a", help="Expand every category"),
    ids: bool = typer.Option(False, "--ids", help="Show node ids"),
) -> None:
    """Print the portal, honoring the persisted expansion state."""
    controller = _start(source, state_dir)
    tree = controller.filtered_tree or Tree()
    if not tree.items:
        typer.echo("The portal is empty.")
        return

    if controller.breadcrumb:
        typer.echo(" > ".join(controller.breadcrumb) + "\n")
    expanded = None if show_all else controller.expanded
    typer.echo(render_tree_as_markdown(tree, expanded=expanded, show_ids=ids), nl=False)


def _toggle(node_id: str, expanded: bool, source: str, state_dir: Path | None) -> None:
    controller = _start(source, state_dir)
    if node_id not in controller.expanded:
        logger.error("No category with id {!r}", node_id)
        raise typer.Exit(1)
    controller.toggle(node_id, expanded)
    typer.echo(f"{'Expanded' if expanded else 'Collapsed'} {node_id}")


@app.command()
def expand(
    node_id: str = typer.Argument(..., help="Category id"),
    source: SourceOption = DEFAULT_SOURCE,
    state_dir: StateDirOption = None,
) -> None:
    """Expand a category and persist the expansion state."""
    _toggle(node_id, True, source, state_dir)


@app.command()
def collapse(
    node_id: str = typer.Argument(..., help="Category id"),
    source: SourceOption = DEFAULT_SOURCE,
    state_dir: StateDirOption = None,
) -> None:
    """Collapse a category and persist the expansion state."""
    _toggle(node_id, False, source, state_dir)


@app.command()
def state(state_dir: StateDirOption = None) -> None:
    """Print the persisted expansion state as JSON."""
    typer.echo(json.dumps(_open_store(state_dir).load(), indent=2, sort_keys=True))
