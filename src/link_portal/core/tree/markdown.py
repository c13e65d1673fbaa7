"""Render portal trees as markdown."""

import io
import re
from collections.abc import Mapping

from link_portal.models.node import Category, Node, Tree


def highlight(text: str, query: str) -> str:
    """Wrap each case-insensitive occurrence of query in ``**``."""
    needle = query.strip()
    if not needle:
        return text
    return re.sub(f"({re.escape(needle)})", r"**\1**", text, flags=re.IGNORECASE)


def render_tree_as_markdown(
    tree: Tree,
    *,
    query: str = "",
    expanded: Mapping[str, bool] | None = None,
    show_ids: bool = False,
) -> str:
    """Render a tree as an indented markdown bullet list.

    Args:
        tree: Tree to render (canonical or filtered).
        query: Highlighted in titles when non-empty.
        expanded: Open flags by category id. When given, children of
            collapsed categories are replaced by a truncation line.
            None renders every branch.
        show_ids: Append each node's id.

    Returns:
        Markdown string; links without a URL are skipped.
    """
    out = io.StringIO()

    def write(items: tuple[Node, ...], depth: int) -> None:
        indent = "    " * depth
        for node in items:
            title = highlight(node.title, query)
            suffix = f"  [id={node.id}]" if show_ids else ""
            if isinstance(node, Category):
                is_open = expanded is None or expanded.get(node.id, False)
                marker = "▾" if is_open else "▸"
                out.write(f"{indent}- {marker} {title}{suffix}\n")
                if not node.children:
                    continue
                if is_open:
                    write(node.children, depth + 1)
                else:
                    n = len(node.children)
                    noun = "item" if n == 1 else "items"
                    out.write(f"{indent}    - ... ({n} {noun} hidden)\n")
            elif node.renderable:
                out.write(f"{indent}- [{title}]({node.url}){suffix}\n")

    write(tree.items, 0)
    return out.getvalue()
