"""Parse portal JSON documents into domain models."""

from typing import Any

from link_portal.errors import LoadError
from link_portal.models.node import Category, Link, Node, Tree


def _parse_node(raw: Any, *, where: str) -> Node:
    if not isinstance(raw, dict):
        msg = f"Expected an object at {where}, got {type(raw).__name__}"
        raise LoadError(msg)

    title = raw.get("title")
    if not isinstance(title, str):
        msg = f"Missing or non-string title at {where}"
        raise LoadError(msg)

    node_type = raw.get("type")
    if node_type == "link":
        url = raw.get("url")
        if url is not None and not isinstance(url, str):
            msg = f"Non-string url at {where}"
            raise LoadError(msg)
        return Link(id="", title=title, url=url)

    if node_type == "category":
        children = raw.get("children")
        if children is None:
            children = []
        return Category(
            id="",
            title=title,
            children=_parse_items(children, where=f"{where}.children"),
        )

    msg = f"Unknown node type {node_type!r} at {where}"
    raise LoadError(msg)


def _parse_items(raw_items: Any, *, where: str) -> tuple[Node, ...]:
    if not isinstance(raw_items, list):
        msg = f"Expected a list at {where}, got {type(raw_items).__name__}"
        raise LoadError(msg)
    return tuple(_parse_node(raw, where=f"{where}[{i}]") for i, raw in enumerate(raw_items))


def parse_tree_data(data: Any) -> Tree:
    """Parse a decoded portal document into a Tree without ids.

    Args:
        data: Decoded JSON, expected to be an object with an ``items`` list.

    Returns:
        Tree whose nodes all have an empty id; see ``assign_ids``.

    Raises:
        LoadError: If the document does not have the expected shape or is
            nested too deeply to walk.
    """
    if not isinstance(data, dict) or "items" not in data:
        msg = "Portal document must be an object with an 'items' list"
        raise LoadError(msg)
    try:
        return Tree(items=_parse_items(data["items"], where="items"))
    except RecursionError as e:
        msg = "Portal document is nested too deeply"
        raise LoadError(msg) from e
