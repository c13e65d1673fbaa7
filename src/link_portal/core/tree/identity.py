"""Assign stable positional ids to portal nodes."""

from collections.abc import Iterator
from dataclasses import replace

from link_portal.models.node import Category, Node, Tree


def _assign(items: tuple[Node, ...], prefix: str) -> tuple[Node, ...]:
    result: list[Node] = []
    for index, node in enumerate(items):
        node_id = f"{prefix}item-{index}-"
        if isinstance(node, Category):
            result.append(replace(node, id=node_id, children=_assign(node.children, node_id)))
        else:
            result.append(replace(node, id=node_id))
    return tuple(result)


def assign_ids(tree: Tree) -> Tree:
    """Return a copy of tree with every node's id set from its position.

    A node at index i under a parent with id P gets ``P + "item-i-"``; top-level
    nodes use the empty prefix. Ids depend only on position, so the function
    is idempotent, and a descendant's id always starts with its ancestors' ids.
    """
    return Tree(items=_assign(tree.items, ""))


def iter_ids(tree: Tree) -> Iterator[str]:
    """Yield every node id, depth-first pre-order."""
    stack: list[Node] = list(reversed(tree.items))
    while stack:
        node = stack.pop()
        yield node.id
        if isinstance(node, Category):
            stack.extend(reversed(node.children))
