"""Tree navigation: category walks, lookup, breadcrumbs, auto-expansion."""

from collections.abc import Iterator, Mapping

from link_portal.config import HOME_LABEL
from link_portal.models.node import Category, Link, Node, Tree


def iter_nodes(tree: Tree) -> Iterator[Node]:
    """Yield all nodes depth-first, pre-order (document order)."""
    stack: list[Node] = list(reversed(tree.items))
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Category):
            stack.extend(reversed(node.children))


def iter_categories(tree: Tree) -> Iterator[Category]:
    for node in iter_nodes(tree):
        if isinstance(node, Category):
            yield node


def category_ids(tree: Tree) -> list[str]:
    """Ids of all categories in document order."""
    return [c.id for c in iter_categories(tree)]


def find_node(tree: Tree, node_id: str) -> Node | None:
    """Find a node by id, pruning branches whose id is not a prefix of node_id."""
    items = tree.items
    while items:
        for node in items:
            if node.id == node_id:
                return node
            if isinstance(node, Category) and node_id.startswith(node.id):
                items = node.children
                break
        else:
            return None
    return None


def is_descendant(node_id: str, ancestor_id: str) -> bool:
    """True if node_id lies strictly below ancestor_id (positional ids only)."""
    return node_id != ancestor_id and node_id.startswith(ancestor_id)


def rendered_text(node: Node) -> str:
    """Concatenated titles a view would display for node and its subtree.

    Links without a URL are not rendered and contribute nothing.
    """
    if isinstance(node, Link):
        return node.title if node.renderable else ""
    return " ".join([node.title, *(rendered_text(c) for c in node.children)])


def categories_containing(tree: Tree, query: str) -> frozenset[str]:
    """Ids of categories whose rendered text contains query, ignoring case."""
    needle = query.strip().lower()
    if not needle:
        return frozenset()
    return frozenset(
        c.id for c in iter_categories(tree) if needle in rendered_text(c).lower()
    )


def get_breadcrumbs(tree: Tree, expanded: Mapping[str, bool]) -> tuple[str, ...]:
    """Home label followed by titles of open categories, in document order.

    Returns an empty tuple when no category is open.
    """
    titles = [c.title for c in iter_categories(tree) if expanded.get(c.id)]
    if not titles:
        return ()
    return (HOME_LABEL, *titles)
