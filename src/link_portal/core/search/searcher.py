"""Case-insensitive substring filtering of the portal tree."""

from link_portal.models.node import Category, Link, Node, SearchOutcome, Tree


def normalize_query(query: str) -> str:
    return query.strip()


def title_matches(title: str, query: str) -> bool:
    """True if query occurs in title, ignoring case."""
    return query.lower() in title.lower()


def _filter_items(
    items: tuple[Node, ...], needle: str, matched_ids: set[str]
) -> tuple[tuple[Node, ...], int]:
    kept: list[Node] = []
    count = 0
    for node in items:
        if isinstance(node, Link):
            if needle in node.title.lower():
                kept.append(node)
                count += 1
            continue

        children, child_count = _filter_items(node.children, needle, matched_ids)
        own_match = needle in node.title.lower()
        if own_match or children:
            # Title matches keep only the filtered children, which may be empty.
            kept.append(
                Category(id=node.id, title=node.title, children=children, matched=own_match)
            )
            count += child_count
            if own_match:
                matched_ids.add(node.id)
    return tuple(kept), count


def search_tree(tree: Tree, query: str) -> SearchOutcome:
    """Filter tree down to the links matching query and the categories above them.

    Args:
        tree: Canonical tree; never modified.
        query: Free-text query. Surrounding whitespace is ignored.

    Returns:
        SearchOutcome. For an empty query the same tree object is returned and
        match_count is None. Otherwise match_count is the number of matching
        links; category title matches are flagged but not counted.
    """
    needle = normalize_query(query)
    if not needle:
        return SearchOutcome(tree=tree, match_count=None)

    matched_ids: set[str] = set()
    items, count = _filter_items(tree.items, needle.lower(), matched_ids)
    return SearchOutcome(
        tree=Tree(items=items),
        match_count=count,
        matched_category_ids=frozenset(matched_ids),
    )


def count_links(tree: Tree) -> int:
    """Count all links in tree, at any depth."""
    total = 0
    stack: list[Node] = list(tree.items)
    while stack:
        node = stack.pop()
        if isinstance(node, Category):
            stack.extend(node.children)
        else:
            total += 1
    return total
