"""Domain models for the link portal."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A leaf pointing at a URL."""

    id: str
    title: str
    url: str | None = None

    @property
    def renderable(self) -> bool:
        return bool(self.url)


@dataclass(frozen=True)
class Category:
    """A titled group of nodes.

    ``matched`` is only ever True on categories produced by a search, and
    means the category's own title contained the query.
    """

    id: str
    title: str
    children: tuple["Node", ...] = ()
    matched: bool = False


Node = Link | Category


@dataclass(frozen=True)
class Tree:
    """The ordered top-level nodes of a portal document."""

    items: tuple[Node, ...] = ()


@dataclass(frozen=True)
class SearchOutcome:
    """Result of filtering a tree by a query.

    ``match_count`` is None for the empty query, where the tree is returned
    unfiltered and no count is shown.
    """

    tree: Tree
    match_count: int | None
    matched_category_ids: frozenset[str] = frozenset()
