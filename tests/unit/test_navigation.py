"""Tests for tree navigation (lookup, auto-expansion, breadcrumbs)."""

from link_portal.core.search.searcher import search_tree
from link_portal.core.tree.navigation import (
    categories_containing,
    category_ids,
    find_node,
    get_breadcrumbs,
    is_descendant,
    rendered_text,
)
from link_portal.models.node import Category, Link, Tree


def test_category_ids_in_document_order(portal_tree: Tree) -> None:
    assert category_ids(portal_tree) == [
        "item-0-",
        "item-0-item-1-",
        "item-0-item-2-",
        "item-1-",
    ]


def test_find_node(portal_tree: Tree) -> None:
    node = find_node(portal_tree, "item-0-item-1-item-1-")
    assert node is not None
    assert node.title == "Emacs"
    assert find_node(portal_tree, "item-2-") == Link(
        id="item-2-", title="Search", url="https://duckduckgo.com"
    )


def test_find_node_missing(portal_tree: Tree) -> None:
    assert find_node(portal_tree, "item-9-") is None
    assert find_node(portal_tree, "item-0-item-7-") is None


def test_is_descendant() -> None:
    assert is_descendant("item-0-item-1-", "item-0-")
    assert not is_descendant("item-0-", "item-0-")
    assert not is_descendant("item-10-", "item-1-")


def test_rendered_text_skips_links_without_url(portal_tree: Tree) -> None:
    news = find_node(portal_tree, "item-1-")
    assert isinstance(news, Category)
    text = rendered_text(news)
    assert "Python Weekly" in text
    assert "Draft" not in text


def test_categories_containing_uses_descendant_text(portal_tree: Tree) -> None:
    filtered = search_tree(portal_tree, "vim").tree
    assert categories_containing(filtered, "VIM") == frozenset({"item-0-", "item-0-item-1-"})


def test_categories_containing_ignores_unrendered_links(portal_tree: Tree) -> None:
    filtered = search_tree(portal_tree, "draft").tree
    assert categories_containing(filtered, "draft") == frozenset()


def test_categories_containing_empty_query(portal_tree: Tree) -> None:
    assert categories_containing(portal_tree, " ") == frozenset()


def test_breadcrumbs_list_open_categories(portal_tree: Tree) -> None:
    expanded = {"item-0-": True, "item-0-item-1-": True, "item-1-": False}
    assert get_breadcrumbs(portal_tree, expanded) == ("Home", "Development", "Editors")


def test_breadcrumbs_empty_when_nothing_open(portal_tree: Tree) -> None:
    assert get_breadcrumbs(portal_tree, {}) == ()
