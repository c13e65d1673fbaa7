"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from link_portal.core.importer.json_reader import parse_tree_data
from link_portal.core.tree.identity import assign_ids
from link_portal.models.node import Tree
from tests.unit.sample_docs import PORTAL_DOC, TOOLS_DOC


def build_tree(data: dict[str, Any]) -> Tree:
    return assign_ids(parse_tree_data(data))


@pytest.fixture
def tools_tree() -> Tree:
    return build_tree(TOOLS_DOC)


@pytest.fixture
def portal_tree() -> Tree:
    return build_tree(PORTAL_DOC)


@pytest.fixture
def portal_file(tmp_path: Path) -> Path:
    """Write PORTAL_DOC to disk and return its path."""
    path = tmp_path / "portal.json"
    path.write_text(json.dumps(PORTAL_DOC))
    return path
