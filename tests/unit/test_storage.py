"""Tests for the file-backed key-value storage."""

import os
from pathlib import Path

import pytest

from link_portal.storage import FileStorage


def test_get_missing_item_returns_none(tmp_path: Path) -> None:
    assert FileStorage(tmp_path).get_item("portal-state") is None


def test_set_then_get(tmp_path: Path) -> None:
    storage = FileStorage(tmp_path)
    storage.set_item("portal-state", '{"a": true}')
    assert storage.get_item("portal-state") == '{"a": true}'
    assert (tmp_path / "portal-state.json").read_text() == '{"a": true}'


def test_set_creates_missing_directory(tmp_path: Path) -> None:
    storage = FileStorage(tmp_path / "nested" / "state")
    storage.set_item("k", "v")
    assert (tmp_path / "nested" / "state" / "k.json").exists()


def test_unchanged_value_is_not_rewritten(tmp_path: Path) -> None:
    storage = FileStorage(tmp_path)
    storage.set_item("k", "same")
    path = tmp_path / "k.json"
    os.utime(path, (0, 0))
    storage.set_item("k", "same")
    assert path.stat().st_mtime == 0


def test_overwrite_replaces_value(tmp_path: Path) -> None:
    storage = FileStorage(tmp_path)
    storage.set_item("k", "old")
    storage.set_item("k", "new")
    assert storage.get_item("k") == "new"


@pytest.mark.parametrize("key", ["../escape", "a/b", "", ".hidden"])
def test_rejects_keys_escaping_directory(tmp_path: Path, key: str) -> None:
    with pytest.raises(ValueError, match="Invalid storage key"):
        FileStorage(tmp_path).path_for(key)
