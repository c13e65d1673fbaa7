"""Fetch portal documents from local files or HTTP."""

import json
from pathlib import Path
from typing import Any

import requests
from loguru import logger

from link_portal.config import LOAD_TIMEOUT_SECONDS
from link_portal.core.importer.json_reader import parse_tree_data
from link_portal.core.tree.identity import assign_ids
from link_portal.errors import LoadError
from link_portal.models.node import Tree
from link_portal.protocols import TreeSourceProtocol


class FileTreeSource:
    """Read the portal document from a local JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def fetch(self) -> Any:
        logger.debug("Reading portal document from {}", self.path)
        try:
            contents = self.path.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Cannot read portal document {str(self.path)!r}: {e}"
            raise LoadError(msg) from e
        try:
            return json.loads(contents)
        except (ValueError, RecursionError) as e:
            msg = f"Portal document {str(self.path)!r} is not valid JSON: {e}"
            raise LoadError(msg) from e


class HttpTreeSource:
    """Fetch the portal document with a single GET request."""

    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float = LOAD_TIMEOUT_SECONDS,
    ) -> None:
        self.url = url
        self.sess = session or requests.Session()
        self.timeout = timeout

    def fetch(self) -> Any:
        logger.debug("Fetching portal document from {}", self.url)
        try:
            r = self.sess.get(self.url, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            msg = f"Cannot fetch portal document {self.url!r}: {e}"
            raise LoadError(msg) from e
        except (ValueError, RecursionError) as e:
            msg = f"Portal document {self.url!r} is not valid JSON: {e}"
            raise LoadError(msg) from e


def make_source(location: str) -> TreeSourceProtocol:
    """Pick an HTTP or file source based on the location string."""
    if location.startswith(("http://", "https://")):
        return HttpTreeSource(location)
    return FileTreeSource(location)


def load_tree(source: TreeSourceProtocol) -> Tree:
    """Fetch, parse and assign ids: the canonical tree for a session.

    Raises:
        LoadError: If the document cannot be fetched or is malformed.
    """
    tree = assign_ids(parse_tree_data(source.fetch()))
    logger.debug("Loaded portal tree with {} top-level items", len(tree.items))
    return tree
