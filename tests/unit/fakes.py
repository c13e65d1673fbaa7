"""Fake implementations for testing the portal."""

import json
from typing import Any

import requests

from link_portal.errors import LoadError


class FakeSource:
    """In-memory document source; counts fetches."""

    def __init__(self, data: Any = None, *, error: str | None = None) -> None:
        self.data = data
        self.error = error
        self.fetches = 0

    def fetch(self) -> Any:
        self.fetches += 1
        if self.error is not None:
            raise LoadError(self.error)
        return self.data


class FakeStorage:
    """In-memory keyed storage; records every write."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})
        self.writes: list[tuple[str, str]] = []

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.items[key] = value

    def saved(self, key: str) -> Any:
        """Decoded JSON stored under key."""
        return json.loads(self.items[key])


class FailingStorage:
    """Storage whose every operation raises OSError."""

    def get_item(self, key: str) -> str | None:
        raise OSError(f"cannot read {key}")

    def set_item(self, key: str, value: str) -> None:
        raise OSError(f"cannot write {key}")


class FakeResponse:
    def __init__(self, *, status: int = 200, text: str = "") -> None:
        self.status_code = status
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; records requested URLs."""

    def __init__(self, response: FakeResponse | None = None, *, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url: str, *, timeout: float | None = None) -> FakeResponse:
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        assert self.response is not None
        return self.response
