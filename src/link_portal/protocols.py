"""Protocols for dependency injection in the portal controller."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TreeSourceProtocol(Protocol):
    """Protocol for portal document sources."""

    def fetch(self) -> Any:
        """Return the raw decoded document, raising LoadError on failure."""
        ...


@runtime_checkable
class StorageProtocol(Protocol):
    """Protocol for keyed text storage (the localStorage analogue)."""

    def get_item(self, key: str) -> str | None:
        """Return the stored text for key, or None if there is none."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""
        ...
