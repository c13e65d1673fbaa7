"""Searchable link portal with persisted expansion state."""

from link_portal.controller import PortalController, PortalState
from link_portal.errors import LoadError, PortalError
from link_portal.protocols import StorageProtocol, TreeSourceProtocol

__all__ = [
    "LoadError",
    "PortalController",
    "PortalError",
    "PortalState",
    "StorageProtocol",
    "TreeSourceProtocol",
]
