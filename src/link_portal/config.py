"""Configuration constants for link-portal."""

import os
from pathlib import Path

# Key of the single persisted expansion-state record.
STATE_KEY: str = "portal-state"

# Quiet period before a typed query is searched.
SEARCH_DEBOUNCE_SECONDS: float = 0.3

# Timeout for fetching the portal document over HTTP.
LOAD_TIMEOUT_SECONDS: float = 10.0

# First crumb of the breadcrumb trail.
HOME_LABEL: str = "Home"

# Portal document: a local path or an http(s) URL.
DEFAULT_SOURCE: str = os.environ.get("LINK_PORTAL_SOURCE", "data.json")

# Directory with persisted state. First directory which is found is used.
STATE_DIRECTORIES: list[Path] = [
    Path("~/.local/share/link-portal").expanduser(),
    Path("~/.link-portal").expanduser(),
    Path("~/.config/link-portal").expanduser(),
]


def resolve_state_directory() -> Path:
    """Return the state directory.

    LINK_PORTAL_STATE_DIR wins, then the first existing candidate from
    STATE_DIRECTORIES, then the first candidate (created on first save).
    """
    override = os.environ.get("LINK_PORTAL_STATE_DIR")
    if override:
        return Path(override).expanduser()
    for candidate in STATE_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return STATE_DIRECTORIES[0]
