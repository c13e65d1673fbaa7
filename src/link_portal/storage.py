"""File-backed keyed text storage."""

import re
from pathlib import Path

from loguru import logger

_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class FileStorage:
    """Keep each record as ``<key>.json`` inside a directory.

    - The directory is created on first write.
    - A record is not rewritten if its contents are unchanged, so the
      file's mtime reflects the last real change.
    """

    def __init__(self, datadir: str | Path) -> None:
        self.datadir = Path(datadir).expanduser().resolve()
        logger.debug("Storage ready, datadir {!r}", str(self.datadir))

    def path_for(self, key: str) -> Path:
        """Map key to its file. Keys that could escape the directory are rejected."""
        if not _KEY_RE.match(key):
            msg = f"Invalid storage key: {key!r}"
            raise ValueError(msg)
        return self.datadir / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        try:
            return self.path_for(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        fname = self.path_for(key)
        try:
            if fname.read_text(encoding="utf-8") == value:
                return
            action = "update"
        except (FileNotFoundError, UnicodeDecodeError):
            action = "create"

        logger.debug("Writing ({}) {!r}", action, str(fname))
        fname.parent.mkdir(parents=True, exist_ok=True)
        fname.write_text(value, encoding="utf-8")
