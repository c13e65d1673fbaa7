"""Persisted expand/collapse state of portal categories."""

import json
from collections.abc import Collection, Mapping

from loguru import logger

from link_portal.config import STATE_KEY
from link_portal.protocols import StorageProtocol


class ExpansionStateStore:
    """Load, save and reconcile the id -> expanded mapping.

    The whole mapping lives in one record under ``key``. Reading never
    raises: an absent, unreadable or corrupt record is the same as no state.
    """

    def __init__(self, storage: StorageProtocol, *, key: str = STATE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> dict[str, bool]:
        """Return the persisted mapping, or {} if there is none or it is corrupt."""
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return {}
            data = json.loads(raw)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Error restoring state from {!r}: {}", self.key, e)
            return {}

        if not isinstance(data, dict):
            logger.warning(
                "Ignoring persisted state {!r}: expected an object, got {}",
                self.key,
                type(data).__name__,
            )
            return {}
        return {k: v for k, v in data.items() if isinstance(v, bool)}

    def save(self, mapping: Mapping[str, bool]) -> None:
        """Overwrite the persisted record with mapping (no merge)."""
        contents = json.dumps(dict(mapping), sort_keys=True)
        try:
            self.storage.set_item(self.key, contents)
        except (OSError, ValueError) as e:
            logger.warning("Error saving state to {!r}: {}", self.key, e)
            return
        logger.debug("Saved expansion state: {} entries", len(mapping))

    @staticmethod
    def reconcile(mapping: Mapping[str, bool], current_ids: Collection[str]) -> dict[str, bool]:
        """Keep only expanded entries whose id is present in the current render.

        Collapsed entries are dropped too: collapsed is the default state, so
        they have nothing to apply.
        """
        present = set(current_ids)
        return {
            node_id: True
            for node_id, expanded in mapping.items()
            if expanded is True and node_id in present
        }
