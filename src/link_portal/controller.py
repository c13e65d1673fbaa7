"""Portal controller: owns the canonical tree, the filtered view and expansion state."""

import asyncio
import enum
from collections.abc import Callable

from loguru import logger

from link_portal.config import SEARCH_DEBOUNCE_SECONDS
from link_portal.core.importer.loader import load_tree
from link_portal.core.search.searcher import normalize_query, search_tree
from link_portal.core.state.store import ExpansionStateStore
from link_portal.core.tree.navigation import categories_containing, category_ids, get_breadcrumbs
from link_portal.errors import LoadError
from link_portal.models.node import Tree
from link_portal.protocols import TreeSourceProtocol


class PortalState(enum.Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class PortalController:
    """Drive one portal session.

    All methods run on a single asyncio event loop. The only suspension
    points are the initial load and the debounce timer; at most one debounced
    search is pending at any time and a newer query replaces it.

    The view layer reads ``filtered_tree``, ``match_count``, ``expanded``,
    ``auto_expand_ids`` and ``no_results``, and reports user input through
    ``handle_query`` and ``toggle``.
    """

    def __init__(
        self,
        source: TreeSourceProtocol,
        store: ExpansionStateStore,
        *,
        debounce: float = SEARCH_DEBOUNCE_SECONDS,
        listener: Callable[["PortalController"], None] | None = None,
    ) -> None:
        self.source = source
        self.store = store
        self.debounce = debounce
        self.listener = listener

        self.state = PortalState.LOADING
        self.error: str | None = None
        self.tree: Tree | None = None
        self.filtered_tree: Tree | None = None
        self.query = ""
        self.match_count: int | None = None
        self.no_results = False

        # Open flags of the categories in the last render.
        self.expanded: dict[str, bool] = {}
        self.auto_expand_ids: frozenset[str] = frozenset()
        self.restored_ids: frozenset[str] = frozenset()

        self._pending: asyncio.TimerHandle | None = None
        self._restored = False

    async def start(self) -> None:
        """Load the tree, render it and restore expansion state.

        A load failure moves the controller to ERROR for good; nothing is
        rendered and nothing is retried.
        """
        self.state = PortalState.LOADING
        try:
            tree = await asyncio.to_thread(load_tree, self.source)
        except LoadError as e:
            logger.error("Error loading portal: {}", e)
            self.state = PortalState.ERROR
            self.error = str(e)
            self._notify()
            return

        self.tree = tree
        self.filtered_tree = tree
        self.state = PortalState.READY
        self._render(tree)
        self.restore_state()
        self._notify()

    def handle_query(self, query: str) -> None:
        """Schedule a search for query after the quiet period.

        Must be called from the running event loop. A pending search is
        cancelled, so only the last query of a burst is searched.
        """
        if self.state is not PortalState.READY:
            logger.debug("Ignoring query while {}", self.state.value)
            return
        self.cancel_pending()
        loop = asyncio.get_running_loop()
        self._pending = loop.call_later(self.debounce, self._run_pending, query)

    def cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    @property
    def has_pending_search(self) -> bool:
        return self._pending is not None

    def _run_pending(self, query: str) -> None:
        self._pending = None
        self.perform_search(query)

    def perform_search(self, query: str) -> None:
        """Filter the canonical tree by query and re-render."""
        if self.tree is None:
            msg = "perform_search() called before the tree was loaded"
            raise RuntimeError(msg)

        self.query = query
        outcome = search_tree(self.tree, query)
        self.filtered_tree = outcome.tree
        self.match_count = outcome.match_count
        self._render(outcome.tree)

        if outcome.match_count:
            self.auto_expand_ids = categories_containing(outcome.tree, query)
            for node_id in self.auto_expand_ids:
                self.expanded[node_id] = True
        elif outcome.match_count == 0 and normalize_query(query):
            self.no_results = True

        logger.debug("Search {!r}: {} matches", query, outcome.match_count)
        self._notify()

    def _render(self, tree: Tree) -> None:
        # A fresh render shows every category collapsed.
        self.expanded = dict.fromkeys(category_ids(tree), False)
        self.auto_expand_ids = frozenset()
        self.no_results = not tree.items

    def restore_state(self) -> None:
        """Apply persisted expansion once, right after the first render."""
        if self._restored:
            return
        self._restored = True
        restored = self.store.reconcile(self.store.load(), self.expanded.keys())
        self.expanded.update(restored)
        self.restored_ids = frozenset(restored)
        logger.debug("Restored {} expanded categories", len(restored))

    def toggle(self, node_id: str, expanded: bool) -> None:
        """Record a user expand/collapse and persist the rendered snapshot."""
        if node_id not in self.expanded:
            logger.warning("Ignoring toggle of unknown or hidden category {!r}", node_id)
            return
        self.expanded[node_id] = expanded
        self.store.save(self.expanded)
        self._notify()

    @property
    def result_summary(self) -> str:
        if not self.match_count:
            return ""
        noun = "result" if self.match_count == 1 else "results"
        return f"{self.match_count} {noun} found"

    @property
    def breadcrumb(self) -> tuple[str, ...]:
        if self.filtered_tree is None:
            return ()
        return get_breadcrumbs(self.filtered_tree, self.expanded)

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener(self)
