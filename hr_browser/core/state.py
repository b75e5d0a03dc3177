from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional

import pandas as pd

from .category_state import CategoryState
from .click_router import ClickEvent, ClickRouter
from .derivation import DerivationEngine, Subscriber
from .dimensions import DEFAULT_CATEGORY, Category
from .filter_state import FilterSnapshot, FilterStore

logger = logging.getLogger(__name__)


class DashboardState:
    """
    Explicit application state for one dashboard: filters + active category.

    Owns one FilterStore and one CategoryState, and holds references to the
    shared DerivationEngine and ClickRouter. Every external event goes through
    one of the command methods below, which:

    - run to completion under the state lock (no interleaved mutations)
    - publish the derived dataset exactly once if the filters actually changed

    The Dash UI restores a short-lived DashboardState per event from the
    session stores; the REST API keeps a single long-lived one.
    """

    def __init__(
        self,
        engine: DerivationEngine,
        router: ClickRouter,
        category: Category = DEFAULT_CATEGORY,
        filters: Optional[FilterSnapshot] = None,
    ) -> None:
        self.engine = engine
        self.router = router
        self._filters = FilterStore.from_snapshot(filters or FilterSnapshot())
        self._categories = CategoryState(self._filters, initial=category)
        self._lock = threading.RLock()
        self._subscribers: List[Subscriber] = []

    # -------------------------------------------------------------------------
    # Outbound views
    # -------------------------------------------------------------------------
    @property
    def active_filters(self) -> FilterSnapshot:
        with self._lock:
            return self._filters.snapshot()

    @property
    def active_category(self) -> Category:
        return self._categories.current

    @property
    def derived(self) -> pd.DataFrame:
        return self.engine.derive(self.active_filters)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a consumer of this state's DerivedDataset. Other states sharing
        the engine never notify it.
        :return: a callable that removes the subscription
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    def handle_click(self, event: ClickEvent) -> bool:
        """:return: True if the click changed the filters"""
        return self._run(lambda: self.router.route(event, self._filters))

    def select_category(self, category: Category) -> bool:
        """:return: True if the filters changed (a different category was selected with filters active)"""
        return self._run(lambda: self._categories.select(category))

    def clear_filters(self) -> bool:
        """:return: True if any filter was active"""
        return self._run(self._filters.clear_all)

    def _run(self, command: Callable[[], Any]) -> bool:
        with self._lock:
            before = self._filters.snapshot()
            command()
            after = self._filters.snapshot()
            if after == before:
                return False
            self.engine.publish(after, self._subscribers)
            return True

    # -------------------------------------------------------------------------
    # Serialisation (dcc.Store)
    # -------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.active_category.value,
            "filters": self.active_filters.to_dict(),
        }

    @classmethod
    def restore(
        cls,
        engine: DerivationEngine,
        router: ClickRouter,
        data: Optional[Mapping[str, Any]],
        default_category: Category = DEFAULT_CATEGORY,
    ) -> DashboardState:
        """
        Rebuild state from its serialised form. An unknown category falls back to
        the default and unparseable filters are discarded as a whole.
        """
        data = data or {}

        try:
            category = Category.parse(data.get("category") or default_category.value)
        except ValueError:
            logger.warning("Discarding unknown stored category", extra={"category": data.get("category")})
            category = default_category

        raw_filters = data.get("filters") or {}
        try:
            filters = FilterSnapshot.from_dict(raw_filters)
        except (TypeError, ValueError):
            logger.warning("Discarding invalid stored filters", extra={"filters": raw_filters})
            filters = FilterSnapshot()

        return cls(engine=engine, router=router, category=category, filters=filters)
