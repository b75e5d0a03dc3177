from __future__ import annotations

import logging

from .dimensions import DEFAULT_CATEGORY, Category
from .filter_state import FilterStore

logger = logging.getLogger(__name__)


class CategoryState:
    """
    Tracks the active analysis category.

    Switching to a different category clears the FilterStore, since filters set
    in one analysis view are not meaningful in another. Re-selecting the current
    category is a no-op.
    """

    def __init__(self, filters: FilterStore, initial: Category = DEFAULT_CATEGORY) -> None:
        self._filters = filters
        self._current = initial

    @property
    def current(self) -> Category:
        return self._current

    def select(self, category: Category) -> bool:
        """
        :param category: a valid Category; raw tags are parsed at the boundary
        :return: True if the category changed (and filters were cleared)
        """
        if category is self._current:
            return False

        logger.info(
            "category_changed",
            extra={"from_category": self._current.value, "to_category": category.value},
        )
        self._current = category
        self._filters.clear_all()
        return True
