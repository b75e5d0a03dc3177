from __future__ import annotations
from typing import Dict, List, Type

from .base_view import BaseView
from .dimensions import Category


class ViewRegistry:
    """
    Catalogue of chart views, grouped by analysis Category.

    The render callback asks {@link for_category(category)} which consumers to
    mount, and startup compares {@link click_sources()} against the click
    routing table. View classes are stored, not instances; a fresh view is built
    per render with the session's palette.

    Invariants:
        * only {@link BaseView} subclasses with a Category are accepted
        * view ids are unique
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Register a {@link BaseView} with the registry

        :param view_cls: the subclass of {@link BaseView}

        Raises:
            TypeError: if view_cls is not a subclass of {@link BaseView} or has no Category
            ValueError: if a view with same 'id' already exists
        """

        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if not isinstance(view_cls.category, Category):
            raise TypeError(f"View '{view_cls.id}' must declare a Category")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def for_category(self, category: Category) -> List[Type[BaseView]]:
        """Views mounted when the given category is active, in registration order."""
        return [cls for cls in self._views.values() if cls.category is category]

    def click_sources(self) -> List[str]:
        """Ids of views that emit cross-filter clicks."""
        return [cls.click_source for cls in self._views.values() if cls.click_source]

    def all_classes(self) -> List[Type[BaseView]]:
        return list(self._views.values())
