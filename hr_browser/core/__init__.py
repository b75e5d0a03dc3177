"""
Core domain layer: dataset abstraction, cross-filter engine (filter store,
category state machine, derivation engine, click router), view base class,
and the view registry
"""

from .category_state import CategoryState
from .click_router import ClickEvent, ClickRoute, ClickRouter, Coordinate, Tagged
from .dataset import Dataset, load_dataset
from .derivation import DerivationEngine, compute
from .dimensions import DEFAULT_CATEGORY, Category, FilterDimension
from .filter_state import FilterSnapshot, FilterStore
from .state import DashboardState
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = [
    "BaseView",
    "Category",
    "CategoryState",
    "ClickEvent",
    "ClickRoute",
    "ClickRouter",
    "Coordinate",
    "DEFAULT_CATEGORY",
    "DashboardState",
    "Dataset",
    "DerivationEngine",
    "FilterDimension",
    "FilterSnapshot",
    "FilterStore",
    "Tagged",
    "ViewRegistry",
    "compute",
    "load_dataset",
]
