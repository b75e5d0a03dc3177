from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from .dataset import Dataset
from .filter_state import FilterSnapshot

logger = logging.getLogger(__name__)

Subscriber = Callable[[pd.DataFrame, FilterSnapshot], None]


def compute(dataset: Dataset, filters: FilterSnapshot) -> pd.DataFrame:
    """
    Return the records of ``dataset`` matching every active filter.

    - Unset dimensions impose no constraint
    - Empty filters return the dataset's own frame (identity, same ordering)
    - Matching records keep their relative order (boolean mask, never a sort)
    - Zero matches is a valid empty frame with the dataset's columns
    """
    frame = dataset.frame
    if filters.is_empty:
        return frame

    mask = np.ones(len(frame), dtype=bool)
    for dim, value in filters:
        # Nullable columns compare to <NA> on missing values; treat those as no match
        mask &= (frame[dim.column] == value).fillna(False).to_numpy(dtype=bool)

    return frame.loc[mask]


@dataclass
class EngineStats:
    computations: int = 0
    cache_hits: int = 0
    publishes: int = 0


class DerivationEngine:
    """
    Produces the DerivedDataset for a Dataset and fans it out to subscribers.

    Memoization contract:
    - at most one computation per distinct (dataset identity, filter snapshot)
    - every reader of the same snapshot gets the very same frame object

    The cache lock doubles as a read-through barrier: when Dash serves callbacks
    from several worker threads, concurrent readers of one snapshot wait for the
    single computation instead of each filtering on their own.
    """

    MAX_CACHE = 128

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset
        self.stats = EngineStats()
        self._cache: Dict[Tuple[int, FilterSnapshot], pd.DataFrame] = {}
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Derivation (memoized)
    # -------------------------------------------------------------------------
    def derive(self, filters: FilterSnapshot) -> pd.DataFrame:
        key = (id(self.dataset), filters)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self.stats.cache_hits += 1
                return cached

            derived = compute(self.dataset, filters)
            self.stats.computations += 1

            # Prevent unbounded growth
            if len(self._cache) >= self.MAX_CACHE:
                self._cache.clear()
            self._cache[key] = derived

        logger.debug(
            "derived_dataset_computed",
            extra={"filters": filters.to_dict(), "n_records": len(derived)},
        )
        return derived

    # -------------------------------------------------------------------------
    # Publish
    # -------------------------------------------------------------------------
    def publish(self, filters: FilterSnapshot, subscribers: Sequence[Subscriber]) -> pd.DataFrame:
        """
        Derive once and hand the same frame to every given subscriber.

        The engine is shared by every session, so it keeps no observers of its
        own; each DashboardState passes in its own list. A failing subscriber is
        logged and skipped; the remaining subscribers still receive the update.
        """
        derived = self.derive(filters)
        self.stats.publishes += 1

        for callback in list(subscribers):
            try:
                callback(derived, filters)
            except Exception:
                logger.exception(
                    "Subscriber failed while handling derived dataset",
                    extra={"subscriber": getattr(callback, "__name__", repr(callback))},
                )
        return derived
