from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .dimensions import FilterDimension


@dataclass(frozen=True)
class FilterSnapshot:
    """
    Immutable view of the FilterStore at one point in time.

    Fields:

    - values: (dimension, value) pairs for the active dimensions only, kept in
      FilterDimension declaration order so that equal mappings compare and hash
      equal. The snapshot doubles as the Derivation Engine's cache key.

    Unset dimensions are simply absent.
    """

    values: Tuple[Tuple[FilterDimension, Any], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[FilterDimension, Any]) -> FilterSnapshot:
        return cls(
            values=tuple(
                (dim, mapping[dim])
                for dim in FilterDimension
                if mapping.get(dim) is not None
            )
        )

    def get(self, dimension: FilterDimension) -> Optional[Any]:
        for dim, value in self.values:
            if dim is dimension:
                return value
        return None

    @property
    def is_empty(self) -> bool:
        return not self.values

    def __iter__(self) -> Iterator[Tuple[FilterDimension, Any]]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> Dict[str, Any]:
        return {dim.value: value for dim, value in self.values}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> FilterSnapshot:
        """
        Rebuild a snapshot from its serialised form (dcc.Store / JSON body).

        Raises:
            ValueError: if a key is not a known FilterDimension
        """
        if not data:
            return cls()
        mapping = {}
        for raw_dim, raw_value in data.items():
            dim = FilterDimension.parse(raw_dim)
            mapping[dim] = dim.coerce(raw_value)
        return cls.from_mapping(mapping)


class FilterStore:
    """
    Mutable mapping of every FilterDimension to an optional scalar value.

    Invariants:
    - at most one active value per dimension (single-select, never accumulates)
    - ``None`` means "no constraint on this dimension"
    - mutated only through :meth:`toggle` and :meth:`clear_all`

    The store has a single writer (click routing, category switch, clear command),
    so it does no locking of its own; callers serialise events.
    """

    def __init__(self) -> None:
        self._values: Dict[FilterDimension, Any] = {dim: None for dim in FilterDimension}

    @classmethod
    def from_snapshot(cls, snapshot: FilterSnapshot) -> FilterStore:
        store = cls()
        for dim, value in snapshot:
            store._values[dim] = value
        return store

    def get(self, dimension: FilterDimension) -> Optional[Any]:
        return self._values[dimension]

    def toggle(self, dimension: FilterDimension, value: Any) -> Optional[Any]:
        """
        Clicking the active value again clears it; any other value replaces it.

        :param dimension: the filter axis
        :param value: the clicked value, already in the dimension's value domain
        :return: the dimension's value after the toggle (``None`` if cleared)
        """
        if self._values[dimension] == value:
            self._values[dimension] = None
        else:
            self._values[dimension] = value
        return self._values[dimension]

    def clear_all(self) -> bool:
        """
        Unset every dimension.
        :return: True if anything was active before the call
        """
        had_active = any(v is not None for v in self._values.values())
        for dim in self._values:
            self._values[dim] = None
        return had_active

    def snapshot(self) -> FilterSnapshot:
        return FilterSnapshot.from_mapping(self._values)

    def __repr__(self) -> str:
        return f"FilterStore({self.snapshot().to_dict()!r})"
