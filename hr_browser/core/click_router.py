from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .dimensions import FilterDimension
from .exceptions import ConfigError
from .filter_state import FilterStore

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Click payloads
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Tagged:
    """Value carried as an auxiliary tag on the clicked mark (Plotly ``customdata``)."""
    value: Any


@dataclass(frozen=True)
class Coordinate:
    """Value carried as the plotted position of the clicked mark."""
    x: Any = None
    y: Any = None


ClickValue = Union[Tagged, Coordinate]


@dataclass(frozen=True)
class ClickEvent:
    source: str
    value: ClickValue


def _first(value: Any) -> Any:
    # customdata arrives as a list when a trace carries several tag columns
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


# -----------------------------------------------------------------------------
# Extractors
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TagExtractor:
    """Reads the clicked value from the point's ``customdata`` tag."""

    @property
    def field(self) -> str:
        return "customdata"

    def from_point(self, point: Mapping[str, Any]) -> Optional[ClickValue]:
        tag = _first(point.get("customdata"))
        return Tagged(tag) if tag is not None else None

    def extract(self, value: ClickValue) -> Optional[Any]:
        return value.value if isinstance(value, Tagged) else None


@dataclass(frozen=True)
class AxisExtractor:
    """Reads the clicked value from one plotted coordinate (categorical axes)."""

    axis: str

    def __post_init__(self) -> None:
        if self.axis not in ("x", "y"):
            raise ValueError(f"Axis must be 'x' or 'y', got {self.axis!r}")

    @property
    def field(self) -> str:
        return self.axis

    def from_point(self, point: Mapping[str, Any]) -> Optional[ClickValue]:
        if point.get(self.axis) is None:
            return None
        return Coordinate(x=point.get("x"), y=point.get("y"))

    def extract(self, value: ClickValue) -> Optional[Any]:
        if not isinstance(value, Coordinate):
            return None
        return getattr(value, self.axis)


Extractor = Union[TagExtractor, AxisExtractor]

EXTRACTORS: Dict[str, Extractor] = {
    "customdata": TagExtractor(),
    "x": AxisExtractor("x"),
    "y": AxisExtractor("y"),
}


@dataclass(frozen=True)
class ClickRoute:
    dimension: FilterDimension
    extractor: Extractor


# -----------------------------------------------------------------------------
# Router
# -----------------------------------------------------------------------------
class ClickRouter:
    """
    Translates click events from filterable visuals into FilterStore toggles.

    Purpose:
    - Keeps the source -> (dimension, extractor) table in one static place, so a new
      filterable chart only needs a new entry in global.json
    - Clicks from sources that are not in the table are dropped; those visuals
      do not take part in cross-filtering

    The router holds no filter state. The store is passed in per call, so one
    router serves every session.
    """

    def __init__(self, routes: Mapping[str, ClickRoute]) -> None:
        self._routes: Dict[str, ClickRoute] = dict(routes)

    @classmethod
    def from_config(cls, mapping: Mapping[str, Mapping[str, Any]]) -> ClickRouter:
        """
        Build the routing table from the ``click_sources`` section of global.json:

            {"income_forest_plot": {"dimension": "job_role", "field": "y"}, ...}

        Raises:
            ConfigError: on unknown dimensions or payload fields
        """
        routes: Dict[str, ClickRoute] = {}
        for source, entry in (mapping or {}).items():
            if not isinstance(entry, Mapping):
                raise ConfigError(f"Click source '{source}' must map to an object, got {entry!r}")

            try:
                dimension = FilterDimension.parse(entry.get("dimension"))
            except ValueError as e:
                raise ConfigError(f"Click source '{source}': {e}") from e

            field = entry.get("field", "customdata")
            extractor = EXTRACTORS.get(field)
            if extractor is None:
                raise ConfigError(
                    f"Click source '{source}': unknown payload field '{field}'. "
                    f"Expected one of: {sorted(EXTRACTORS)}"
                )
            routes[source] = ClickRoute(dimension=dimension, extractor=extractor)

        return cls(routes)

    @property
    def sources(self) -> list[str]:
        return sorted(self._routes)

    def route_for(self, source: str) -> Optional[ClickRoute]:
        return self._routes.get(source)

    def event_from_plotly(self, source: str, click_data: Optional[Mapping[str, Any]]) -> Optional[ClickEvent]:
        """
        Build a ClickEvent from a dcc.Graph ``clickData`` payload.

        The union variant is chosen by the source's declared extractor. Returns None
        for unknown sources and for payloads without a usable first point.
        """
        route = self._routes.get(source)
        if route is None or not click_data:
            return None

        points = click_data.get("points") or []
        if not isinstance(points, (list, tuple)) or not points or not isinstance(points[0], Mapping):
            return None

        value = route.extractor.from_point(points[0])
        if value is None:
            return None
        return ClickEvent(source=source, value=value)

    def route(self, event: ClickEvent, store: FilterStore) -> bool:
        """
        Apply one click to the store.
        :return: True if the click was routed into a toggle
        """
        route = self._routes.get(event.source)
        if route is None:
            logger.debug("Ignoring click from non-filterable source", extra={"source": event.source})
            return False

        raw = route.extractor.extract(event.value)
        if raw is None:
            logger.debug(
                "Click payload carries no value for its route",
                extra={"source": event.source, "field": route.extractor.field},
            )
            return False

        try:
            value = route.dimension.coerce(raw)
        except (TypeError, ValueError):
            logger.warning(
                "Click value does not fit its dimension",
                extra={"source": event.source, "dimension": route.dimension.value, "value": repr(raw)},
            )
            return False

        new_value = store.toggle(route.dimension, value)
        logger.info(
            "filter_toggled",
            extra={
                "source": event.source,
                "dimension": route.dimension.value,
                "value": new_value,
            },
        )
        return True
