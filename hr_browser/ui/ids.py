from __future__ import annotations

__all__ = ["IDs", "category_link_id", "chart_id"]


class IDs:
    class Store:
        # {"category": str, "filters": {dimension: value}}
        DASHBOARD_STATE = "dashboard-state"

    class Control:
        # Sidebar
        CATEGORY_NAV = "category-nav"
        CLEAR_FILTERS_BTN = "clear-filters-btn"
        PALETTE_SELECT = "palette-select"

        # Main panel
        CATEGORY_TITLE = "category-title"
        KPI_ROW = "kpi-row"
        ACTIVE_FILTERS = "active-filters"
        GRAPH_GRID = "graph-grid"

    class Pattern:
        # pattern-matching "type" strings
        CATEGORY_LINK = "category-link"
        CHART = "chart"


def category_link_id(category: str) -> dict:
    return {"type": IDs.Pattern.CATEGORY_LINK, "index": category}


def chart_id(source: str) -> dict:
    return {"type": IDs.Pattern.CHART, "index": source}
