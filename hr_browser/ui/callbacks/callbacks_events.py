from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from hr_browser.core.dimensions import Category
from hr_browser.ui.ids import IDs

if TYPE_CHECKING:
    from hr_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_trigger(
    ctx: AppConfig,
    stored: Optional[dict],
    triggered_id: Any,
    value: Any,
) -> Optional[dict]:
    """
    Pure helper: apply one UI event to the session's stored state.

    :param stored: the DASHBOARD_STATE store payload
    :param triggered_id: dash.ctx.triggered_id (string or pattern-matching dict)
    :param value: the triggering property's new value (clickData / n_clicks)
    :return: the new store payload, or None if nothing changed
    """
    if triggered_id is None or not value:
        # Freshly mounted graphs and links fire with empty props
        return None

    state = ctx.restore_state(stored)
    before = state.to_dict()

    if triggered_id == IDs.Control.CLEAR_FILTERS_BTN:
        state.clear_filters()

    elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.CATEGORY_LINK:
        try:
            category = Category.parse(triggered_id.get("index"))
        except ValueError:
            logger.warning("Unknown category link", extra={"link_id": dict(triggered_id)})
            return None
        state.select_category(category)

    elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.CHART:
        event = ctx.router.event_from_plotly(triggered_id.get("index"), value)
        if event is None:
            return None
        state.handle_click(event)

    else:
        logger.debug("Unhandled trigger", extra={"triggered_id": repr(triggered_id)})
        return None

    after = state.to_dict()
    return None if after == before else after


def register_event_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Clicks / category links / clear button -> DashboardState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DASHBOARD_STATE, "data"),
        Input({"type": IDs.Pattern.CHART, "index": ALL}, "clickData"),
        Input({"type": IDs.Pattern.CATEGORY_LINK, "index": ALL}, "n_clicks"),
        Input(IDs.Control.CLEAR_FILTERS_BTN, "n_clicks"),
        State(IDs.Store.DASHBOARD_STATE, "data"),
        prevent_initial_call=True,
    )
    def apply_dashboard_event(_click_data, _link_clicks, _clear_clicks, stored):
        triggered = dash.ctx.triggered
        value = triggered[0]["value"] if triggered else None

        new_state = apply_trigger(ctx, stored, dash.ctx.triggered_id, value)
        if new_state is None:
            raise exceptions.PreventUpdate
        return new_state
