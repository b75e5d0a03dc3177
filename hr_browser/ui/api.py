from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from flask import Blueprint, jsonify, request

from hr_browser.core.click_router import ClickEvent, Coordinate, Tagged
from hr_browser.core.dimensions import Category, FilterDimension
from hr_browser.core.kpis import compute_kpis
from hr_browser.core.state import DashboardState

logger = logging.getLogger(__name__)


def _state_payload(state: DashboardState, **extra: Any) -> dict:
    payload = state.to_dict()
    payload.update(extra)
    return payload


def _bad_request(message: str):
    return jsonify({"error": message}), 400


def _json_object() -> dict:
    """
    The request body as a JSON object; an absent or unparseable body counts as empty.

    Raises:
        ValueError: if the body is valid JSON but not an object (a list, a string, ...)
    """
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError(f"request body must be a JSON object, got {type(body).__name__}")
    return body


def parse_click_body(state: DashboardState, body: Mapping[str, Any]) -> Optional[ClickEvent]:
    """
    Accept either a raw Plotly payload or an explicit ClickValue:

        {"source": "...", "click_data": {"points": [...]}}
        {"source": "...", "value": {"tag": "Sales"}}
        {"source": "...", "value": {"x": "Sales", "y": 4200}}

    Raises:
        ValueError: on a missing source or an unrecognised value shape
    """
    source = body.get("source")
    if not source or not isinstance(source, str):
        raise ValueError("'source' is required")

    if "click_data" in body:
        click_data = body.get("click_data")
        if click_data is not None and not isinstance(click_data, Mapping):
            raise ValueError("'click_data' must be an object")
        return state.router.event_from_plotly(source, click_data)

    value = body.get("value")
    if not isinstance(value, Mapping):
        raise ValueError("either 'click_data' or a 'value' object is required")
    if "tag" in value:
        return ClickEvent(source=source, value=Tagged(value["tag"]))
    if "x" in value or "y" in value:
        return ClickEvent(source=source, value=Coordinate(x=value.get("x"), y=value.get("y")))
    raise ValueError("'value' must carry 'tag', or 'x'/'y'")


def create_api_blueprint(state: DashboardState) -> Blueprint:
    """
    REST surface over one shared DashboardState. Every command runs under the
    state's lock, so concurrent requests are applied one at a time.
    """
    api = Blueprint("hr_browser_api", __name__)

    @api.post("/click")
    def post_click():
        try:
            event = parse_click_body(state, _json_object())
        except ValueError as e:
            return _bad_request(str(e))

        changed = state.handle_click(event) if event is not None else False
        return jsonify(_state_payload(state, changed=changed))

    @api.post("/category")
    def post_category():
        try:
            category = Category.parse(_json_object().get("category"))
        except ValueError as e:
            return _bad_request(str(e))

        state.select_category(category)
        return jsonify(_state_payload(state))

    @api.post("/clear-filters")
    def post_clear_filters():
        changed = state.clear_filters()
        return jsonify(_state_payload(state, changed=changed))

    @api.get("/filters")
    def get_filters():
        return jsonify(state.to_dict())

    @api.get("/derived-dataset")
    def get_derived_dataset():
        derived = state.derived
        limit = request.args.get("limit", type=int)
        rows = derived if limit is None else derived.head(max(limit, 0))
        # to_json handles numpy/pandas scalars and missing values
        records = json.loads(rows.to_json(orient="records"))
        return jsonify(
            {
                "count": len(derived),
                "filters": state.active_filters.to_dict(),
                "kpis": compute_kpis(derived).to_dict(),
                "records": records,
            }
        )

    @api.get("/dimensions")
    def get_dimensions():
        dataset = state.engine.dataset
        return jsonify(
            {
                dim.value: {"label": dim.label, "values": dataset.values_for(dim)}
                for dim in FilterDimension
            }
        )

    return api
