from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from hr_browser.config.loader import load_configured_dataset, load_global_config
from hr_browser.core.click_router import ClickRouter
from hr_browser.core.derivation import DerivationEngine
from hr_browser.core.state import DashboardState
from hr_browser.core.view_registry import ViewRegistry
from hr_browser.ui.api import create_api_blueprint
from hr_browser.ui.callbacks.callbacks_events import register_event_callbacks
from hr_browser.ui.callbacks.callbacks_render import register_render_callbacks
from hr_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from hr_browser.views import ALL_VIEWS

    registry = ViewRegistry()
    for view_cls in ALL_VIEWS:
        registry.register(view_cls)
    return registry


def _check_click_wiring(registry: ViewRegistry, router: ClickRouter) -> None:
    """Log mismatches between filterable views and the routing table (both directions)."""
    view_sources = set(registry.click_sources())
    routed = set(router.sources)

    for source in sorted(view_sources - routed):
        logger.warning(
            "View declares a click source with no route; its clicks will be ignored",
            extra={"source": source},
        )
    for source in sorted(routed - view_sources):
        logger.info("Click route has no registered view", extra={"source": source})


def build_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load Config (an invalid routing table raises ConfigError and aborts startup)
    global_config = load_global_config(config_root)
    router = ClickRouter.from_config(global_config.routing_table())

    # 2) Load Dataset + cross-filter services
    dataset = load_configured_dataset(global_config)
    engine = DerivationEngine(dataset)
    registry = build_view_registry()
    _check_click_wiring(registry, router)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        engine=engine,
        router=router,
        registry=registry,
        api_state=DashboardState(engine, router, category=global_config.default_category),
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_config(config_root)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        # Chart graphs are mounted by the render callback, not the initial layout
        suppress_callback_exceptions=True,
    )

    app.title = ctx.global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_event_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    # REST surface on the underlying Flask server
    app.server.register_blueprint(create_api_blueprint(ctx.api_state), url_prefix="/api")

    logger.info(
        "Dash app created",
        extra={
            "dataset": ctx.dataset.name,
            "n_records": ctx.dataset.n_records,
            "n_views": len(ctx.registry.all_classes()),
        },
    )
    return app
