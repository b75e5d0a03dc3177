from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hr_browser.config.model import GlobalConfig
from hr_browser.core.click_router import ClickRouter
from hr_browser.core.dataset import Dataset
from hr_browser.core.derivation import DerivationEngine
from hr_browser.core.state import DashboardState
from hr_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config, the loaded dataset and the
    cross-filter services. This is passed into layout + callback registration
    functions instead of using module-level globals.

    - engine/router/registry are shared by every browser session
    - api_state is the single server-side DashboardState behind the REST routes;
      Dash sessions keep their own state in dcc.Store instead
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: Dataset

    engine: Optional[DerivationEngine] = None
    router: Optional[ClickRouter] = None
    registry: Optional[ViewRegistry] = None
    api_state: Optional[DashboardState] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.engine is None:
            raise RuntimeError("AppConfig.engine must be initialized.")
        if self.router is None:
            raise RuntimeError("AppConfig.router must be initialized.")
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.api_state is None:
            raise RuntimeError("AppConfig.api_state must be initialized.")

    def restore_state(self, data) -> DashboardState:
        """Per-event DashboardState rebuilt from a session's dcc.Store payload."""
        return DashboardState.restore(
            self.engine,
            self.router,
            data,
            default_category=self.global_config.default_category,
        )

    def initial_state(self) -> dict:
        return DashboardState(
            self.engine,
            self.router,
            category=self.global_config.default_category,
        ).to_dict()
