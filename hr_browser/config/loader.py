from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from hr_browser.config.model import ClickSourceConfig, GlobalConfig
from hr_browser.core.dataset import Dataset, load_dataset
from hr_browser.core.dimensions import DEFAULT_CATEGORY, Category
from hr_browser.core.exceptions import ConfigError
from hr_browser.core.sample_data import generate_sample_dataset

logger = logging.getLogger(__name__)


def _resolve_path(root: Path, raw: Optional[str]) -> Optional[Path]:
    if not raw:
        return None
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def parse_global_config(raw: Dict[str, Any], root: Path) -> GlobalConfig:
    """
    Turn the contents of global.json into a GlobalConfig.

    Raises:
        ConfigError: if the document is not an object, on an unknown default category,
            a non-integer sample size or seed, or malformed click_sources
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"global.json must hold an object, got {type(raw).__name__}")

    try:
        default_category = Category.parse(raw.get("default_category", DEFAULT_CATEGORY.value))
    except ValueError as e:
        raise ConfigError(str(e)) from e

    try:
        sample_size = int(raw.get("sample_size", 1470))
        sample_seed = int(raw.get("sample_seed", 123))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'sample_size' and 'sample_seed' must be integers: {e}") from e

    raw_sources = raw.get("click_sources", {})
    if not isinstance(raw_sources, dict):
        raise ConfigError(f"'click_sources' must be an object, got {type(raw_sources).__name__}")

    click_sources: Dict[str, ClickSourceConfig] = {}
    for source, entry in raw_sources.items():
        if not isinstance(entry, dict) or "dimension" not in entry:
            raise ConfigError(f"Click source '{source}' needs a 'dimension'")
        click_sources[source] = ClickSourceConfig(
            source=source,
            dimension=entry["dimension"],
            field=entry.get("field", "customdata"),
        )

    return GlobalConfig(
        ui_title=raw.get("ui_title", "HR Analytics Dashboard"),
        subtitle=raw.get("subtitle", "Cross-filtered workforce explorer"),
        data_file=_resolve_path(root, raw.get("data_file")),
        sample_size=sample_size,
        sample_seed=sample_seed,
        default_category=default_category,
        default_palette=raw.get("default_palette", "blues"),
        click_sources=click_sources,
    )


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load ``global.json`` from the config directory.
    """
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    cfg = parse_global_config(raw_global, root)
    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "data_file": str(cfg.data_file) if cfg.data_file else None,
            "click_sources": sorted(cfg.click_sources),
        },
    )
    return cfg


def load_configured_dataset(cfg: GlobalConfig) -> Dataset:
    """
    Load the configured CSV, or generate the sample table when none is configured.
    """
    if cfg.data_file is None:
        logger.warning(
            "No data_file configured; generating sample data",
            extra={"sample_size": cfg.sample_size, "sample_seed": cfg.sample_seed},
        )
        return generate_sample_dataset(n=cfg.sample_size, seed=cfg.sample_seed)

    return load_dataset(cfg.data_file)
