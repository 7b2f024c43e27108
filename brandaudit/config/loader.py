"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from brandaudit.config.schema import Config, SearchProvidersConfig

DEFAULT_SEARCH_BASE_URLS = {
    name: field.default_factory().base_url
    for name, field in SearchProvidersConfig.model_fields.items()
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".brandaudit" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Fill defaults the schema cannot express (empty provider base URLs)."""
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")

    search_cfg = data.setdefault("search", {})
    providers_cfg = search_cfg.setdefault("providers", {})

    # Fill default search provider base URLs when missing/empty
    for name, base_url in DEFAULT_SEARCH_BASE_URLS.items():
        provider_cfg = providers_cfg.setdefault(name, {})
        if not provider_cfg.get("baseUrl"):
            provider_cfg["baseUrl"] = base_url

    return data
