from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("orderdesk.config.yaml")

DEFAULT_LOCALE = "en-US"
DEFAULT_PAGE_SIZE = 5
DEFAULT_PAGE_SIZE_OPTIONS = (5, 10, 25, 50)

# Grouping and decimal marks per locale tag, as used for money cells.
BASE_LOCALES: Dict[str, Dict[str, str]] = {
    "en-US": {"thousands_separator": ",", "decimal_separator": "."},
    "en-GB": {"thousands_separator": ",", "decimal_separator": "."},
    "ja-JP": {"thousands_separator": ",", "decimal_separator": "."},
    "de-DE": {"thousands_separator": ".", "decimal_separator": ","},
    "it-IT": {"thousands_separator": ".", "decimal_separator": ","},
    "nl-NL": {"thousands_separator": ".", "decimal_separator": ","},
    "pt-BR": {"thousands_separator": ".", "decimal_separator": ","},
    "fr-FR": {"thousands_separator": " ", "decimal_separator": ","},
    "de-CH": {"thousands_separator": "’", "decimal_separator": "."},
}


class DisplaySettings(BaseModel):
    """Locale and paging settings shared by the query engine and the views."""
    model_config = ConfigDict(frozen=True)

    locale: str = DEFAULT_LOCALE
    thousands_separator: str = ","
    decimal_separator: str = "."
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    page_size_options: List[int] = Field(default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS))


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load orderdesk configuration from YAML file.

    Args:
        path: Optional path to config file. Defaults to orderdesk.config.yaml

    Returns:
        Dictionary with configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    if "version" not in config:
        raise ValueError("Config must have 'version' field")

    locales = config.get("locales")
    if locales is not None and not isinstance(locales, dict):
        raise ValueError("Config 'locales' must be a dictionary if provided")

    options = config.get("page_size_options")
    if options is not None and not isinstance(options, list):
        raise ValueError("Config 'page_size_options' must be a list if provided")

    return config


def load_config_or_defaults(path: Path | None = None) -> Dict[str, Any]:
    """
    Load an explicit config file, or the default one if it exists.

    An explicit path that does not exist is an error; a missing default
    file just means built-in defaults.
    """
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    logger.debug(f"No {DEFAULT_CONFIG_PATH} found, using built-in defaults")
    return {}


def _merge_locales(config: Dict[str, Any]) -> Dict[str, Dict[str, str]]:
    """Built-in locale table overlaid with user-defined entries."""
    merged = {tag: dict(marks) for tag, marks in BASE_LOCALES.items()}
    for tag, marks in (config.get("locales") or {}).items():
        if not isinstance(marks, dict):
            raise ValueError(f"Locale '{tag}' must be a dictionary")
        merged[tag] = {**merged.get(tag, {}), **marks}
    return merged


def get_display_settings(config: Dict[str, Any] | None = None) -> DisplaySettings:
    """
    Resolve display settings from a loaded config dict.

    Args:
        config: Config dict from load_config(); None or {} gives defaults

    Returns:
        Validated DisplaySettings

    Raises:
        ValueError: Unknown locale tag, or page settings out of range
    """
    config = config or {}
    locale = config.get("locale", DEFAULT_LOCALE)
    locales = _merge_locales(config)
    if locale not in locales:
        known = ", ".join(sorted(locales))
        raise ValueError(f"Unknown locale '{locale}'. Known locales: {known}")

    marks = locales[locale]
    options = config.get("page_size_options") or list(DEFAULT_PAGE_SIZE_OPTIONS)
    page_size = config.get("page_size", options[0] if DEFAULT_PAGE_SIZE not in options else DEFAULT_PAGE_SIZE)

    try:
        settings = DisplaySettings(
            locale=locale,
            thousands_separator=marks.get("thousands_separator", ","),
            decimal_separator=marks.get("decimal_separator", "."),
            page_size=page_size,
            page_size_options=options,
        )
    except ValidationError as e:
        raise ValueError(f"Invalid display settings: {e}") from e

    if any(option <= 0 for option in settings.page_size_options):
        raise ValueError("Config 'page_size_options' must be positive integers")
    if settings.page_size not in settings.page_size_options:
        raise ValueError(
            f"Config 'page_size' {settings.page_size} is not one of {settings.page_size_options}"
        )
    return settings
