"""Configuration manager for nyaa."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from ..errors import ConfigError
from ..models import Filter, Sort, find_category
from .schema import AppConfig

if TYPE_CHECKING:
    from ..state import AppState

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "nyaa"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigManager:
    """Reads and writes the user configuration file."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> AppConfig:
        """Load the configuration, writing defaults on first run."""
        if not self.config_path.exists():
            config = AppConfig()
            try:
                self.save(config)
            except OSError as e:
                raise ConfigError(f"Failed to create {self.config_path}:\n{e}") from e
            logger.info("Wrote default config to %s", self.config_path)
            return config

        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read {self.config_path}:\n{e}") from e

        try:
            return AppConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config {self.config_path}:\n{e}") from e

    def save(self, config: AppConfig) -> None:
        """Write the configuration to disk."""
        self._ensure_dir()
        with open(self.config_path, "w") as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def apply_config(
    config: AppConfig,
    state: "AppState",
    source_names: list[str],
    client_names: list[str],
    theme_names: list[str],
) -> None:
    """Copy config defaults into the initial state.

    Every value that cannot be applied is queued as an error and the
    in-memory default is kept.
    """
    state.config = config

    def reject(what: str, value: str) -> None:
        state.show_error(ConfigError(f"Config: unknown {what} {value!r}, using default"))

    if config.theme in theme_names:
        state.theme = config.theme
    else:
        reject("theme", config.theme)

    if config.default_source in source_names:
        state.source = config.default_source
    else:
        reject("source", config.default_source)

    if config.default_client in client_names:
        state.client = config.default_client
    else:
        reject("client", config.default_client)

    category = find_category(config.default_category)
    if category:
        state.category = category
    else:
        reject("category", config.default_category)

    try:
        state.filter = Filter.from_label(config.default_filter)
    except ValueError:
        reject("filter", config.default_filter)

    try:
        state.sort = Sort.from_label(config.default_sort)
    except ValueError:
        reject("sort", config.default_sort)

    state.ascending = config.default_sort_dir.lower() == "asc"
    state.query = config.default_search
