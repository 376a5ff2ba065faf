"""Application settings management - loading, validation, and persistence."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import WebsiteMoverConfig


class ConfigManager:
    """Manages loading and saving the YAML settings file."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path("config/websitemover.yaml"),
        Path.home() / ".config" / "websitemover" / "config.yaml",
        Path.home() / ".websitemover" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self._config: WebsiteMoverConfig | None = None

    def load(self, create_if_missing: bool = True) -> WebsiteMoverConfig:
        """
        Load settings from file.

        Args:
            create_if_missing: Fall back to defaults if no settings file is found.

        Returns:
            Loaded and validated settings.

        Raises:
            FileNotFoundError: If no settings found and create_if_missing is False.
            ValueError: If the settings file is invalid.
        """
        config_file = self._find_config_file()

        if config_file is None:
            if create_if_missing:
                return self._create_default_config()
            raise FileNotFoundError(
                f"No configuration file found. Searched: {self.DEFAULT_CONFIG_LOCATIONS}"
            )

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            self._config = WebsiteMoverConfig(**config_dict)
            self.config_path = config_file
            return self._config

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

    def save(self, config: WebsiteMoverConfig | None = None, path: Path | None = None):
        """
        Save settings to file.

        Args:
            config: Settings to save. Uses current settings if None.
            path: Path to save to. Uses current config_path if None.
        """
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")

        save_path = path or self.config_path
        if save_path is None:
            save_path = Path.home() / ".config" / "websitemover" / "config.yaml"
        save_path = Path(save_path)

        save_path.parent.mkdir(parents=True, exist_ok=True)

        # mode="json" renders Path values as strings
        config_dict = config_to_save.model_dump(mode="json")

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config_dict,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

        self.config_path = save_path
        self._config = config_to_save

    def _find_config_file(self) -> Path | None:
        """Find the first existing config file in default locations."""
        if self.config_path is not None:
            return self.config_path if self.config_path.exists() else None

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if location.exists():
                return location

        return None

    def _create_default_config(self) -> WebsiteMoverConfig:
        """Create and return default settings."""
        default_config = WebsiteMoverConfig()
        self._config = default_config
        return default_config


# Global config instance
_config_manager: ConfigManager | None = None


def get_config_manager(config_path: Path | None = None) -> ConfigManager:
    """
    Get global config manager instance.

    An explicit path replaces the global manager so the CLI's ``--config``
    option always wins.
    """
    global _config_manager
    if _config_manager is None or config_path is not None:
        _config_manager = ConfigManager(config_path)
    return _config_manager

