"""
CLI Configuration utilities

Loads CLI configuration from .loggit.yaml files
"""

import copy
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class CLIConfig:
    """
    Manages CLI configuration from .loggit.yaml files.

    Configuration is loaded in this order (last wins):
    1. Built-in defaults
    2. User home directory config (~/.loggit.yaml)
    3. Current directory config (./.loggit.yaml)
    """

    DEFAULT_CONFIG = {
        "storage": {
            "path": "~/.loggit/db.json"
        },
        "ui": {
            "input_delay": 0.1,
            "message_delay": 1.0,
            "padding": 2,
            "date_format": "%d-%m-%Y"
        },
        "logging": {
            "level": "WARNING",
            "file": "~/.loggit/loggit.log"
        }
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize CLI config.

        Args:
            config_file: Optional path to config file. If None, searches standard locations.
        """
        self.config: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_from_file(config_file)
        else:
            self.load_standard_configs()

    def load_standard_configs(self):
        """Load config from standard locations in order."""
        home_config = Path.home() / ".loggit.yaml"
        if home_config.exists():
            self.load_from_file(str(home_config))

        local_config = Path.cwd() / ".loggit.yaml"
        if local_config.exists():
            self.load_from_file(str(local_config))

    def load_from_file(self, config_file: str):
        """
        Load configuration from a YAML file.

        Config is optional, so an unreadable file is logged and skipped.

        Args:
            config_file: Path to config file
        """
        try:
            with open(config_file, 'r') as f:
                loaded_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring config file {config_file}: {e}")
            return

        if not isinstance(loaded_config, dict):
            logger.warning(f"Ignoring config file {config_file}: expected a mapping")
            return
        self._merge_config(loaded_config)

    def _merge_config(self, new_config: Dict[str, Any]):
        """Recursively merge new config into existing config."""
        for key, value in new_config.items():
            if key in self.config and isinstance(self.config[key], dict) and isinstance(value, dict):
                self.config[key].update(value)
            else:
                self.config[key] = value

    def get(self, section: str, option: str, default: Any = None) -> Any:
        """
        Get a config value.

        Args:
            section: Section name (e.g., 'storage', 'ui')
            option: Option name (e.g., 'path', 'padding')
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        if section in self.config and isinstance(self.config[section], dict):
            return self.config[section].get(option, default)
        return default


def load_cli_config(config_file: Optional[str] = None) -> CLIConfig:
    """
    Load CLI configuration.

    Args:
        config_file: Optional path to config file

    Returns:
        CLIConfig instance
    """
    return CLIConfig(config_file)
