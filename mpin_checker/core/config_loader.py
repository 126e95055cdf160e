import logging
import os
from typing import Any, Dict

import yaml

from mpin_checker.paths import get_resource_path

logger = logging.getLogger(__name__)

CONFIG_FILE = "config/mpin_config.yml"


class ConfigLoader:
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        try:
            config_path = get_resource_path(CONFIG_FILE)
            if os.path.exists(config_path):
                with open(config_path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
                if not isinstance(loaded, dict):
                    logger.warning("Config file is empty or not a mapping: %s", config_path)
                    loaded = {}
                self._config = loaded
            else:
                logger.warning("Config file not found: %s", config_path)
                self._config = {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config: %s", e)
            self._config = {}

    @classmethod
    def reset(cls):
        """Drop the cached instance so the next access reloads the file."""
        cls._instance = None

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)
