# src/tagscan/utils/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from tagscan.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    A singleton class to manage the library's default settings.
    It loads settings from the bundled settings.json and allows for in-memory modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'render.raw_tags'.
        """
        keys = key_path.split('.')
        value = self._config
        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        e.g., 'classifier.strict', True
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        # Keep the type of the existing value where possible
        original_value = d.get(keys[-1])
        if original_value is not None and not isinstance(original_value, type(value)):
            try:
                value = _cast_like(original_value, value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as given.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self):
        """Resets the in-memory configuration from the settings.json file."""
        try:
            config_path = PathUtils.get_settings_file()
            if not config_path.exists():
                logger.warning("settings.json not found at %s. Using empty config.", config_path)
                self._config = {}
                return
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.debug("Configuration has been (re)loaded from settings.json.")
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}


def _cast_like(original: Any, value: Any) -> Any:
    """Casts value to the type of original; strings like 'false' become booleans."""
    if isinstance(original, bool) and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    if isinstance(original, list) and isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return type(original)(value)


# The global singleton instance that the entire library uses.
config_manager = ConfigManager()
