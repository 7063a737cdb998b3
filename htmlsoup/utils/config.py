"""
Configuration utility for htmlsoup.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

from ..errors import ConfigError
from ..version import __version__

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "parser": {
        "strict": False,
        "namespace_html": False,
    },
    "http": {
        "timeout": 30,
        "retries": 3,
        "backoff_factor": 0.5,
        "user_agent": f"htmlsoup/{__version__}",
    },
}


def _merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> None:
    """Recursively merge ``overlay`` into ``base`` in place."""
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


class Config:
    """Configuration manager for parsing and fetching."""

    def __init__(self, config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a JSON config file. Nothing is read when omitted.
            overrides: Nested values applied on top of the defaults and the file
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        if overrides:
            with self._lock:
                _merge(self.config, overrides)

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """
        Reset to defaults, then overlay the config file if there is one.

        Raises:
            ConfigError: If the file exists but cannot be read or decoded
        """
        self._set_defaults()

        if not self.config_path:
            return

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            raise ConfigError(f"Cannot load configuration from {self.config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"Configuration in {self.config_path} must be a JSON object")

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """
        Save configuration to file.

        Raises:
            ConfigError: If no path is set or the file cannot be written
        """
        if not self.config_path:
            raise ConfigError("No configuration path set")

        with self._lock:
            config_copy = copy.deepcopy(self.config)

        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(config_copy, f, indent=4)
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            raise ConfigError(f"Cannot save configuration to {self.config_path}: {e}") from e

        logger.debug(f"Configuration saved to {self.config_path}")

    def _section(self, key: str, create: bool = False) -> Tuple[Optional[Dict[str, Any]], str]:
        """
        Resolve a dotted key to the dict holding its last segment.

        Returns ``(None, leaf)`` when an intermediate segment is missing or
        not a dict, unless ``create`` is set, in which case missing or
        scalar segments are replaced by empty dicts. Callers hold the lock.
        """
        *path, leaf = key.split('.')
        section = self.config
        for part in path:
            child = section.get(part)
            if not isinstance(child, dict):
                if not create:
                    return None, leaf
                child = section[part] = {}
            section = child
        return section, leaf

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Dotted key, e.g. ``'http.timeout'``
            default: Returned when the key is absent

        Returns:
            The value, or ``default``
        """
        with self._lock:
            section, leaf = self._section(key)
            if section is None:
                return default
            return section.get(leaf, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value, creating intermediate sections as needed.

        Args:
            key: Dotted key, e.g. ``'parser.strict'``
            value: The new value
        """
        with self._lock:
            section, leaf = self._section(key, create=True)
            section[leaf] = value

    def remove(self, key: str) -> bool:
        """Remove a value. Returns False if there was nothing to remove."""
        with self._lock:
            section, leaf = self._section(key)
            if section is None or leaf not in section:
                return False
            del section[leaf]
            return True

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Deep copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)
