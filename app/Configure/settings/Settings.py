"""Configuration management for the stats bot with safe property access"""

import os
from typing import Any, Dict, FrozenSet, Optional
from loguru import logger
from config import config_from_json
from dotenv import load_dotenv
from ..file_loader import get_file_loader


class SafeConfig:
    """Provides safe access to configuration properties with defaults"""

    def __init__(self, config_data=None):
        self._config = config_data if config_data is not None else {}
        self._defaults = self._get_defaults()

    def _get_defaults(self) -> Dict[str, Any]:
        """Define default values for all configuration properties"""
        return {
            # Telegram defaults
            'BOT_TOKEN': None,
            'ADMIN_ID': [],

            # Activision defaults
            'ACTIVISION_EMAIL': '',
            'ACTIVISION_PASSWORD': '',
            'RATE_LIMIT_MAX_REQUESTS': 2,
            'RATE_LIMIT_PERIOD': 1.0,

            # Logging defaults
            'LOG_LEVEL': 'INFO',
            'LOG_FILE': None,
        }

    def _get_value(self, key: str) -> Any:
        """Environment first, then the config file, then the default"""
        env_value = os.getenv(key)
        if env_value:
            return env_value
        try:
            value = self._config.get(key)
        except (AttributeError, KeyError, TypeError):
            value = None
        return value if value is not None else self._defaults.get(key)

    # Telegram properties
    @property
    def bot_token(self) -> Optional[str]:
        return self._get_value('BOT_TOKEN') or None

    @property
    def admin_ids(self) -> FrozenSet[str]:
        """Authorized sender ids, normalized to strings"""
        value = self._get_value('ADMIN_ID')
        if isinstance(value, str):
            value = value.split(',')
        elif not isinstance(value, (list, tuple, set, frozenset)):
            value = [value]
        return frozenset(str(item).strip() for item in value if str(item).strip())

    # Activision properties
    @property
    def activision_email(self) -> str:
        return self._get_value('ACTIVISION_EMAIL')

    @property
    def activision_password(self) -> str:
        return self._get_value('ACTIVISION_PASSWORD')

    @property
    def rate_limit_max_requests(self) -> int:
        return int(self._get_value('RATE_LIMIT_MAX_REQUESTS'))

    @property
    def rate_limit_period(self) -> float:
        return float(self._get_value('RATE_LIMIT_PERIOD'))

    # Logging properties
    @property
    def log_level(self) -> str:
        return str(self._get_value('LOG_LEVEL')).upper()

    @property
    def log_file(self) -> Optional[str]:
        return self._get_value('LOG_FILE')


class SettingsManager:
    """Loads the bot configuration from a JSON file"""

    @classmethod
    def load(cls, path: str) -> SafeConfig:
        """Load settings from the JSON file at `path` (searched if relative and missing)"""
        raw_config = cls._load_raw_config(path)
        return SafeConfig(raw_config)

    @classmethod
    def _load_raw_config(cls, path: str):
        """Load raw configuration from file using FileLoaderService"""
        # Load environment variables
        load_dotenv()

        file_path = get_file_loader().find_file(path)
        if file_path is None:
            error_msg = f"Configuration file '{path}' not found in any search path. The bot cannot run without a valid config file."
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        config_data = config_from_json(file_path, read_from_file=True)
        logger.info(f"Configuration loaded successfully from '{file_path}'")
        return config_data


# Create module-level alias for backward compatibility
Settings = SettingsManager
