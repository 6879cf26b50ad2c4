"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import Config

    config = Config()
    language = config.get("DEFAULT_AMOUNT_LANGUAGE", "english")
    level = config.get("LOG_LEVEL", "INFO")
"""
import os
import json
import logging
import re
from core.paths import config_path
from core.singleton import SingletonMeta
from typing import Any, Optional, Dict
from pathlib import Path
from dotenv import load_dotenv

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    - Type conversion
    - Validation
    """

    def __init__(self, config_file: Optional[str] = None, env_file: str = ".env"):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._config_file_path = Path(
            config_file or os.getenv("FATURA_CONFIG_FILE") or config_path("settings.json")
        )

        self._load_env(Path(env_file))
        self._load_json_config()

    def _load_env(self, env_file: Path):
        """Load environment variables from .env file"""
        if env_file.exists():
            load_dotenv(env_file)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {env_file}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load config file {self._config_file_path}",
                detail=str(e),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self._config_file_path} must contain a JSON object"
            )
        self._config_cache = data
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}"
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def get_list(self, key: str, default: list = None, separator: str = ',') -> list:
        """
        Get list configuration value.

        Supports JSON arrays and separator-delimited strings.
        """
        if default is None:
            default = []

        value = self.get(key, default)

        if isinstance(value, list):
            return value

        if isinstance(value, str):
            return [item.strip() for item in value.split(separator) if item.strip()]

        return default

    def set(self, key: str, value: Any):
        """Set configuration value for the lifetime of this instance."""
        self._config_cache[key] = value

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "DEFAULT_CURRENCY": {
                "type": str,
                "required": False,
                "pattern": r"^(USD|IQD)$"
            }
        }
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if rules.get("required", False) and value is None:
                errors.append(f"Required config '{key}' is missing")
                continue

            if "type" in rules and value is not None and not isinstance(value, rules["type"]):
                errors.append(
                    f"Config '{key}' must be {rules['type'].__name__}, "
                    f"got {type(value).__name__}"
                )

            if "pattern" in rules and value and not re.match(rules["pattern"], str(value)):
                errors.append(
                    f"Config '{key}' does not match pattern {rules['pattern']}"
                )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors)
            )

    def all(self) -> Dict[str, Any]:
        """Get all file-backed configuration as dictionary"""
        return dict(self._config_cache)
