"""
Configuration Manager with Environment Variables Support

Usage:
    from responsive_kit.core.config import Config, load_breakpoint_table

    table = load_breakpoint_table()
    epsilon = Config.get_instance().get_float("BREAKPOINT_EPSILON", 0.02)
"""
import os
import json
import math
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from responsive_kit.config.settings import DEFAULT_SETTINGS
from responsive_kit.config.themes.breakpoints import BreakpointTable
from responsive_kit.core.singleton import SingletonMeta
from responsive_kit.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "RESPONSIVE_KIT_CONFIG"
DEFAULT_CONFIG_FILE = "responsive_kit.json"


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    - Type conversion
    """

    def __init__(
            self,
            config_file: Optional[Union[str, Path]] = None,
            env_file: Optional[Union[str, Path]] = None,
    ):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._env_file_path = Path(env_file) if env_file else Path(".env")

        # Load environment variables first, the JSON path may come from them
        self._load_env()

        self._config_file_path = Path(
            config_file or os.getenv(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        )
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(f"{self._env_file_path} not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, "r", encoding="utf-8") as f:
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

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable
        2. JSON config file
        3. Default value
        """
        env_value = os.getenv(key)
        if env_value is not None:
            return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """
        Get float configuration value.

        Raises:
            ConfigurationError: If the value is not a number
        """
        value = self.get(key, default)

        if isinstance(value, bool):
            raise ConfigurationError(f"Config '{key}' must be a number, got {value!r}")

        try:
            number = float(value)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Config '{key}' must be a number, got {value!r}"
            ) from e

        if not math.isfinite(number):
            raise ConfigurationError(f"Config '{key}' must be a finite number, got {value!r}")
        return number

    def get_dict(self, key: str, default: dict = None) -> dict:
        """
        Get mapping configuration value.

        Supports:
        - JSON objects: {"xs": 0, "sm": 576}
        - Pair strings: "xs:0,sm:576"

        Raises:
            ConfigurationError: If the value cannot be read as a mapping
        """
        if default is None:
            default = {}

        value = self.get(key, default)

        if isinstance(value, dict):
            return dict(value)

        if isinstance(value, str):
            text = value.strip()
            if text.startswith("{"):
                try:
                    parsed = json.loads(text)
                except ValueError as e:
                    raise ConfigurationError(f"Config '{key}' is not valid JSON", detail=str(e)) from e
                if isinstance(parsed, dict):
                    return parsed
                raise ConfigurationError(f"Config '{key}' must be a JSON object")

            result = {}
            for item in text.split(","):
                if not item.strip():
                    continue
                name, sep, raw = item.partition(":")
                if not sep or not name.strip():
                    raise ConfigurationError(
                        f"Config '{key}' must be 'name:value' pairs",
                        detail=f"bad item {item.strip()!r}",
                    )
                result[name.strip()] = raw.strip()
            return result

        raise ConfigurationError(
            f"Config '{key}' must be a mapping, got {type(value).__name__}"
        )

    def get_path(self, key: str, default: str = None) -> Path:
        """Get Path configuration value"""
        value = self.get(key, default)
        return Path(value) if value else Path(default) if default else Path(".")


# Convenience functions
def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value"""
    return Config.get_instance().get(key, default)


def get_log_level() -> str:
    """Get logging level"""
    return str(get_config("LOG_LEVEL", DEFAULT_SETTINGS["log_level"])).upper()


def _to_width(name: str, value: Any):
    if isinstance(value, bool):
        raise ConfigurationError(f"Breakpoint '{name}' width must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(str(value).strip())
    except ValueError as e:
        raise ConfigurationError(
            f"Breakpoint '{name}' width must be a number, got {value!r}"
        ) from e
    return int(number) if number.is_integer() else number


def load_breakpoint_table(config: Optional[Config] = None) -> BreakpointTable:
    """
    Build the breakpoint table from configuration.

    Keys:
        BREAKPOINTS         JSON object or "name:width,..." (default: xs..xxl)
        BREAKPOINT_EPSILON  max-boundary margin (default: 0.02)

    Raises:
        ConfigurationError: unparsable values
        InvalidBreakpointTableError: tiers out of order, duplicated, ...
    """
    config = config or Config.get_instance()

    widths = config.get_dict("BREAKPOINTS", DEFAULT_SETTINGS["breakpoints"])
    epsilon = config.get_float("BREAKPOINT_EPSILON", DEFAULT_SETTINGS["breakpoint_epsilon"])

    table = BreakpointTable(
        ((str(name), _to_width(name, value)) for name, value in widths.items()),
        epsilon=epsilon,
    )
    logger.info(f"Breakpoint table loaded: {table!r}")
    return table
