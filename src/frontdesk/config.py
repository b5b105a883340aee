from __future__ import annotations

import importlib
import os
import logging
from typing import Optional, Type

from dotenv import load_dotenv

from frontdesk.base_config import FrontDeskConfig, DEFAULT_NIGHTLY_RATE
from frontdesk.adapters.base import FrontDeskAdapter
from frontdesk.adapters.sqlite_adapter import SQLiteFrontDeskAdapter
from frontdesk.exceptions import ConfigurationError

load_dotenv()

DEFAULT_CONFIG_CLASS = "frontdesk.config.EnvironmentFrontDeskConfig"
CONFIG_ENV_KEY = "FRONTDESK_CONFIG"

_TRUE_VALUES = {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[FrontDeskConfig]:
    try:
        module_path, class_name = path.rsplit(".", 1)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config path '{path}'") from exc

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_path}'") from exc

    try:
        cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(f"Config class '{class_name}' not found in '{module_path}'") from exc

    if not isinstance(cls, type) or not issubclass(cls, FrontDeskConfig):
        raise ConfigurationError(f"{path} is not a subclass of FrontDeskConfig")

    return cls


class EnvironmentFrontDeskConfig(FrontDeskConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def get_database_url(self) -> str:
        return self._env.get("DATABASE_URL", "sqlite:///frontdesk.db")

    def get_nightly_rate(self) -> float:
        raw = self._env.get("NIGHTLY_RATE")
        if not raw:
            return DEFAULT_NIGHTLY_RATE
        try:
            return float(raw)
        except (TypeError, ValueError):
            logger.warning(f"Invalid NIGHTLY_RATE '{raw}', using {DEFAULT_NIGHTLY_RATE}")
            return DEFAULT_NIGHTLY_RATE

    def get_hotel_display_name(self) -> str:
        return self._env.get("HOTEL_NAME", "Front Desk")

    def get_strict_validation(self) -> bool:
        return self._env.get("FRONTDESK_STRICT", "").strip().lower() in _TRUE_VALUES

    def create_adapter(self) -> FrontDeskAdapter:
        adapter = SQLiteFrontDeskAdapter(self.get_database_url())
        adapter.init()
        self.seed_database(adapter)
        return adapter


_CONFIG: Optional[FrontDeskConfig] = None


def get_config() -> FrontDeskConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[FrontDeskConfig]) -> None:
    global _CONFIG
    _CONFIG = config
