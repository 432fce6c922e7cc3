from __future__ import annotations

import importlib
import os
import logging
from typing import Optional, Type

from dotenv import load_dotenv

load_dotenv()

from hotelres.base_config import HotelResConfig
from hotelres.adapters.base import SnapshotAdapter
from hotelres.adapters.sqlite_adapter import SQLiteSnapshotAdapter
from hotelres.adapters.json_adapter import JsonFileSnapshotAdapter
from hotelres.exceptions import ConfigurationError


DEFAULT_CONFIG_CLASS = "hotelres.config.EnvironmentHotelResConfig"
CONFIG_ENV_KEY = "HOTELRES_CONFIG"

DEFAULT_PAYMENT_DELAY = 1.5

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[HotelResConfig]:
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

    if not isinstance(cls, type) or not issubclass(cls, HotelResConfig):
        raise ConfigurationError(f"{path} is not a subclass of HotelResConfig")

    return cls


class EnvironmentHotelResConfig(HotelResConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def get_database_url(self) -> str:
        return self._env.get("DATABASE_URL", "sqlite:///hotelres.db")

    def get_payment_delay_seconds(self) -> float:
        raw = self._env.get("PAYMENT_DELAY_SECONDS", str(DEFAULT_PAYMENT_DELAY))
        try:
            return max(0.0, float(raw))
        except (TypeError, ValueError):
            logger.warning(f"Invalid PAYMENT_DELAY_SECONDS: {raw}")
            return DEFAULT_PAYMENT_DELAY

    def get_hotel_display_name(self) -> str:
        return self._env.get("HOTEL_NAME", "Hotel Reservation System")

    def get_log_level(self) -> str:
        return self._env.get("LOG_LEVEL", "INFO").upper()

    def create_adapter(self) -> SnapshotAdapter:
        """URL şemasına göre adapter'ı seçer ve init eder."""
        url = self.get_database_url()
        if url.startswith("sqlite:///"):
            adapter: SnapshotAdapter = SQLiteSnapshotAdapter(url)
        elif url.startswith("file://"):
            adapter = JsonFileSnapshotAdapter(url)
        else:
            raise ConfigurationError(
                f"Unsupported DATABASE_URL '{url}'. Use sqlite:///path.db or file:///directory."
            )
        adapter.init()
        return adapter


_CONFIG: Optional[HotelResConfig] = None


def get_config() -> HotelResConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[HotelResConfig]) -> None:
    global _CONFIG
    _CONFIG = config
