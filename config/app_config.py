# config/app_config.py
# -*- coding: utf-8 -*-
"""
Конфигурация приложения: ключ OpenWeather, хост, лимиты и пауза меню.
Значения берутся из переменных окружения (и .env, если он есть).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from core.utils.error_handler import ConfigError

load_dotenv()

# === ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ ===
DEFAULT_OPENWEATHER_HOST = "http://api.openweathermap.org"
MAX_FAVORITES = 3  # сколько избранных городов держим в памяти
MENU_PAUSE_SEC = 1.0  # пауза после каждого действия меню


def _parse_optional_float(raw: Optional[str], name: str) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


@dataclass
class AppConfig:
    openweather_api_key: str
    openweather_host: str = DEFAULT_OPENWEATHER_HOST
    request_timeout: Optional[float] = None
    max_favorites: int = MAX_FAVORITES
    menu_pause_sec: float = MENU_PAUSE_SEC
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "AppConfig":
        """Собирает конфигурацию из окружения. Не валидирует, см. validate()."""
        max_favorites = os.getenv("MAX_FAVORITES", str(MAX_FAVORITES))
        try:
            max_favorites = int(max_favorites)
        except ValueError:
            raise ConfigError(f"MAX_FAVORITES must be an integer, got {max_favorites!r}")

        menu_pause = _parse_optional_float(os.getenv("MENU_PAUSE_SEC"), "MENU_PAUSE_SEC")

        return cls(
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            openweather_host=os.getenv("OPENWEATHER_HOST", DEFAULT_OPENWEATHER_HOST),
            request_timeout=_parse_optional_float(os.getenv("OPENWEATHER_TIMEOUT"), "OPENWEATHER_TIMEOUT"),
            max_favorites=max_favorites,
            menu_pause_sec=MENU_PAUSE_SEC if menu_pause is None else menu_pause,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> "AppConfig":
        """Проверяет обязательные параметры. Возвращает self для цепочки вызовов."""
        if not self.openweather_api_key.strip():
            raise ConfigError("OPENWEATHER_API_KEY не задан в окружении или .env")
        if self.max_favorites < 1:
            raise ConfigError(f"MAX_FAVORITES must be positive, got {self.max_favorites}")
        if self.menu_pause_sec < 0:
            raise ConfigError(f"MENU_PAUSE_SEC must not be negative, got {self.menu_pause_sec}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigError(f"OPENWEATHER_TIMEOUT must be positive, got {self.request_timeout}")
        return self
