# -*- coding: utf-8 -*-
"""
Обёртка для OpenWeather API.
Поддерживает:
- GET к фиксированному хосту с ключом, добавленным последним параметром
- Проверку транспорта и HTTP-статуса
- Разбор JSON (дробные числа как Decimal, без потери точности)
"""
import logging
from decimal import Decimal
from typing import Any, Optional

import requests

from core.utils.error_handler import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger("api_client")

# === КОНФИГУРАЦИЯ API ===
DEFAULT_HOST = "http://api.openweathermap.org"
API_KEY_PARAM = "appid"


class OpenWeatherClient:
    """Клиент для OpenWeather API (геокодинг + текущая погода)."""

    def __init__(self, api_key: str, host: str = DEFAULT_HOST, timeout: Optional[float] = None):
        if not api_key:
            raise ValueError("OpenWeather API key is required")
        self.host = host.rstrip("/")
        self._api_key = api_key
        # None: ждём столько, сколько позволяет транспорт
        self.timeout = timeout

    def build_url(self, endpoint: str) -> str:
        """Склеивает хост, путь с параметрами и ключ API (всегда последним)."""
        separator = "&" if "?" in endpoint else "?"
        return f"{self.host}{endpoint}{separator}{API_KEY_PARAM}={self._api_key}"

    def fetch(self, endpoint: str) -> Any:
        """
        Выполняет GET и возвращает разобранный JSON.

        Args:
            endpoint (str): Путь с query-строкой, например "/geo/1.0/direct?q=London&limit=1"

        Returns:
            Any: dict или list из JSON-ответа

        Raises:
            TransportError: не удалось установить соединение
            HttpStatusError: статус ответа не 200
            DecodeError: тело ответа не является JSON
        """
        # В лог пишем только путь, ключ API не должен туда попасть
        logger.debug(f"🌐 GET {endpoint}")
        try:
            response = requests.get(self.build_url(endpoint), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ OpenWeather: нет соединения ({type(e).__name__})")
            raise TransportError("Failed to connect to OpenWeather API.") from e

        if response.status_code != 200:
            logger.error(f"❌ OpenWeather: статус {response.status_code} для {endpoint}")
            raise HttpStatusError(response.status_code)

        try:
            data = response.json(parse_float=Decimal)
        except ValueError as e:
            logger.error(f"❌ OpenWeather: ответ не JSON: {e}")
            raise DecodeError(str(e)) from e

        logger.info(f"✅ OpenWeather: ответ получен для {endpoint}")
        return data
