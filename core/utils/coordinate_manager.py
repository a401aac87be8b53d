# -*- coding: utf-8 -*-
"""
Менеджер координат и геокодирования.

Функции:
- Получение координат города по названию (OpenWeather direct geocoding)
- Перевод координат в точный десятичный текст
- Обработка ошибок API с добавлением контекста

Использование:
>>> from core.utils.coordinate_manager import get_city_coordinates
>>> get_city_coordinates("London", client)
('51.5072', '-0.1276')
"""

import logging
from decimal import Decimal
from numbers import Number
from typing import Tuple

from core.utils.api_client import OpenWeatherClient
from core.utils.error_handler import (
    MissingFieldError,
    NoResultError,
    WeatherAppError,
    log_and_raise,
)
from core.utils.validator import sanitize_and_encode

logger = logging.getLogger("coordinate_manager")

# === КОНФИГУРАЦИЯ ===
GEO_ENDPOINT = "/geo/1.0/direct"
GEO_RESULT_LIMIT = 1
GEO_ERROR_CONTEXT = "Error fetching geocoding data"


def format_coordinate(value) -> str:
    """
    Переводит число из ответа API в каноничный десятичный текст.

    Decimal уже хранит точное значение из JSON; int и float приводятся
    через repr, чтобы не получить хвост двоичного округления.

    >>> format_coordinate(Decimal("51.5072"))
    '51.5072'
    >>> format_coordinate(-0.1276)
    '-0.1276'
    """
    if isinstance(value, bool) or not isinstance(value, Number):
        raise TypeError(f"coordinate must be a number, got {type(value).__name__}")
    if not isinstance(value, Decimal):
        value = Decimal(repr(value))
    return format(value, "f")


def build_geocoding_endpoint(city_name: str) -> str:
    return f"{GEO_ENDPOINT}?q={sanitize_and_encode(city_name)}&limit={GEO_RESULT_LIMIT}"


def get_city_coordinates(city_name: str, client: OpenWeatherClient) -> Tuple[str, str]:
    """
    Возвращает (lat, lon) лучшего совпадения для названия города.

    Args:
        city_name (str): Название города в свободной форме
        client (OpenWeatherClient): Клиент API

    Returns:
        Tuple[str, str]: Широта и долгота десятичным текстом

    Raises:
        NoResultError: геокодер ничего не нашёл
        MissingFieldError: в первом результате нет lat или lon
        GatewayError: ошибка транспорта, статуса или разбора JSON
    """
    try:
        results = client.fetch(build_geocoding_endpoint(city_name))

        # Если API ничего не нашёл
        if not isinstance(results, list) or not results:
            raise NoResultError("API returned empty result.")

        best = results[0]
        if not isinstance(best, dict) or "lat" not in best or "lon" not in best:
            raise MissingFieldError("lat/lon", "API missing lat or lon information.")

        try:
            lat = format_coordinate(best["lat"])
            lon = format_coordinate(best["lon"])
        except TypeError as e:
            raise MissingFieldError("lat/lon", f"API returned non-numeric coordinates: {e}") from e

        logger.info(f"🌍 Координаты для '{city_name}': ({lat}, {lon})")
        return lat, lon

    except WeatherAppError as e:
        log_and_raise(GEO_ERROR_CONTEXT, e, {"city": city_name})
