# -*- coding: utf-8 -*-
"""
Получение текущей погоды через api_client.
"""

import logging
from numbers import Number

from core.models.weather_response import WEATHER_FIELDS, WeatherField, WeatherReading
from core.utils.api_client import OpenWeatherClient
from core.utils.error_handler import (
    EmptyResponseError,
    MissingFieldError,
    ProviderError,
    WeatherAppError,
    log_and_raise,
)

logger = logging.getLogger("data_fetcher")

WEATHER_ENDPOINT = "/data/2.5/weather"
WEATHER_UNITS = "metric"
WEATHER_ERROR_CONTEXT = "Error fetching weather data"


def build_weather_endpoint(lat: str, lon: str) -> str:
    return f"{WEATHER_ENDPOINT}?lat={lat}&lon={lon}&units={WEATHER_UNITS}"


def _is_ok_code(code) -> bool:
    # cod приходит то числом, то строкой ("404")
    return str(code).strip() == "200"


def _extract_field(document: dict, field: WeatherField) -> float:
    section_name, key = field.path
    section = document.get(section_name)

    # Необязательная секция (rain/snow) может отсутствовать целиком
    if section is None and not field.required:
        return field.default

    value = section.get(key) if isinstance(section, dict) else None
    if isinstance(value, bool) or not isinstance(value, Number):
        raise MissingFieldError(
            ".".join(field.path),
            f"API response is missing numeric '{'.'.join(field.path)}' information.",
        )
    return float(value)


def parse_weather_document(document) -> WeatherReading:
    """
    Разбирает JSON ответа /data/2.5/weather в показания.

    Порядок ключей результата совпадает с WEATHER_FIELDS.
    """
    if not document:
        raise EmptyResponseError("API returned empty result.")
    if not isinstance(document, dict):
        raise MissingFieldError("main", "API returned an unexpected weather document.")

    code = document.get("cod")
    if not _is_ok_code(code):
        raise ProviderError(str(document.get("message", "unknown error")), code=code)

    reading: WeatherReading = {}
    for field in WEATHER_FIELDS:
        reading[field.label] = _extract_field(document, field)
    return reading


def fetch_weather_data(lat: str, lon: str, client: OpenWeatherClient) -> WeatherReading:
    """
    Получает текущую погоду для координат.

    Args:
        lat (str): Широта (десятичный текст из геокодера)
        lon (str): Долгота
        client (OpenWeatherClient): Клиент API

    Returns:
        WeatherReading: Показания в порядке WEATHER_FIELDS
    """
    try:
        document = client.fetch(build_weather_endpoint(lat, lon))
        reading = parse_weather_document(document)
        logger.info(f"✅ Данные получены для ({lat}, {lon})")
        return reading
    except WeatherAppError as e:
        log_and_raise(WEATHER_ERROR_CONTEXT, e, {"lat": lat, "lon": lon})
