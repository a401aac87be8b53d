# -*- coding: utf-8 -*-
"""
Утилита для централизованной обработки ошибок.

Иерархия исключений приложения и помощники для логирования.
Каждый слой ловит ошибки нижнего слоя и пробрасывает их дальше,
добавляя контекст к сообщению (тип и атрибуты исключения сохраняются).
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class WeatherAppError(Exception):
    """Базовая ошибка приложения. Сообщение можно дополнять контекстом."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def with_context(self, context: str) -> "WeatherAppError":
        """Добавляет контекст в начало сообщения и возвращает то же исключение."""
        self.message = f"{context}: {self.message}" if self.message else context
        self.args = (self.message,)
        return self

    def __str__(self) -> str:
        return self.message


class ConfigError(WeatherAppError):
    """Некорректная или неполная конфигурация."""


# === ШЛЮЗ API ===
class GatewayError(WeatherAppError):
    """Ошибки HTTP-уровня при обращении к OpenWeather."""


class TransportError(GatewayError):
    pass


class HttpStatusError(GatewayError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"GET request status: {status_code}")
        self.status_code = status_code


class DecodeError(GatewayError):
    def __init__(self, parser_message: str):
        super().__init__(f"Failed to parse response body to JSON: {parser_message}")
        self.parser_message = parser_message


# === ГЕОКОДИРОВАНИЕ И ПОГОДА ===
class NoResultError(WeatherAppError):
    pass


class MissingFieldError(WeatherAppError):
    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"API response is missing '{field}' information.")
        self.field = field


class EmptyResponseError(WeatherAppError):
    pass


class ProviderError(WeatherAppError):
    def __init__(self, provider_message: str, code=None):
        super().__init__(f"API returned error: {provider_message}")
        self.provider_message = provider_message
        self.code = code


# === ИЗБРАННОЕ ===
class FavoritesError(WeatherAppError):
    pass


class CapacityExceededError(FavoritesError):
    def __init__(self, capacity: int):
        super().__init__("Favorites list is full.")
        self.capacity = capacity


class IndexOutOfBoundsError(FavoritesError):
    def __init__(self, position: int, size: int):
        super().__init__(f"Number out of bounds: {position} (list has {size})")
        self.position = position
        self.size = size


class InvalidInputError(FavoritesError):
    def __init__(self, raw: str):
        super().__init__(f"Invalid input {raw!r}: expected a positive whole number.")
        self.raw = raw


def log_and_raise(message: str, exception: WeatherAppError, context: Optional[dict] = None):
    """
    Логирует ошибку и выбрасывает её дальше, дополнив сообщение контекстом.

    Args:
        message (str): Контекст, который будет добавлен в начало сообщения
        exception (WeatherAppError): Исключение, которое обрабатывается
        context (dict): Дополнительный контекст для лога (например, city, lat, lon)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}")
    raise exception.with_context(message)


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Просто логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (действие меню и т.п.)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=exception)
