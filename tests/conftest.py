# -*- coding: utf-8 -*-
"""
Общие заглушки для тестов: ни один тест не ходит в сеть.
"""
import json
from decimal import Decimal

import pytest


class FakeClient:
    """Подменяет OpenWeatherClient: отдаёт заранее заданные ответы по очереди."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def fetch(self, endpoint):
        self.calls.append(endpoint)
        if not self.responses:
            raise AssertionError(f"unexpected request: {endpoint}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeResponse:
    """Минимальный ответ requests: статус и текст тела."""

    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    def json(self, **kwargs):
        return json.loads(self.text, **kwargs)


def make_weather_document(**overrides):
    doc = {
        "cod": 200,
        "name": "London",
        "main": {
            "temp": Decimal("15.3"),
            "feels_like": Decimal("14.1"),
            "pressure": 1012,
            "humidity": 70,
            "temp_min": Decimal("13.0"),
            "temp_max": Decimal("17.0"),
        },
        "wind": {"speed": Decimal("4.1")},
        "clouds": {"all": 80},
    }
    doc.update(overrides)
    return doc


LONDON_READING = {
    "Temperature": 15.3,
    "Feels Like": 14.1,
    "Pressure": 1012,
    "Humidity": 70,
    "Min Temperature": 13.0,
    "Max Temperature": 17.0,
    "Wind Speed": 4.1,
    "Cloudiness": 80,
    "Rain": 0.0,
    "Snow": 0.0,
}


@pytest.fixture
def london_geo():
    return [{"name": "London", "lat": Decimal("51.5072"), "lon": Decimal("-0.1276"), "country": "GB"}]


@pytest.fixture
def london_weather():
    return make_weather_document()


@pytest.fixture
def london_reading():
    return dict(LONDON_READING)


@pytest.fixture
def fake_client():
    """Фабрика FakeClient: fake_client([ответ1, ответ2, ...])."""
    return FakeClient


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def weather_document():
    """Фабрика документа погоды с переопределяемыми секциями."""
    return make_weather_document
