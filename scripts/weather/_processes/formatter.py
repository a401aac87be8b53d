# -*- coding: utf-8 -*-
"""
Форматирование погодного отчёта (текст для терминала).
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from core.models.weather_response import FIELD_UNITS, WeatherReading

logger = logging.getLogger("formatter")

TEMPLATES_DIR = Path(__file__).parent.parent / "_io" / "templates"
WEATHER_TEMPLATE = "current_weather.txt.j2"


def compact_number(value: float) -> str:
    """Короткая запись числа, как у потокового вывода: 1012.0 -> '1012', 15.3 -> '15.3'."""
    return f"{value:g}"


def _build_environment() -> Environment:
    # Вывод в терминал, не HTML: экранирование не нужно
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
    )
    env.filters["compact"] = compact_number
    return env


_env = _build_environment()


def format_weather_report(reading: WeatherReading) -> str:
    """
    Формирует текст отчёта: одна строка на поле, в порядке показаний.

    Args:
        reading (WeatherReading): Показания из data_fetcher

    Returns:
        str: Строки вида "Temperature (Celsius): 15.3"
    """
    template = _env.get_template(WEATHER_TEMPLATE)
    text = template.render(reading=reading, units=FIELD_UNITS).strip()
    logger.debug(f"📝 Отчёт сформирован: {len(reading)} полей")
    return text
