# core/models/weather_response.py
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

# Показания: подпись поля -> значение. Порядок ключей = порядок извлечения.
WeatherReading = Dict[str, float]


@dataclass(frozen=True)
class WeatherField:
    label: str
    unit: str
    path: Tuple[str, ...]  # путь до значения в JSON ответа
    required: bool = True
    default: Optional[float] = None


WEATHER_FIELDS: List[WeatherField] = [
    WeatherField("Temperature", "Celsius", ("main", "temp")),
    WeatherField("Feels Like", "Celsius", ("main", "feels_like")),
    WeatherField("Pressure", "hPa", ("main", "pressure")),
    WeatherField("Humidity", "%", ("main", "humidity")),
    WeatherField("Min Temperature", "Celsius", ("main", "temp_min")),
    WeatherField("Max Temperature", "Celsius", ("main", "temp_max")),
    WeatherField("Wind Speed", "meters/sec", ("wind", "speed")),
    WeatherField("Cloudiness", "%", ("clouds", "all")),
    WeatherField("Rain", "mm/hr", ("rain", "1h"), required=False, default=0.0),
    WeatherField("Snow", "mm/hr", ("snow", "1h"), required=False, default=0.0),
]

FIELD_LABELS: List[str] = [f.label for f in WEATHER_FIELDS]
FIELD_UNITS: Dict[str, str] = {f.label: f.unit for f in WEATHER_FIELDS}
