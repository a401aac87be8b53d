# -*- coding: utf-8 -*-
"""
Тесты для scripts/weather/_processes/formatter.py
"""
from scripts.weather._processes.formatter import compact_number, format_weather_report


def test_compact_number():
    assert compact_number(1012.0) == "1012"
    assert compact_number(15.3) == "15.3"
    assert compact_number(0.0) == "0"
    assert compact_number(-2.5) == "-2.5"


def test_report_lines_follow_reading_order(london_reading):
    lines = format_weather_report(london_reading).splitlines()

    assert lines == [
        "Temperature (Celsius): 15.3",
        "Feels Like (Celsius): 14.1",
        "Pressure (hPa): 1012",
        "Humidity (%): 70",
        "Min Temperature (Celsius): 13",
        "Max Temperature (Celsius): 17",
        "Wind Speed (meters/sec): 4.1",
        "Cloudiness (%): 80",
        "Rain (mm/hr): 0",
        "Snow (mm/hr): 0",
    ]
    print("✅ test_report_lines_follow_reading_order passed")


def test_report_is_not_html_escaped():
    text = format_weather_report({"Humidity": 55.0})
    assert text == "Humidity (%): 55"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
