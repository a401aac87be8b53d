# scripts/weather/weather_handler.py
import logging

from app_context import AppContext
from core.ui.navigation import ask, is_back, screen_header
from core.utils.coordinate_manager import get_city_coordinates
from core.utils.error_handler import WeatherAppError, log_exception
from scripts.weather._processes.data_fetcher import fetch_weather_data
from scripts.weather._processes.formatter import format_weather_report

logger = logging.getLogger("weather_handler")


def city_search(ctx: AppContext):
    """Поиск погоды по названию города."""
    print(screen_header("City Search"))
    print("Enter the name of the city or '-1' to go back to the main screen.")
    city_name = ask("City Name: ")
    if is_back(city_name):
        return

    logger.info(f"🔍 Поиск погоды: '{city_name}'")
    try:
        lat, lon = get_city_coordinates(city_name, ctx.client)
        reading = fetch_weather_data(lat, lon, ctx.client)
    except WeatherAppError as e:
        log_exception(e, "Ошибка поиска погоды", {"city": city_name})
        print(f"Error: {e}")
        return

    print(f"Weather Data for {city_name}:")
    print(format_weather_report(reading))
    print()


def display_favorites(ctx: AppContext):
    """Погода для всех избранных городов. Ошибка по одному городу не прерывает остальные."""
    print(screen_header("Favorite Cities"))
    favorites = ctx.favorites.list()
    if not favorites:
        print("No favorite cities to display.")
        return

    for favorite in favorites:
        print(f"City Name: {favorite.name}")
        try:
            reading = fetch_weather_data(favorite.lat, favorite.lon, ctx.client)
        except WeatherAppError as e:
            log_exception(e, "Ошибка погоды для избранного", {"city": favorite.name})
            print(f"Error: {e}")
            continue
        print(format_weather_report(reading))
        print()
