# scripts/weather/location_fsm.py
import logging

from app_context import AppContext
from core.models.location import Location
from core.ui.navigation import ask, is_back, numbered_names, screen_header
from core.utils.coordinate_manager import get_city_coordinates
from core.utils.error_handler import (
    CapacityExceededError,
    IndexOutOfBoundsError,
    InvalidInputError,
    WeatherAppError,
    log_exception,
)
from core.utils.validator import normalize


# === ДОБАВЛЕНИЕ ===
def add_favorite(ctx: AppContext):
    """Показывает избранное и предлагает добавить город."""
    store = ctx.favorites
    print(screen_header("Add City"))
    print("Current favorite cities: ")
    if not store.is_empty:
        print(numbered_names(store))

    print("Please type the name of the city you wish to add, or press '-1' to go back to the main screen.")
    city_name = ask("City Name: ")
    if is_back(city_name):
        return

    # Полный список: не тратим запрос к геокодеру
    if store.is_full:
        print("Cannot add city: Favorites list is full.")
        return

    logging.info(f"➕ Добавление в избранное: '{city_name}'")
    try:
        lat, lon = get_city_coordinates(city_name, ctx.client)
        location = Location(name=normalize(city_name), lat=lat, lon=lon)
        store.add(location)
    except CapacityExceededError:
        print("Cannot add city: Favorites list is full.")
        return
    except WeatherAppError as e:
        log_exception(e, "Ошибка добавления в избранное", {"city": city_name})
        print(f"Error adding favorite: {e}")
        return

    print(f"Favorite successfully added: {location.name}")


# === УДАЛЕНИЕ ===
def delete_favorite(ctx: AppContext):
    """Показывает избранное и предлагает удалить город по номеру."""
    store = ctx.favorites
    print(screen_header("Delete City"))
    if store.is_empty:
        print("No favorite cities to delete")
        return

    print("Current favorite cities: ")
    print(numbered_names(store))
    print("Please type the number of the city you wish to delete, or press '-1' to go back to the main screen.")
    choice = ask("City Number: ")
    if is_back(choice):
        return

    try:
        removed = store.delete_at(choice)
    except InvalidInputError:
        print("Invalid input. Please enter a valid number.")
        return
    except IndexOutOfBoundsError:
        print("Number out of bounds. Please try again.")
        return

    logging.info(f"🗑️ Пользователь удалил '{removed.name}'")
    print("City successfully deleted.")
