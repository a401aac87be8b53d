# app.py
# -*- coding: utf-8 -*-
"""
Точка входа: главное меню терминального приложения погоды.
"""
import logging
import time
from typing import Callable, Dict

from app_context import AppContext, app_context
from core.ui.navigation import ask, screen_header
from core.utils.error_handler import ConfigError
from scripts.weather.location_fsm import add_favorite, delete_favorite
from scripts.weather.weather_handler import city_search, display_favorites

EXIT_CHOICE = "5"

# === Действия меню ===
MENU_ACTIONS: Dict[str, Callable[[AppContext], None]] = {
    "1": city_search,
    "2": add_favorite,
    "3": delete_favorite,
    "4": display_favorites,
}


def main_screen(ctx: AppContext) -> bool:
    """Главное меню. Возвращает True, если пользователь выбрал выход."""
    print(screen_header("Main Screen"))
    print("Hello, welcome to my application.\n")
    print("Please enter a number corresponding to an action below.")
    print("1. Search for a city's weather.")
    print("2. Add to your favorite cities.")
    print("3. Delete from your favorite cities.")
    print("4. View weather of your favorite cities.")
    print("5. Exit program.")

    choice = ask("Enter '1', '2', '3', '4', or '5': ")
    if choice == EXIT_CHOICE:
        return True

    action = MENU_ACTIONS.get(choice)
    if action is None:
        print("Invalid choice, please try again.")
        return False

    logging.info(f"📋 Выбран пункт меню {choice}: {action.__name__}")
    action(ctx)
    return False


def run(ctx: AppContext, sleep: Callable[[float], None] = time.sleep):
    """Цикл меню до выхода или конца ввода."""
    exit_flag = False
    while not exit_flag:
        try:
            exit_flag = main_screen(ctx)
        except (EOFError, KeyboardInterrupt):
            print()
            logging.info("🛑 Ввод закрыт, выходим")
            break
        # пауза, чтобы пользователь успел увидеть результат
        if not exit_flag:
            sleep(ctx.config.menu_pause_sec)
    print("Exiting program.")


# === Основная функция запуска ===
def main():
    # Инициализация
    try:
        app_context.initialize_sync()
    except ConfigError as e:
        logging.critical(f"❌ {e}")
        raise

    logging.info("🚀 Запуск приложения")
    try:
        run(app_context)
    finally:
        app_context.shutdown_sync()


if __name__ == "__main__":
    main()
