# core/ui/navigation.py
from typing import Iterable

from core.models.location import Location

# Ввод "-1" на любом экране означает "назад в главное меню"
BACK_COMMAND = "-1"
BANNER_WIDTH = 22


def screen_header(title: str) -> str:
    """Заголовок экрана."""
    bar = "=" * BANNER_WIDTH
    return f"{bar} {title} {bar}"


def ask(prompt: str) -> str:
    """Читает одну строку. EOFError пробрасывается: меню его обработает как выход."""
    return input(prompt)


def is_back(choice: str) -> bool:
    """Пользователь хочет вернуться назад."""
    return choice == BACK_COMMAND


def numbered_names(locations: Iterable[Location]) -> str:
    """Нумерованный список названий (с 1)."""
    return "\n".join(f"{i}. {loc.name}" for i, loc in enumerate(locations, 1))
