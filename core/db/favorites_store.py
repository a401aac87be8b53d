# -*- coding: utf-8 -*-
"""
Хранилище избранных городов.
Живёт только в памяти процесса: после выхода список пропадает.
"""

import logging
from typing import List

from config.app_config import MAX_FAVORITES
from core.models.location import Location
from core.utils.error_handler import (
    CapacityExceededError,
    IndexOutOfBoundsError,
    InvalidInputError,
)
from core.utils.validator import is_numeric

logger = logging.getLogger("favorites_store")


class FavoritesStore:
    """
    Упорядоченный список локаций с ограниченной ёмкостью.
    Позиции для пользователя считаются с 1.
    """

    def __init__(self, capacity: int = MAX_FAVORITES):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._locations: List[Location] = []

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self):
        return iter(self._locations)

    @property
    def is_full(self) -> bool:
        return len(self._locations) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._locations

    def add(self, location: Location) -> None:
        """Добавляет локацию в конец. При заполненном списке ничего не меняет."""
        if self.is_full:
            logger.warning(f"⚠️ Избранное заполнено ({self.capacity}), '{location.name}' не добавлен")
            raise CapacityExceededError(self.capacity)
        self._locations.append(location)
        logger.info(f"📌 Добавлен в избранное: {location.name} ({location.lat}, {location.lon})")

    def delete_at(self, position_text: str) -> Location:
        """
        Удаляет локацию по номеру (с 1), введённому пользователем.

        Returns:
            Location: Удалённая локация

        Raises:
            InvalidInputError: номер не состоит только из цифр
            IndexOutOfBoundsError: номер вне диапазона [1, size]
        """
        position_text = str(position_text)
        if not is_numeric(position_text):
            raise InvalidInputError(position_text)

        position = int(position_text)
        if not 1 <= position <= len(self._locations):
            raise IndexOutOfBoundsError(position, len(self._locations))

        removed = self._locations.pop(position - 1)
        logger.info(f"🗑️ Удалён из избранного: {removed.name}")
        return removed

    def list(self) -> List[Location]:
        """Текущие локации в порядке добавления."""
        return list(self._locations)
