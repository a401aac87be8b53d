# app_context.py
# -*- coding: utf-8 -*-
"""
Глобальный координатор зависимостей.
Инициализирует все сервисы один раз и предоставляет к ним доступ.
"""

import logging
from pathlib import Path
from typing import Optional

from config.app_config import AppConfig
from config.logging_config import setup_logging
from core.db.favorites_store import FavoritesStore
from core.utils.api_client import OpenWeatherClient

logger = logging.getLogger("app_context")


class AppContext:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(self):
        self._initialized = False
        # Конфигурация
        self.config: Optional[AppConfig] = None
        # Клиент OpenWeather
        self.client: Optional[OpenWeatherClient] = None
        # Избранное (только в памяти)
        self.favorites: Optional[FavoritesStore] = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize_sync(self, config: Optional[AppConfig] = None, log_dir: Optional[Path] = None):
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return

        # 1. Загрузка конфигурации
        self.config = (config or AppConfig.load()).validate()

        # 2. Логирование
        setup_logging(self.config.log_level, log_dir=log_dir)

        # 3. Клиент API и избранное
        self.client = OpenWeatherClient(
            api_key=self.config.openweather_api_key,
            host=self.config.openweather_host,
            timeout=self.config.request_timeout,
        )
        self.favorites = FavoritesStore(capacity=self.config.max_favorites)

        self._initialized = True
        logger.info(f"✅ AppContext: initialized (favorites capacity={self.config.max_favorites})")

    def shutdown_sync(self):
        """Синхронное завершение. Избранное не сохраняется между запусками."""
        if not self._initialized:
            return

        self.client = None
        self.favorites = None
        self._initialized = False
        logger.info("🛑 AppContext: shut down")


# Глобальный экземпляр: им пользуется точка входа app.py
app_context = AppContext()
