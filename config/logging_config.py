# config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOGS_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-18s | %(funcName)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Библиотеки, чьи DEBUG-логи засоряют файл
NOISY_LOGGERS = ("urllib3",)


def _file_handler(log_file: Path, formatter: logging.Formatter) -> logging.Handler:
    # delay=True: файл создаётся при первой записи
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
        delay=True,
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def _console_handler(formatter: logging.Formatter) -> logging.Handler:
    # Консоль занята меню: сюда только критические ошибки
    handler = logging.StreamHandler()
    handler.setLevel(logging.CRITICAL)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """
    Настраивает глобальное логирование с ротацией.

    Обработчики вешаются на root-логгер только один раз;
    повторный вызов меняет лишь уровень.

    Returns:
        Path: Путь к файлу лога
    """
    log_dir = Path(log_dir) if log_dir else LOGS_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
        root.addHandler(_file_handler(log_file, formatter))
        root.addHandler(_console_handler(formatter))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(f"🔧 Логирование инициализировано: {log_file}")
    return log_file
