"""
Настройка логирования для ParseKit

Библиотека сама никогда не настраивает логирование при импорте:
setup_logging() вызывается только из CLI или приложением-потребителем.
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger import jsonlogger

from .settings import settings


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Настраивает корневой logger: JSON в production, читаемый формат в development."""
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Очищаем существующие handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)

    if settings.ENVIRONMENT == "production":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            timestamp=True,
        )
    else:
        formatter = logging.Formatter(settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Сторонние библиотеки слишком болтливы на DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("pytesseract").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Получить logger для модуля"""
    return logging.getLogger(name)
