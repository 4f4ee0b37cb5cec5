"""
Logging setup для hullkit.

Библиотека только пишет записи в логгеры вида "hullkit.<module>" и не
настраивает обработчики при импорте (на логгер пакета повешен NullHandler).
Приложение может включить вывод через setup_logging():
- уровень из аргумента или переменной окружения HULLKIT_LOG_LEVEL
- формат "default" или "json" из HULLKIT_LOG_FORMAT
"""

import logging
import os
import sys
from typing import Final, Optional

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

LOG_LEVEL_ENV: Final[str] = "HULLKIT_LOG_LEVEL"
LOG_FORMAT_ENV: Final[str] = "HULLKIT_LOG_FORMAT"

ROOT_LOGGER_NAME: Final[str] = "hullkit"

DEFAULT_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT: Final[str] = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)


def get_log_level() -> int:
    """Уровень логирования из HULLKIT_LOG_LEVEL (default: WARNING)"""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def get_log_format() -> str:
    """Формат записей из HULLKIT_LOG_FORMAT ("default" или "json")"""
    if os.environ.get(LOG_FORMAT_ENV, "default").lower() == "json":
        return JSON_FORMAT
    return DEFAULT_FORMAT


# =============================================================================
# SETUP
# =============================================================================

_handler: Optional[logging.Handler] = None


def setup_logging(
    level: Optional[int] = None,
    format_str: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Подключение вывода логов hullkit в stderr.

    Args:
        level: Уровень (default: из окружения или WARNING)
        format_str: Формат записей (default: из окружения)
        force: Переустановить обработчик, если он уже подключён

    Returns:
        Логгер пакета "hullkit"
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        if not force:
            return root
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(format_str or get_log_format()))
    root.addHandler(_handler)
    root.setLevel(level if level is not None else get_log_level())
    return root

