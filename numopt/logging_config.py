"""
logging_config.py

Налаштування логування бібліотеки.

За замовчуванням numopt "мовчить" (на логері numopt висить лише NullHandler).
Мінімізатори пишуть у логери numopt.core.* на рівні DEBUG: кожну ітерацію,
причину зупинки та структурні помилки, які трактуються як вичерпання точності.

Консольний обробник у бібліотеки один: повторний виклик
enable_console_logging (або configure_from_env) замінює попередній.

Приклад:
    import numopt

    numopt.enable_console_logging(level="DEBUG")
    numopt.set_module_level("core.bound_search", "WARNING")

    # або через змінну оточення NUMOPT_LOGGING=DEBUG
    numopt.configure_from_env()
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Literal, Optional, TextIO, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "numopt"
ENV_LOG_LEVEL = "NUMOPT_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


# ---------------------------------------------------------------------------
# Допоміжні функції
# ---------------------------------------------------------------------------

def _resolve_level(level: Union[str, int]) -> int:
    """
    Ім'я рівня (без урахування регістру та пробілів) або int -> int.

    Raises
    ------
    ValueError
        Невідоме ім'я рівня.
    """
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name not in _LEVELS:
        raise ValueError(
            f"Unknown log level '{level}', expected one of: {', '.join(_LEVELS)}"
        )
    return _LEVELS[name]


def _package_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _detach_handlers(logger: logging.Logger) -> None:
    """Зняти й закрити всі обробники логера, окрім NullHandler."""
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()


# ---------------------------------------------------------------------------
# Публічний інтерфейс
# ---------------------------------------------------------------------------

def enable_console_logging(
    level: Union[LogLevel, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.StreamHandler:
    """
    Увімкнути логування в консоль.

    Parameters
    ----------
    level : str | int
        DEBUG, INFO, WARNING, ERROR, CRITICAL або числовий рівень.
    format, date_format : str
        Формат повідомлення та дати для logging.Formatter.
    stream : Optional[TextIO]
        Куди писати; None означає sys.stderr.

    Returns
    -------
    logging.StreamHandler
        Новий обробник; попередні обробники numopt знімаються.
    """
    resolved = _resolve_level(level)

    logger = _package_logger()
    _detach_handlers(logger)
    logger.setLevel(resolved)

    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(format, date_format))
    logger.addHandler(handler)

    return handler


def disable_logging() -> None:
    """Прибрати обробники та повернути бібліотеку в "тихий" режим."""
    logger = _package_logger()
    _detach_handlers(logger)
    logger.setLevel(logging.WARNING)


def set_level(level: Union[LogLevel, int]) -> None:
    """Встановити рівень логера numopt."""
    _package_logger().setLevel(_resolve_level(level))


def set_module_level(module: str, level: Union[LogLevel, int]) -> None:
    """
    Встановити рівень для окремого модуля.

    module – ім'я відносно numopt, наприклад "core.bracket_search".
    """
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_resolve_level(level))


def configure_from_env() -> Optional[logging.StreamHandler]:
    """
    Увімкнути консольне логування, якщо задано NUMOPT_LOGGING.

    Returns
    -------
    Optional[logging.StreamHandler]
        Створений обробник або None, якщо змінна порожня чи не задана.
    """
    level = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if not level:
        return None

    return enable_console_logging(level=level)


__all__ = [
    "LOGGER_NAME",
    "ENV_LOG_LEVEL",
    "enable_console_logging",
    "disable_logging",
    "set_level",
    "set_module_level",
    "configure_from_env",
]
