"""
Logging — единая точка настройки логирования

Стандартный logging: все логгеры проекта живут под корнем "survey",
уровень берётся из переменной окружения SURVEY_LOG_LEVEL.

Логирование никогда не влияет на результат верификации.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from logging import Logger


ROOT_LOGGER_NAME = "survey"


# =============================================================================
# CONFIG
# =============================================================================


def _level_from_env() -> str:
    return os.getenv("SURVEY_LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class LoggerConfig:
    """Конфигурация логирования."""

    level_name: str = field(default_factory=_level_from_env)
    console_format: str = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level(self) -> int:
        level = logging.getLevelName(self.level_name)
        # getLevelName возвращает строку для неизвестных имён
        return level if isinstance(level, int) else logging.INFO


# =============================================================================
# SETUP
# =============================================================================


def configure_logging(config: LoggerConfig | None = None) -> Logger:
    """
    Настройка корневого логгера проекта.

    Повторный вызов не добавляет второй handler: уровень и формат
    новой конфигурации применяются к уже установленному handler.

    Args:
        config: конфигурация (None → LoggerConfig() из окружения)

    Returns:
        Корневой логгер "survey"
    """
    config = config or LoggerConfig()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(config.level)
    formatter = logging.Formatter(config.console_format, config.date_format)

    handler = next((h for h in root.handlers if getattr(h, "_survey_console", False)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler._survey_console = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    handler.setFormatter(formatter)

    return root


def get_logger(name: str) -> Logger:
    """
    Логгер модуля внутри иерархии "survey".

    Args:
        name: обычно __name__ модуля

    Returns:
        logging.Logger с именем "survey.<name>"
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
