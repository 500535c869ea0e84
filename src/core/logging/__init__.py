"""Logging subsystem."""

from .logger import ROOT_LOGGER_NAME, LoggerConfig, configure_logging, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "LoggerConfig",
    "configure_logging",
    "get_logger",
]
