#!filepath: ticktime/__init__.py
from loguru import logger

# silent until logs.configure(...) or logger.enable("ticktime")
logger.disable("ticktime")

from .utils.logger import Logging, logs
from .config import AppConfig, LogConfig
from .core import Duration, Stopwatch
from .reflect import type_registry
from .adapters.reflect_adapter import register_core_types

register_core_types(type_registry)

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "AppConfig", "LogConfig",
    "Duration", "Stopwatch",
    "type_registry",
]
