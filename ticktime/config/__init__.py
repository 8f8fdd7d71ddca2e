from .log_config import LogConfig
from .app_config import AppConfig

__all__ = ["LogConfig", "AppConfig"]
