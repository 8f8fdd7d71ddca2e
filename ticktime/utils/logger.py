#!filepath: ticktime/utils/logger.py
import os
import sys
from loguru import logger
from typing import Optional

from ticktime.config.log_config import LogConfig


class Logging:
    """
    Thin wrapper over the global loguru logger.
    ---------------------------------------
    - stderr sink at the configured level
    - optional dated file sink with rotation / retention
    - importing the package never touches the filesystem
    - ticktime records stay silent until configure() is called
    ---------------------------------------
    """

    FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

    def __init__(self):
        self.log_dir: Optional[str] = None
        self.level = "INFO"
        self.configured = False

    @classmethod
    def from_config(cls, cfg: LogConfig) -> "Logging":
        inst = cls()
        inst.configure(
            log_dir=cfg.dir,
            rotation=cfg.rotation,
            retention=cfg.retention,
            level=cfg.level,
        )
        return inst

    def configure(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        level: str = "INFO",
    ) -> None:
        """
        Replace all loguru sinks.
        """
        self.log_dir = log_dir
        self.level = level

        logger.remove()
        logger.enable("ticktime")
        logger.add(sys.stderr, level=level, format=self.FORMAT)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            logger.add(
                sink=f"{log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=rotation,
                retention=retention,
                level=level,
                format=self.FORMAT,
                enqueue=True,
                backtrace=True,
                diagnose=True,
            )

        self.configured = True
        logger.info("-----------Logger initialized (level={})-----------", level)

    # ---------- forwarding ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).exception(msg, *args, **kwargs)


# default global logs (reconfigure with logs.configure(...))
logs = Logging()
