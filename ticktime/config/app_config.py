#!filepath: ticktime/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig

ENV_LOG_LEVEL = "TICKTIME_LOG_LEVEL"
ENV_LOG_DIR = "TICKTIME_LOG_DIR"


def project_root() -> str:
    """
    Project root, derived from this file's location:
    ticktime/config/app_config.py → ticktime/config → ticktime → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to ticktime/config/base.yml
        - TICKTIME_LOG_LEVEL / TICKTIME_LOG_DIR override the YAML values
        - does not depend on the current working directory
        """
        # 1) .env at the project root (optional)
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(
                f"Config file must contain a mapping at top level, got {type(raw).__name__}: {path}"
            )

        # 4) env overrides
        log_raw = dict(raw.get("log") or {})
        if os.getenv(ENV_LOG_LEVEL):
            log_raw["level"] = os.getenv(ENV_LOG_LEVEL)
        if os.getenv(ENV_LOG_DIR):
            log_raw["dir"] = os.getenv(ENV_LOG_DIR)
        raw["log"] = log_raw

        return cls(**raw)
