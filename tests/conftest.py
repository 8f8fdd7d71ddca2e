# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    logger.enable("ticktime")
    yield
    logger.disable("ticktime")


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("TICKTIME_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TICKTIME_LOG_DIR", raising=False)
    return monkeypatch
