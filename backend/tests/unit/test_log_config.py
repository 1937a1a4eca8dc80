"""Unit tests for logging configuration."""

import logging

from booking_records.config import Settings, get_settings
from booking_records.infrastructure.logging.log_config import parse_level, setup_logging


def test_parse_level_known_and_unknown():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("WARNING") == logging.WARNING
    assert parse_level("not-a-level") == logging.INFO


def test_setup_logging_applies_category_levels():
    settings = get_settings()
    setup_logging()

    assert logging.getLogger("sqlalchemy.engine").level == parse_level(settings.log_level_sql)
    assert logging.getLogger("httpx").level == parse_level(settings.log_level_http)
    assert logging.getLogger("uvicorn.access").level == parse_level(settings.log_level_uvicorn)
    assert logging.getLogger().handlers


def test_setup_logging_accepts_explicit_settings():
    settings = Settings(log_level_sql="ERROR", log_level_http="debug", log_level="bogus")
    setup_logging(settings)

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("aiosqlite").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.DEBUG
