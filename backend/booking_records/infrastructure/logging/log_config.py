"""Logging for the client record service and the booking form client.

Each third-party library the service talks through gets its own level
setting, so SQL echo or outbound HTTP traces can be turned up while the
request log stays quiet.
"""

import logging
import sys

from booking_records.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}


def parse_level(raw: str) -> int:
    """Map a level name such as ``"debug"`` to its constant; unknown names give INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def _category_levels(settings: Settings) -> dict[str, int]:
    levels: dict[str, int] = {}
    for field, logger_names in _CATEGORY_MAP.items():
        level = parse_level(getattr(settings, field))
        levels.update(dict.fromkeys(logger_names, level))
    return levels


def _ensure_root_handler(root: logging.Logger) -> None:
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the configured root and per-library log levels."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    # Under uvicorn a handler already exists; bare scripts and tests get stderr
    _ensure_root_handler(root)

    for name, level in _category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s http=%s uvicorn=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_http,
        settings.log_level_uvicorn,
    )
