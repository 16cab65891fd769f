"""
Centralized logging configuration.

Sets the root level from settings and quiets the SQL loggers
independently, so statement logging can be switched on without
flooding the rest of the output.

Usage:
    from budget_tracker.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup
"""
import logging
import sys

from ...config import get_settings


# Settings field -> logger names it controls
_CATEGORY_MAP = {
    'log_level_sql': [
        'sqlalchemy.engine',
        'sqlalchemy.pool',
        'aiosqlite',
        'asyncpg',
    ],
}


def setup_logging() -> None:
    """Configure Python logging levels from application settings."""
    settings = get_settings()
    root_level = logging.DEBUG if settings.debug else _parse_level(settings.log_level)

    root = logging.getLogger()
    root.setLevel(root_level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, 'INFO'))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s, sql=%s",
        logging.getLevelName(root_level),
        settings.log_level_sql,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, str(raw).upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
