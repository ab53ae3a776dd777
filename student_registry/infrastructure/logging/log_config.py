"""Logging setup for the registry.

Levels come from Settings: one for the root logger and one per category
listed in ``_CATEGORY_MAP``.
"""

import logging
import sys

from student_registry.config import get_settings

# Settings field → loggers whose level it controls.
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_storage": [
        "student_registry.application.services.student_store",
        "student_registry.infrastructure.storage",
    ],
    "log_level_records": [
        "student_registry.application.services.record_controller",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}

_FORMAT = "%(levelname)-8s %(name)s — %(message)s"


def setup_logging() -> None:
    """Apply log levels from settings. Called from the app lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    levels = {
        field: _parse_level(getattr(settings, field, "INFO")) for field in _CATEGORY_MAP
    }
    for field, names in _CATEGORY_MAP.items():
        for name in names:
            logging.getLogger(name).setLevel(levels[field])

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field}={logging.getLevelName(level)}" for field, level in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
