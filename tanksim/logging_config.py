from __future__ import annotations

import logging
from logging.config import dictConfig

LOG_FORMAT = "%(levelprefix)s %(message)s"
PACKAGE_LOGGER = "tanksim"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(
    level: str = "INFO",
    *,
    package_level: str | None = None,
    use_colors: bool | None = None,
) -> None:
    """Send log records to stderr in uvicorn's style, keeping stdout for the step table.

    ``level`` applies to the root logger. ``package_level`` sets the ``tanksim``
    loggers on their own, so the simulation can log at DEBUG while third-party
    libraries stay quieter.
    """

    formatter: dict[str, object] = {
        "()": "uvicorn.logging.DefaultFormatter",
        "fmt": LOG_FORMAT,
    }
    if use_colors is not None:
        formatter["use_colors"] = use_colors

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"uvicorn": formatter},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "uvicorn",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                PACKAGE_LOGGER: {"level": _level(package_level or level)},
            },
            "root": {
                "handlers": ["stderr"],
                "level": _level(level),
            },
        }
    )
