from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _parse_level(value: str | int | None) -> int:
    """Map 'debug' / 'INFO' / 10 style values to a logging level, INFO when unrecognized."""

    if isinstance(value, int):
        return value
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | int | None = None, *, force: bool = False) -> logging.Logger:
    """Install a single stream handler on the root logger and return the package logger.

    Intended to be called once by entry points (the CLI). Library code only
    ever uses `logging.getLogger(__name__)`.
    """

    logging.basicConfig(level=_parse_level(level), format=_FORMAT, force=force)

    # httpx logs every request at INFO; keep it quiet unless we are debugging.
    if _parse_level(level) > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger("live_scores")
