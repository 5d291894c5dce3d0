"""Logging configuration helpers (human + JSON + file).

This module centralizes lightweight logging setup for the CLI:
 - Plain human-readable logs to stderr
 - Optional JSON logs to stdout (for piping/collection)
 - Optional file logs

Configuration is idempotent: handlers installed by a previous call are
removed and closed before new ones are attached, which keeps repeated calls
(common in tests) from duplicating output.
"""

from __future__ import annotations
import json
import logging
import sys
from typing import Optional

_STRUCTURED_FIELDS = (
    "event",
    "mode",
    "tap",
    "identifier",
    "path",
    "count",
    "skipped",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """Minimal JSON formatter for structured log collection.

    Emits an object with ``level`` and ``message`` plus any structured fields
    passed through ``log_event``.
    """

    def format(self, record):
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for k in _STRUCTURED_FIELDS:
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        return json.dumps(payload)


def configure_logging(
    verbose: bool,
    debug: bool = False,
    log_file: Optional[str] = None,
    log_json: bool = False,
) -> None:
    """Configure the root logger according to CLI flags.

    Parameters
    - ``verbose``: raise the level to ``INFO``.
    - ``debug``: raise the level to ``DEBUG`` (takes precedence).
    - ``log_file``: optional path to tee logs to a file (plain text format).
    - ``log_json``: also emit JSON lines to stdout.

    Without either flag the level is ``WARNING``.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            logger.removeHandler(h)
            h.close()

    fmt = "%(levelname)s: %(message)s"
    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(fmt))
    setattr(stream, "_added_by_configure_logging", True)
    logger.addHandler(stream)

    if log_json:
        json_handler = logging.StreamHandler(sys.stdout)
        json_handler.setFormatter(JSONFormatter())
        setattr(json_handler, "_added_by_configure_logging", True)
        logger.addHandler(json_handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(logging.Formatter(fmt))
        setattr(fh, "_added_by_configure_logging", True)
        logger.addHandler(fh)

    for handler in logger.handlers:
        handler.setLevel(level)


def log_event(
    event: str, level: int = logging.INFO, message: Optional[str] = None, **fields
) -> None:
    """Emit a structured event log at the given level.

    ``message`` defaults to the event name. The function never raises.
    """
    try:
        logging.getLogger("livecheck").log(
            level, message or event, extra={"event": event, **fields}
        )
    except Exception:
        # Never let logging break CLI flow
        pass


__all__ = ["JSONFormatter", "configure_logging", "log_event"]
