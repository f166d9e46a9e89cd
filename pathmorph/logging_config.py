"""Log output for applications embedding pathmorph.

Library modules only create ``logging.getLogger(__name__)`` loggers under
the ``pathmorph`` namespace and never touch handlers. An application that
wants pathmorph's records formatted calls ``configure_logging``, which
installs handlers on the ``pathmorph`` logger alone; the root logger and
any handlers the host set up are left as they are.

JSON records carry a category derived from the module that logged them
(parse, serialize, solver, interpolation) and collect anything passed via
``extra=`` under ``"extra"``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

PACKAGE_LOGGER = "pathmorph"

# Attributes every LogRecord has; anything else came in through ``extra=``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

# Marks handlers installed by configure_logging
_OWNED = "_pathmorph_owned"


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    CATEGORIES = {
        "pathmorph.normalizer": "parse",
        "pathmorph.serializer": "serialize",
        "pathmorph.solver": "solver",
        "pathmorph.interpolation": "interpolation",
    }

    def category(self, logger_name: str) -> str:
        for prefix, category in self.CATEGORIES.items():
            if logger_name == prefix or logger_name.startswith(prefix + "."):
                return category
        return "system"

    def format(self, record: logging.LogRecord) -> str:
        log_record: dict = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "category": self.category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {}
        for key, value in vars(record).items():
            if key in _RECORD_ATTRIBUTES or key.startswith("_"):
                continue
            try:
                json.dumps(value)
            except (TypeError, ValueError):
                value = str(value)
            extra[key] = value
        if extra:
            log_record["extra"] = extra

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def configure_logging(
    *,
    json_format: bool = True,
    log_level: int = logging.INFO,
    log_file: str | None = None,
    stream: TextIO | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Send pathmorph's log records to a stream and, optionally, a file.

    Calling it again replaces the handlers a previous call installed.

    Args:
        json_format: One JSON object per line (True) or plain text (False)
        log_level: Minimum level for pathmorph records
        log_file: Rotating log file to write as well (None for stream only)
        stream: Stream to write to (default: sys.stderr)
        propagate: Also pass records on to the host's root logger

    Returns:
        The configured ``pathmorph`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = propagate

    for handler in logger.handlers[:]:
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)5s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=3,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        setattr(handler, _OWNED, True)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
