"""Centralized logging — console handler for the CLI and the API.

Call setup_logging() once at startup. Repeated calls only change the
level, so tests and the CLI group can both call it safely.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_HANDLER_NAME = "pim-console"

# Third-party loggers that are chatty at INFO.
_QUIET = ("uvicorn.access", "httpx", "multipart")


def setup_logging(level: str | int = "INFO") -> None:
    root = logging.getLogger("pim")
    root.setLevel(_resolve(level))

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    for name in _QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)


def _resolve(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO
