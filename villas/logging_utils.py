"""Logging for the villas command line and scripts.

Two layers share one level setting (``VILLAS_LOG_LEVEL``):

* ``log`` / ``get_logger``: one-line event records for command outcomes
  (``check_room``, ``place``, ``fuzz``), as ``key=value`` pairs or, with
  ``VILLAS_LOG_JSON``, JSON objects. Info and debug records go to stdout,
  warn and error records to stderr.
* ``configure_logging``: attaches console and rotating-file handlers to the
  ``villas`` stdlib logger, which carries the library's debug lines for
  rejected placements and rejected rooms.

    from villas.logging_utils import log
    log.info(event="fuzz", seed=42, mismatches=0)

None-valued fields are dropped; ``level`` and ``ts`` are always set.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from logging.handlers import RotatingFileHandler

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_STDLIB_LEVELS = {"debug": logging.DEBUG, "info": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}
CURRENT_LEVEL = LEVELS.get(os.getenv("VILLAS_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("VILLAS_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "villas"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        stream = sys.stderr if LEVELS[lvl] >= LEVELS["warn"] else sys.stdout
        print(_format(lvl, **fields), file=stream)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


def configure(level: str | None = None, json_mode: bool | None = None) -> None:
    """Adjust the structured logger threshold / output mode at runtime."""
    global CURRENT_LEVEL, JSON_MODE
    if level is not None:
        CURRENT_LEVEL = LEVELS[level]
    if json_mode is not None:
        JSON_MODE = json_mode


def configure_logging(config) -> logging.Logger:
    """Configure the ``villas`` stdlib logger from a VillasConfig.

    Always attaches a console handler (stderr); adds a rotating file handler
    when ``config.log_file`` is set. Safe to call repeatedly: handlers
    installed by a previous call are replaced, not stacked.
    """
    configure(level=config.log_level, json_mode=config.log_json)
    pkg_logger = logging.getLogger("villas")
    pkg_logger.setLevel(_STDLIB_LEVELS[config.log_level])

    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_villas_managed", False):
            pkg_logger.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler()
    console.setLevel(_STDLIB_LEVELS[config.log_level])
    console.setFormatter(logging.Formatter(_FORMAT))
    console._villas_managed = True
    pkg_logger.addHandler(console)

    if config.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(config.log_file, maxBytes=1_000_000, backupCount=3)
        file_handler.setLevel(_STDLIB_LEVELS[config.log_level])
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        file_handler._villas_managed = True
        pkg_logger.addHandler(file_handler)
    return pkg_logger


log = get_logger("villas")
