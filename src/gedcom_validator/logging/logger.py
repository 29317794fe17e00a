"""
Project-wide logging setup.

Every module asks ``get_logger`` for a child of the ``gedcom_validator``
logger. The base logger is configured once from the ``logging`` section of
``config/gedcom_validator.yml``:

* ``level``     threshold for the base logger (``debug: true`` forces DEBUG)
* ``to_file``   write ``<dir>/<file>`` plus one ``<dir>/<module>.log`` per module
* ``rotate``    use size-based rotation for those files

The console handler stays at WARNING unless debugging, since validation
output is printed by the CLI itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcom_validator.config import get_config

BASE_LOGGER_NAME = "gedcom_validator"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_loggers: Dict[str, Logger] = {}


@dataclass(frozen=True)
class _LogSettings:
    level: int
    debug: bool
    to_file: bool
    rotate: bool
    log_dir: Path
    master_file: str


_settings: Optional[_LogSettings] = None


def _read_settings() -> _LogSettings:
    cfg = get_config()
    section = cfg.logging
    debug = bool(cfg.debug)

    level_name = str(section.get("level", "INFO")).upper()
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)

    log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    return _LogSettings(
        level=level,
        debug=debug,
        to_file=bool(section.get("to_file", False)),
        rotate=bool(section.get("rotate", False)),
        log_dir=log_dir,
        master_file=section.get("file", "gedcom_validator.log"),
    )


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: _LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _base_logger() -> Logger:
    """Return the shared base logger, configuring it on first use."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    _settings = _read_settings()
    base.setLevel(_settings.level)
    base.propagate = False

    if _settings.to_file:
        base.addHandler(_file_handler(_settings, _settings.master_file))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if _settings.debug else logging.WARNING)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _loggers[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: str | None = None) -> Logger:
    """
    Return ``gedcom_validator.<name>`` (or the base logger for no name).

    Child loggers propagate to the base handlers; with file logging enabled
    each one also gets its own ``<module>.log`` the first time it is asked for.
    """
    base = _base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base

    full_name = name if name.startswith(BASE_LOGGER_NAME + ".") else f"{BASE_LOGGER_NAME}.{name}"
    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)
    logger.setLevel(_settings.level)
    logger.propagate = True
    if _settings.to_file:
        logger.addHandler(_file_handler(_settings, full_name.replace(".", "_") + ".log"))

    _loggers[full_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out so far; handy when debugging handler setup in tests."""
    return list(_loggers)
