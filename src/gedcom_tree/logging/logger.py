"""
Centralized logging configuration for gedcom_tree.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Master log file (default: ``logs/gedcom_tree.log``) plus per-module logs.
* Console logging that respects the configured debug flag.
* Optional log rotation controlled by ``config/gedcom_tree.yml``.
* When the log directory cannot be created, only the console handler is used.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcom_tree.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BASE_LOGGER_NAME = "gedcom_tree"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Optional[Path] = None
_master_log_name: str = "gedcom_tree.log"
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Optional[Path]:
    """Resolve and create the log directory from configuration."""
    global _log_dir
    cfg = get_config()

    log_dir_cfg = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(log_dir_cfg)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        _log_dir = None
        return None

    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _master_log_name, _rotate_logs

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _master_log_name = cfg.logging.get("file", "gedcom_tree.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    log_dir = _ensure_log_dir()
    if log_dir is not None:
        base_logger.addHandler(
            _build_file_handler(log_dir / _master_log_name, _effective_level)
        )

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if _log_dir is None:
        return
    filename = f"{module_name.replace('.', '_')}.log"

    handler = _build_file_handler(_log_dir / filename, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Module names are placed under the ``gedcom_tree`` base logger so they
      inherit the console + master log handlers.
    * Each module also gains its own file handler: ``logs/<module>.log``.
    * The debug flag in ``config/gedcom_tree.yml`` forces DEBUG level output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True
    else:
        logger.propagate = False

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
