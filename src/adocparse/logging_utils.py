"""Centralized logging utilities for adocparse entry points."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from adocparse.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX

PACKAGE_LOGGER_NAME = "adocparse"


def resolve_log_level(log_level: int | str | None) -> int:
    """Turn a level name, number or None into a numeric logging level.

    None falls back to the ``ADOCPARSE_LOG_LEVEL`` environment variable and
    then to ``DEFAULT_LOG_LEVEL``. Unknown names resolve to INFO.
    """
    if log_level is None:
        log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL)
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str | None = None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Only the ``adocparse`` logger is touched, so embedding applications keep
    control of the root logger.

    Parameters
    ----------
    log_level : int | str | None, default None
        Numeric logging level or string name (e.g., "INFO"); see
        ``resolve_log_level`` for the fallback.
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    resolved_level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
