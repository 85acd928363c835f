#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Centralized logging setup for the md2latex command line entry point."""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

from md2latex.constants import DEFAULT_LOG_LEVEL, LOG_FILE_ENV_VAR, LOG_LEVEL_ENV_VAR


def resolve_log_level(log_level: int | str) -> int:
    """Translate a level name or number into a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(log_level, int):
        return log_level
    resolved = getattr(logging, str(log_level).strip().upper(), None)
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers.

    Log records always go to stderr so that stdout carries nothing but the
    generated LaTeX.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger


def configure_logging_from_env(environ: Mapping[str, str] | None = None) -> logging.Logger:
    """Configure logging from the MD2LATEX_LOG_LEVEL and MD2LATEX_LOG_FILE variables.

    Parameters
    ----------
    environ : Mapping, optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    env = os.environ if environ is None else environ
    level_name = env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    trace_mode = level_name.strip().upper() == "DEBUG"
    return configure_logging(level_name, log_file=env.get(LOG_FILE_ENV_VAR) or None, trace_mode=trace_mode)
