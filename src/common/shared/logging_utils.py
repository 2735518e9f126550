"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Provide consistent logging utilities across scripts
  - Configure loggers with standardized formatting
inputs:
  - Logger names
outputs:
  - Configured logger instances
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""

"""Shared logging utilities for consistent logging across scripts."""

import logging
from typing import Optional, Union


def get_script_logger(script_name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger for a script with prefix formatting.

    Output looks like ``[workspace-setup] WARNING: message`` so that the
    severity stays visible on a plain terminal.

    Args:
        script_name: Name of the script (e.g., "workspace-setup").
        level: Optional logging level (default: INFO).

    Returns:
        Configured logger instance with script prefix.
    """
    logger = logging.getLogger(f"script.{script_name}")

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            f"[{script_name}] %(levelname)s: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if level is not None:
            logger.setLevel(level)
        elif logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)

    return logger


def set_log_level(level: Union[int, str], *loggers: logging.Logger) -> None:
    """
    Apply a log level to the given loggers.

    Args:
        level: Numeric level or level name such as ``"DEBUG"``.
        loggers: Loggers to update.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    for logger in loggers:
        logger.setLevel(level)
