"""
@meta
name: shared_argument_parsing
type: utility
domain: shared
responsibility:
  - Provide shared argument parsing utilities for CLI scripts
  - Add common arguments (config-dir, workspace, log-level)
inputs:
  - ArgumentParser instances
outputs:
  - Configured parsers
tags:
  - utility
  - shared
  - cli
lifecycle:
  status: active
"""

"""Shared argument parsing utilities for CLI scripts."""

import argparse
from pathlib import Path
from typing import Optional

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR"]


def add_config_dir_argument(
    parser: argparse.ArgumentParser,
    default: Optional[Path] = None,
) -> None:
    """Add --config-dir argument to parser (required when no default is given)."""
    parser.add_argument(
        "--config-dir",
        type=str,
        required=default is None,
        default=str(default) if default is not None else None,
        help=(
            "Path to configuration directory"
            + (f" (default: {default})" if default is not None else "")
        ),
    )


def add_workspace_argument(parser: argparse.ArgumentParser) -> None:
    """Add --workspace argument to parser."""
    parser.add_argument(
        "--workspace",
        type=str,
        default=".",
        help="Workspace root to configure (default: current directory)",
    )


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add --log-level argument to parser."""
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=LOG_LEVEL_CHOICES,
        help="Logging level (default: INFO)",
    )


def validate_config_dir(config_dir: str) -> Path:
    """
    Validate and return config directory path.

    Args:
        config_dir: Path to configuration directory.

    Returns:
        Path object for config directory.

    Raises:
        FileNotFoundError: If config directory does not exist.
    """
    config_path = Path(config_dir)
    if not config_path.is_dir():
        raise FileNotFoundError(f"Config directory not found: {config_path}")
    return config_path


def validate_workspace_dir(workspace: str) -> Path:
    """
    Validate and return the resolved workspace root.

    Raises:
        FileNotFoundError: If the workspace directory does not exist.
    """
    workspace_path = Path(workspace).expanduser()
    if not workspace_path.is_dir():
        raise FileNotFoundError(f"Workspace directory not found: {workspace_path}")
    return workspace_path.resolve()
