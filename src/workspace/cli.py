"""
@meta
name: workspace_cli
type: script
domain: workspace
responsibility:
  - Parse command-line arguments for workspace setup
  - Define CLI interface for the setup entry point
inputs:
  - Command-line arguments
outputs:
  - argparse.Namespace with parsed arguments
tags:
  - cli
  - workspace
lifecycle:
  status: active
"""

"""Command-line argument parsing for the workspace setup script."""

import argparse
from typing import List, Optional

from common.shared.argument_parsing import (
    add_config_dir_argument,
    add_log_level_argument,
    add_workspace_argument,
)

from .extensions import DEFAULT_CODE_COMMAND
from .layout import DEFAULT_TEMPLATE_DIR


def build_setup_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``workspace-setup``."""
    parser = argparse.ArgumentParser(
        prog="workspace-setup",
        description=(
            "Bootstrap a VS Code workspace: install extensions, merge settings, "
            "and copy template configuration files."
        ),
    )
    add_workspace_argument(parser)
    add_config_dir_argument(parser, default=DEFAULT_TEMPLATE_DIR)
    parser.add_argument(
        "--code-command",
        type=str,
        default=DEFAULT_CODE_COMMAND,
        help=f"Editor CLI used to manage extensions (default: {DEFAULT_CODE_COMMAND})",
    )
    parser.add_argument(
        "--skip-extensions",
        action="store_true",
        help="Do not check or install editor extensions",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without installing or writing anything",
    )
    parser.add_argument(
        "--fail-on-extension-error",
        action="store_true",
        help="Exit with a non-zero status if any extension fails to install",
    )
    add_log_level_argument(parser)
    return parser


def parse_setup_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for workspace setup.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    return build_setup_parser().parse_args(argv)
