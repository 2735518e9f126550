"""Shared utilities used by the workspace setup scripts."""

from .argument_parsing import (
    add_config_dir_argument,
    add_log_level_argument,
    add_workspace_argument,
    validate_config_dir,
    validate_workspace_dir,
)
from .file_utils import atomic_write_text, copy_file
from .logging_utils import get_script_logger, set_log_level
from .yaml_utils import load_yaml, load_yaml_mapping

__all__ = [
    "add_config_dir_argument",
    "add_log_level_argument",
    "add_workspace_argument",
    "validate_config_dir",
    "validate_workspace_dir",
    "atomic_write_text",
    "copy_file",
    "get_script_logger",
    "set_log_level",
    "load_yaml",
    "load_yaml_mapping",
]
