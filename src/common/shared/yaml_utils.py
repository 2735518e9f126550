from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml(path: Path) -> Any:
    """
    Load a YAML file from disk.

    Args:
        path: Absolute or relative path to a YAML file.

    Returns:
        Parsed YAML content (``None`` for an empty file).

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file cannot be parsed as valid YAML.
    """
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """
    Load a YAML file whose top level must be a mapping.

    An empty file yields an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file cannot be parsed as valid YAML.
        ValueError: If the top-level value is not a mapping.
    """
    data = load_yaml(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a mapping at the top level of {path}, got {type(data).__name__}"
        )
    return data
