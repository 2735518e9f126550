from __future__ import annotations

"""
@meta
name: workspace_layout
type: utility
domain: config
responsibility:
  - Load the template bundle description from workspace.yaml
  - Resolve template paths against the bundle and target paths against the workspace
  - Provide the built-in default layout when no workspace.yaml exists
inputs:
  - Template bundle directory
  - Workspace root
outputs:
  - WorkspaceLayout dataclass
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from common.shared.yaml_utils import load_yaml_mapping

from .errors import LayoutError

LAYOUT_FILENAME = "workspace.yaml"
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_LAYOUT: Dict[str, Any] = {
    "extensions_file": "extensions.list",
    "editor_dir": ".vscode",
    "settings": {"template": "vscode/settings.json", "target": ".vscode/settings.json"},
    "overwrite": [
        {"template": "vscode/tasks.json", "target": ".vscode/tasks.json"},
        {"template": "vscode/launch.json", "target": ".vscode/launch.json"},
    ],
    "seed": [
        {
            "template": "knowledgeBase.md",
            "target": "knowledgeBase.md",
            "skip_notes": [
                "Consider manually merging content from the knowledgeBase.md template if needed.",
            ],
        },
        {"template": ".editorconfig", "target": ".editorconfig"},
        {
            "template": ".env.example",
            "target": ".env.example",
            "notes": [
                "ACTION REQUIRED: Rename .env.example to .env and add your secrets.",
                "Ensure .env is listed in your project's .gitignore file.",
            ],
        },
    ],
}


@dataclass(frozen=True)
class FileMapping:
    """
    A template file and the workspace path it is applied to.

    ``notes`` are logged after the template is copied; ``skip_notes`` are
    logged when an existing target is kept instead.
    """

    template: Path
    target: Path
    notes: Tuple[str, ...] = ()
    skip_notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WorkspaceLayout:
    """
    Resolved description of what the setup run reads and writes.

    All template paths are absolute paths inside ``template_dir``; all target
    paths are absolute paths inside ``workspace_root``.
    """

    template_dir: Path
    workspace_root: Path
    extensions_file: Path
    editor_dir: Path
    settings: FileMapping
    overwrite_files: Tuple[FileMapping, ...] = field(default_factory=tuple)
    seed_files: Tuple[FileMapping, ...] = field(default_factory=tuple)


def _require_str(raw: Dict[str, Any], key: str, context: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise LayoutError(f"{context}: '{key}' must be a non-empty string")
    return value


def _resolve_inside(base: Path, relative: str, context: str) -> Path:
    """Join ``relative`` onto ``base``, rejecting paths that escape it."""
    candidate = Path(relative)
    if candidate.is_absolute():
        raise LayoutError(f"{context}: path must be relative, got '{relative}'")
    resolved = Path(os.path.normpath(base / candidate))
    try:
        resolved.relative_to(base)
    except ValueError:
        raise LayoutError(f"{context}: path '{relative}' escapes {base}")
    return resolved


def _parse_notes(raw: Dict[str, Any], key: str, context: str) -> Tuple[str, ...]:
    notes = raw.get(key, []) or []
    if not isinstance(notes, list) or not all(isinstance(n, str) for n in notes):
        raise LayoutError(f"{context}: '{key}' must be a list of strings")
    return tuple(notes)


def _parse_mapping(
    raw: Any, template_dir: Path, workspace_root: Path, context: str
) -> FileMapping:
    if not isinstance(raw, dict):
        raise LayoutError(f"{context}: expected a mapping with 'template' and 'target'")
    return FileMapping(
        template=_resolve_inside(
            template_dir, _require_str(raw, "template", context), context
        ),
        target=_resolve_inside(
            workspace_root, _require_str(raw, "target", context), context
        ),
        notes=_parse_notes(raw, "notes", context),
        skip_notes=_parse_notes(raw, "skip_notes", context),
    )


def _parse_mappings(
    raw: Any, template_dir: Path, workspace_root: Path, section: str
) -> Tuple[FileMapping, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise LayoutError(f"'{section}' must be a list of file mappings")
    mappings: List[FileMapping] = []
    for index, entry in enumerate(raw):
        mappings.append(
            _parse_mapping(entry, template_dir, workspace_root, f"{section}[{index}]")
        )
    return tuple(mappings)


def build_workspace_layout(
    raw: Dict[str, Any], template_dir: Path, workspace_root: Path
) -> WorkspaceLayout:
    """
    Build a ``WorkspaceLayout`` from a raw layout mapping.

    Keys missing from ``raw`` fall back to ``DEFAULT_LAYOUT``.

    Args:
        raw: Parsed ``workspace.yaml`` content (may be partial).
        template_dir: Directory holding the templates.
        workspace_root: Workspace being configured.

    Returns:
        A fully-resolved ``WorkspaceLayout``.

    Raises:
        LayoutError: If any entry is malformed.
    """
    merged = {**DEFAULT_LAYOUT, **raw}
    template_dir = Path(template_dir).resolve()
    workspace_root = Path(workspace_root).resolve()

    return WorkspaceLayout(
        template_dir=template_dir,
        workspace_root=workspace_root,
        extensions_file=_resolve_inside(
            template_dir,
            _require_str(merged, "extensions_file", "layout"),
            "extensions_file",
        ),
        editor_dir=_resolve_inside(
            workspace_root, _require_str(merged, "editor_dir", "layout"), "editor_dir"
        ),
        settings=_parse_mapping(merged["settings"], template_dir, workspace_root, "settings"),
        overwrite_files=_parse_mappings(
            merged.get("overwrite"), template_dir, workspace_root, "overwrite"
        ),
        seed_files=_parse_mappings(merged.get("seed"), template_dir, workspace_root, "seed"),
    )


def load_workspace_layout(config_dir: Path, workspace_root: Path) -> WorkspaceLayout:
    """
    Resolve the template bundle at ``config_dir`` into a ``WorkspaceLayout``.

    The bundle may contain a ``workspace.yaml`` describing its files; when it
    does not, the built-in default layout is used.

    Args:
        config_dir: Template bundle directory.
        workspace_root: Workspace being configured.

    Returns:
        The resolved layout.

    Raises:
        LayoutError: If ``workspace.yaml`` cannot be read, parsed, or is malformed.
    """
    layout_path = Path(config_dir) / LAYOUT_FILENAME
    raw: Dict[str, Any] = {}
    if layout_path.exists():
        try:
            raw = load_yaml_mapping(layout_path)
        except OSError as e:
            raise LayoutError(f"Cannot read layout file {layout_path}: {e}") from e
        except (yaml.YAMLError, ValueError) as e:
            raise LayoutError(f"Invalid layout file {layout_path}: {e}") from e
    return build_workspace_layout(raw, Path(config_dir), Path(workspace_root))
