"""Shared pytest fixtures for all tests."""

import json
import logging
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

import pytest

from workspace.extensions import ExtensionInstaller, InstallResult, InstallStatus
from workspace.layout import load_workspace_layout

TEMPLATE_SETTINGS = {
    "editor.formatOnSave": True,
    "editor.tabSize": 4,
    "files.exclude": {"**/__pycache__": True},
}


class FakeInstaller(ExtensionInstaller):
    """In-memory ExtensionInstaller test double."""

    def __init__(self, installed: Iterable[str] = (), failing: Iterable[str] = ()):
        self.installed: Set[str] = {e.lower() for e in installed}
        self.failing: Set[str] = {e.lower() for e in failing}
        self.install_calls: List[str] = []

    def is_installed(self, extension_id: str) -> bool:
        return extension_id.lower() in self.installed

    def install(self, extension_id: str) -> InstallResult:
        self.install_calls.append(extension_id)
        if extension_id.lower() in self.failing:
            return InstallResult(extension_id, InstallStatus.FAILED, reason="not found")
        self.installed.add(extension_id.lower())
        return InstallResult(extension_id, InstallStatus.INSTALLED)


def write_bundle(
    root: Path,
    settings: Optional[Dict] = None,
    extensions: str = "ms-python.python\n# comment\n\neditorconfig.editorconfig\n",
    with_layout_file: bool = True,
) -> Path:
    """Create a template bundle under ``root`` and return its path."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "vscode").mkdir(exist_ok=True)
    (root / "vscode" / "settings.json").write_text(
        json.dumps(TEMPLATE_SETTINGS if settings is None else settings, indent=2) + "\n"
    )
    (root / "vscode" / "tasks.json").write_text('{"version": "2.0.0", "tasks": []}\n')
    (root / "vscode" / "launch.json").write_text('{"version": "0.2.0", "configurations": []}\n')
    (root / "knowledgeBase.md").write_text("# Knowledge Base\n")
    (root / ".editorconfig").write_text("root = true\n")
    (root / ".env.example").write_text("API_KEY=\n")
    (root / "extensions.list").write_text(extensions)
    if with_layout_file:
        (root / "workspace.yaml").write_text(
            "extensions_file: extensions.list\n"
            "editor_dir: .vscode\n"
            "settings:\n"
            "  template: vscode/settings.json\n"
            "  target: .vscode/settings.json\n"
            "overwrite:\n"
            "  - template: vscode/tasks.json\n"
            "    target: .vscode/tasks.json\n"
            "  - template: vscode/launch.json\n"
            "    target: .vscode/launch.json\n"
            "seed:\n"
            "  - template: knowledgeBase.md\n"
            "    target: knowledgeBase.md\n"
            "    skip_notes:\n"
            "      - Merge knowledgeBase.md by hand\n"
            "  - template: .editorconfig\n"
            "    target: .editorconfig\n"
            "  - template: .env.example\n"
            "    target: .env.example\n"
            "    notes:\n"
            "      - Rename .env.example to .env\n"
        )
    return root


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def template_dir(temp_dir) -> Path:
    """Template bundle with settings, editor files, root files and extension list."""
    return write_bundle(temp_dir / "bundle")


@pytest.fixture
def workspace_dir(temp_dir) -> Path:
    """Empty workspace root."""
    workspace = temp_dir / "project"
    workspace.mkdir()
    return workspace


@pytest.fixture
def layout(template_dir, workspace_dir):
    """Resolved layout for the template bundle and workspace fixtures."""
    return load_workspace_layout(template_dir, workspace_dir)


@pytest.fixture
def fake_installer() -> FakeInstaller:
    """Installer double with one extension already installed."""
    return FakeInstaller(installed=["MS-Python.Python"])


@pytest.fixture(autouse=True)
def reset_setup_logger():
    """Restore the setup logger level changed by --log-level in CLI tests."""
    yield
    logging.getLogger("script.workspace-setup").setLevel(logging.INFO)
