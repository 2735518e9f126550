"""Unit tests for workspace layout loading."""

import pytest

from conftest import write_bundle
from workspace.errors import LayoutError
from workspace.layout import (
    DEFAULT_TEMPLATE_DIR,
    LAYOUT_FILENAME,
    build_workspace_layout,
    load_workspace_layout,
)


class TestLoadWorkspaceLayout:
    """Test load_workspace_layout."""

    def test_resolves_paths(self, template_dir, workspace_dir):
        """Test that templates resolve into the bundle and targets into the workspace."""
        layout = load_workspace_layout(template_dir, workspace_dir)

        assert layout.extensions_file == template_dir / "extensions.list"
        assert layout.editor_dir == workspace_dir / ".vscode"
        assert layout.settings.template == template_dir / "vscode" / "settings.json"
        assert layout.settings.target == workspace_dir / ".vscode" / "settings.json"
        assert [m.target.name for m in layout.overwrite_files] == ["tasks.json", "launch.json"]
        assert [m.target.name for m in layout.seed_files] == [
            "knowledgeBase.md",
            ".editorconfig",
            ".env.example",
        ]
        assert layout.seed_files[2].notes == ("Rename .env.example to .env",)
        assert layout.seed_files[0].skip_notes == ("Merge knowledgeBase.md by hand",)

    def test_defaults_without_layout_file(self, temp_dir, workspace_dir):
        """Test that the built-in layout is used when workspace.yaml is absent."""
        bundle = write_bundle(temp_dir / "plain", with_layout_file=False)

        layout = load_workspace_layout(bundle, workspace_dir)

        assert layout.settings.target == workspace_dir / ".vscode" / "settings.json"
        assert len(layout.overwrite_files) == 2
        assert len(layout.seed_files) == 3
        assert any("ACTION REQUIRED" in note for note in layout.seed_files[2].notes)
        assert any("Consider manually merging" in note for note in layout.seed_files[0].skip_notes)

    def test_partial_layout_falls_back_per_key(self, temp_dir, workspace_dir):
        """Test that keys missing from workspace.yaml use the defaults."""
        bundle = write_bundle(temp_dir / "partial", with_layout_file=False)
        (bundle / LAYOUT_FILENAME).write_text("seed: []\n")

        layout = load_workspace_layout(bundle, workspace_dir)

        assert layout.seed_files == ()
        assert len(layout.overwrite_files) == 2

    def test_invalid_yaml(self, template_dir, workspace_dir):
        """Test that unparsable YAML raises LayoutError."""
        (template_dir / LAYOUT_FILENAME).write_text("seed: [\n")

        with pytest.raises(LayoutError, match="Invalid layout file"):
            load_workspace_layout(template_dir, workspace_dir)

    def test_unreadable_layout_file(self, template_dir, workspace_dir):
        """Test that a layout path that cannot be opened raises LayoutError."""
        layout_file = template_dir / LAYOUT_FILENAME
        layout_file.unlink(missing_ok=True)
        layout_file.mkdir()

        with pytest.raises(LayoutError, match="Cannot read layout file"):
            load_workspace_layout(template_dir, workspace_dir)

    def test_non_mapping_yaml(self, template_dir, workspace_dir):
        """Test that a YAML list at the top level raises LayoutError."""
        (template_dir / LAYOUT_FILENAME).write_text("- a\n- b\n")

        with pytest.raises(LayoutError):
            load_workspace_layout(template_dir, workspace_dir)

    def test_bundled_templates_load(self, workspace_dir):
        """Test that the templates shipped with the package form a valid layout."""
        layout = load_workspace_layout(DEFAULT_TEMPLATE_DIR, workspace_dir)

        assert layout.settings.template.is_file()
        assert layout.extensions_file.is_file()
        assert all(m.template.is_file() for m in layout.overwrite_files)
        assert all(m.template.is_file() for m in layout.seed_files)


class TestBuildWorkspaceLayout:
    """Test validation in build_workspace_layout."""

    def test_rejects_escaping_target(self, template_dir, workspace_dir):
        """Test that targets outside the workspace are rejected."""
        raw = {"seed": [{"template": "knowledgeBase.md", "target": "../outside.md"}]}

        with pytest.raises(LayoutError, match="escapes"):
            build_workspace_layout(raw, template_dir, workspace_dir)

    def test_rejects_absolute_template(self, template_dir, workspace_dir):
        """Test that absolute paths are rejected."""
        raw = {"settings": {"template": "/etc/passwd", "target": "s.json"}}

        with pytest.raises(LayoutError, match="must be relative"):
            build_workspace_layout(raw, template_dir, workspace_dir)

    def test_rejects_missing_target(self, template_dir, workspace_dir):
        """Test that a mapping without a target is rejected."""
        raw = {"overwrite": [{"template": "vscode/tasks.json"}]}

        with pytest.raises(LayoutError, match=r"overwrite\[0\]"):
            build_workspace_layout(raw, template_dir, workspace_dir)

    def test_rejects_non_list_section(self, template_dir, workspace_dir):
        """Test that a section that is not a list is rejected."""
        with pytest.raises(LayoutError, match="must be a list"):
            build_workspace_layout({"seed": "knowledgeBase.md"}, template_dir, workspace_dir)

    def test_rejects_bad_notes(self, template_dir, workspace_dir):
        """Test that notes must be a list of strings."""
        raw = {"seed": [{"template": "a", "target": "a", "notes": "read me"}]}

        with pytest.raises(LayoutError, match="notes"):
            build_workspace_layout(raw, template_dir, workspace_dir)

    def test_rejects_bad_skip_notes(self, template_dir, workspace_dir):
        """Test that skip_notes must be a list of strings."""
        raw = {"seed": [{"template": "a", "target": "a", "skip_notes": [1]}]}

        with pytest.raises(LayoutError, match="skip_notes"):
            build_workspace_layout(raw, template_dir, workspace_dir)

    def test_layout_is_frozen(self, layout):
        """Test that the layout cannot be mutated."""
        with pytest.raises(AttributeError):
            layout.editor_dir = layout.workspace_root
