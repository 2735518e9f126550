"""VS Code workspace bootstrap.

Installs editor extensions, merges template settings into ``.vscode/settings.json``
(existing values take precedence), and copies template task, launch and root
configuration files into a workspace.
"""

from .errors import (
    ExtensionListError,
    InvalidTargetJSON,
    InvalidTemplateJSON,
    LayoutError,
    MergeProducedInvalidJSON,
    PrerequisiteError,
    TemplateUnavailable,
    WorkspaceSetupError,
    WriteFailure,
)

__all__ = [
    "ExtensionListError",
    "InvalidTargetJSON",
    "InvalidTemplateJSON",
    "LayoutError",
    "MergeProducedInvalidJSON",
    "PrerequisiteError",
    "TemplateUnavailable",
    "WorkspaceSetupError",
    "WriteFailure",
]
