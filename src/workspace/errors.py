"""Custom exceptions for workspace setup."""

from pathlib import Path
from typing import Optional


class WorkspaceSetupError(Exception):
    """Base exception for workspace setup errors."""
    pass


class TemplateUnavailable(WorkspaceSetupError):
    """Raised when a template file is missing or unreadable. Recoverable."""
    pass


class InvalidTargetJSON(WorkspaceSetupError):
    """Raised when an existing target file is not a valid JSON object."""
    pass


class InvalidTemplateJSON(WorkspaceSetupError):
    """Raised when a template file is not a valid JSON object."""
    pass


class MergeProducedInvalidJSON(WorkspaceSetupError):
    """Raised when a merged document fails the well-formedness re-check."""
    pass


class WriteFailure(WorkspaceSetupError):
    """Raised when a result cannot be written to its target path."""

    def __init__(self, path: Path, reason: str, error: Optional[Exception] = None):
        self.path = Path(path)
        self.reason = reason
        self.error = error
        super().__init__(f"Failed to write {self.path}: {reason}")


class PrerequisiteError(WorkspaceSetupError):
    """Raised when a required command is not available on PATH."""
    pass


class ExtensionListError(WorkspaceSetupError):
    """Raised when the extension list cannot be read or the editor cannot list extensions."""
    pass


class LayoutError(WorkspaceSetupError):
    """Raised when the workspace layout configuration is malformed."""
    pass
