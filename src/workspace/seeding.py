"""Template file seeding for a workspace.

Two policies are supported: ``copy_overwrite`` always replaces the target with
the template (editor task and launch files), and ``copy_if_absent`` only
creates the target when it does not exist yet (root files such as
``.editorconfig``). Neither raises on I/O errors; failures come back as a
``SeedResult`` so the caller can log them and carry on.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from common.shared.file_utils import copy_file

from .layout import FileMapping


class SeedAction(str, Enum):
    """Action taken when applying a template file."""

    COPIED = "copied"
    OVERWRITTEN = "overwritten"
    MERGED = "merged"
    SKIPPED = "skipped"
    MISSING = "missing"
    ERROR = "error"


@dataclass
class SeedResult:
    """Structured result from applying one template file."""

    ok: bool
    action: SeedAction
    src: Path
    dst: Path
    reason: str = ""
    error: Optional[Exception] = None

    def __str__(self) -> str:
        """Human-readable string representation."""
        status = "✓" if self.ok else "✗"
        return f"{status} [{self.action.value.upper()}] {self.dst} ({self.reason})"


def copy_overwrite(mapping: FileMapping, dry_run: bool = False) -> SeedResult:
    """
    Copy a template over its target, replacing any existing file.

    Args:
        mapping: Template/target pair.
        dry_run: Report what would happen without touching the filesystem.

    Returns:
        SeedResult. A missing template yields ``MISSING`` with ``ok=True``.
    """
    src, dst = mapping.template, mapping.target
    if not src.is_file():
        return SeedResult(
            ok=True,
            action=SeedAction.MISSING,
            src=src,
            dst=dst,
            reason=f"Template {src.name} not found, skipping",
        )

    existed = dst.exists()
    action = SeedAction.OVERWRITTEN if existed else SeedAction.COPIED

    if dry_run:
        return SeedResult(
            ok=True,
            action=SeedAction.SKIPPED,
            src=src,
            dst=dst,
            reason=f"Dry run - would be {action.value}",
        )

    try:
        copy_file(src, dst)
    except OSError as e:
        return SeedResult(
            ok=False,
            action=SeedAction.ERROR,
            src=src,
            dst=dst,
            reason=f"Failed to copy {src}: {e}",
            error=e,
        )

    return SeedResult(
        ok=True,
        action=action,
        src=src,
        dst=dst,
        reason="Overwrote existing file with template" if existed else "Copied template",
    )


def copy_if_absent(mapping: FileMapping, dry_run: bool = False) -> SeedResult:
    """
    Copy a template to its target only when the target does not exist.

    Args:
        mapping: Template/target pair.
        dry_run: Report what would happen without touching the filesystem.

    Returns:
        SeedResult. An existing target yields ``SKIPPED``; a missing template
        yields ``MISSING``.
    """
    src, dst = mapping.template, mapping.target
    if not src.is_file():
        return SeedResult(
            ok=True,
            action=SeedAction.MISSING,
            src=src,
            dst=dst,
            reason=f"Template {src.name} not found",
        )

    if dst.exists():
        return SeedResult(
            ok=True,
            action=SeedAction.SKIPPED,
            src=src,
            dst=dst,
            reason="Existing file kept",
        )

    if dry_run:
        return SeedResult(
            ok=True,
            action=SeedAction.SKIPPED,
            src=src,
            dst=dst,
            reason="Dry run - would be copied",
        )

    try:
        copy_file(src, dst)
    except OSError as e:
        return SeedResult(
            ok=False,
            action=SeedAction.ERROR,
            src=src,
            dst=dst,
            reason=f"Failed to copy {src}: {e}",
            error=e,
        )

    return SeedResult(ok=True, action=SeedAction.COPIED, src=src, dst=dst, reason="Copied template")
