"""Apply the settings template to a workspace settings file.

This is the I/O side of ``config.merging.merge_settings``: it reads the
template and the existing target, merges them, re-checks the result, and
replaces the target atomically. Any failure leaves the target untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from common.shared.file_utils import atomic_write_text
from config.merging import ensure_well_formed, merge_settings_text

from .errors import InvalidTargetJSON, TemplateUnavailable, WriteFailure
from .layout import FileMapping
from .seeding import SeedAction, SeedResult


def _read_template(path: Path) -> str:
    if not path.is_file():
        raise TemplateUnavailable(f"Template settings file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateUnavailable(f"Template settings file unreadable: {path}: {e}") from e


def _read_target(path: Path) -> Optional[str]:
    if not path.exists():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidTargetJSON(f"{path} is not valid UTF-8 JSON: {e}") from e
    except OSError as e:
        raise InvalidTargetJSON(f"Cannot read existing settings {path}: {e}") from e


def apply_settings_template(mapping: FileMapping, dry_run: bool = False) -> SeedResult:
    """
    Merge the template settings into the workspace settings file.

    When the target does not exist the template is written as-is; otherwise
    the shallow target-wins merge is applied. The target is replaced through a
    temporary file, so it is either fully updated or left as it was.

    Args:
        mapping: Settings template/target pair.
        dry_run: Compute and validate the result without writing it.

    Returns:
        SeedResult with action ``COPIED`` or ``MERGED`` (``SKIPPED`` on dry run).

    Raises:
        TemplateUnavailable: If the template is missing or unreadable.
        InvalidTemplateJSON: If the template is not a JSON object.
        InvalidTargetJSON: If the existing target is not a JSON object.
        MergeProducedInvalidJSON: If the merged result fails re-validation.
        WriteFailure: If the result cannot be written.
    """
    src, dst = mapping.template, mapping.target
    template_text = _read_template(src)
    target_text = _read_target(dst)

    merged = merge_settings_text(
        target_text,
        template_text,
        target_source=str(dst),
        template_source=str(src),
    )
    content = ensure_well_formed(merged)
    action = SeedAction.COPIED if target_text is None else SeedAction.MERGED

    if dry_run:
        return SeedResult(
            ok=True,
            action=SeedAction.SKIPPED,
            src=src,
            dst=dst,
            reason=f"Dry run - settings would be {action.value}",
        )

    if target_text is None:
        # Absent target: the template is taken verbatim, keeping its formatting.
        content = template_text

    try:
        atomic_write_text(dst, content)
    except OSError as e:
        raise WriteFailure(dst, str(e), error=e) from e

    reason = (
        "Copied template settings"
        if action is SeedAction.COPIED
        else "Merged template settings (existing values take precedence)"
    )
    return SeedResult(ok=True, action=action, src=src, dst=dst, reason=reason)
