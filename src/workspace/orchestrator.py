"""Workspace setup orchestration.

Runs the setup steps in order: prerequisites, extensions, editor settings,
editor task/launch files, then root files. Fatal problems propagate as
``WorkspaceSetupError`` subclasses; everything else is logged and recorded in
the returned ``SetupReport``.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from common.shared.logging_utils import get_script_logger

from .errors import TemplateUnavailable, WriteFailure
from .extensions import (
    DEFAULT_CODE_COMMAND,
    ExtensionInstaller,
    InstallResult,
    install_extensions,
    read_extension_list,
)
from .layout import WorkspaceLayout
from .prerequisites import check_prerequisites
from .seeding import SeedAction, SeedResult, copy_if_absent, copy_overwrite
from .settings import apply_settings_template

_log = get_script_logger("workspace-setup")


@dataclass
class SetupOptions:
    """Options for a setup run."""

    code_command: str = DEFAULT_CODE_COMMAND
    skip_extensions: bool = False
    dry_run: bool = False
    fail_on_extension_error: bool = False


@dataclass
class SetupReport:
    """Everything a setup run did, for the exit status and a final summary."""

    extensions: List[InstallResult] = field(default_factory=list)
    files: List[SeedResult] = field(default_factory=list)
    settings_skipped: bool = False

    @property
    def failed_extensions(self) -> List[InstallResult]:
        return [r for r in self.extensions if not r.ok]

    @property
    def failed_files(self) -> List[SeedResult]:
        return [r for r in self.files if not r.ok]

    @property
    def failed(self) -> bool:
        """True if any non-fatal step failed."""
        return bool(self.failed_extensions or self.failed_files)


def _log_seed_result(result: SeedResult, warn_on: Tuple[SeedAction, ...] = ()) -> None:
    if not result.ok:
        _log.error(str(result))
    elif result.action in warn_on:
        _log.warning(str(result))
    else:
        _log.info(str(result))


def _setup_extensions(
    layout: WorkspaceLayout,
    installer: ExtensionInstaller,
    options: SetupOptions,
    report: SetupReport,
) -> None:
    _log.info(f"Checking and installing editor extensions from {layout.extensions_file}...")
    extension_ids = read_extension_list(layout.extensions_file)
    report.extensions = install_extensions(installer, extension_ids, dry_run=options.dry_run)
    _log.info("Extension check complete.")


def _setup_settings(layout: WorkspaceLayout, options: SetupOptions, report: SetupReport) -> None:
    _log.info(f"Processing workspace settings: {layout.settings.target}")
    try:
        result = apply_settings_template(layout.settings, dry_run=options.dry_run)
    except TemplateUnavailable as e:
        _log.warning(f"{e}. Skipping settings configuration.")
        report.settings_skipped = True
        return
    report.files.append(result)
    _log_seed_result(result)


def run_workspace_setup(
    layout: WorkspaceLayout,
    installer: Optional[ExtensionInstaller],
    options: Optional[SetupOptions] = None,
    which: Optional[Callable[[str], Optional[str]]] = None,
) -> SetupReport:
    """
    Bootstrap the workspace described by ``layout``.

    Args:
        layout: Resolved template and target paths.
        installer: Extension installer; may be None when extensions are skipped.
        options: Run options (defaults to ``SetupOptions()``).
        which: Command lookup used by the prerequisite check
            (``shutil.which`` by default).

    Returns:
        SetupReport describing every step.

    Raises:
        PrerequisiteError: If the editor CLI is missing.
        ExtensionListError: If the extension list or installed list is unavailable.
        InvalidTargetJSON, InvalidTemplateJSON, MergeProducedInvalidJSON,
        WriteFailure: If the settings merge cannot be completed safely.
    """
    options = options or SetupOptions()
    report = SetupReport()

    if options.skip_extensions:
        _log.info("Skipping extension installation.")
    else:
        if installer is None:
            raise ValueError("An extension installer is required unless extensions are skipped")
        _log.info("Checking prerequisites...")
        check_prerequisites([options.code_command], which=which or shutil.which)
        _log.info("Prerequisites met.")
        _setup_extensions(layout, installer, options, report)

    _log.info(f"Configuring workspace settings ({layout.editor_dir})...")
    if not options.dry_run:
        try:
            layout.editor_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteFailure(layout.editor_dir, f"cannot create directory: {e}", error=e) from e

    _setup_settings(layout, options, report)

    for mapping in layout.overwrite_files:
        result = copy_overwrite(mapping, dry_run=options.dry_run)
        report.files.append(result)
        _log_seed_result(result, warn_on=(SeedAction.OVERWRITTEN,))

    for mapping in layout.seed_files:
        _log.info(f"Processing {mapping.target.name} file...")
        result = copy_if_absent(mapping, dry_run=options.dry_run)
        report.files.append(result)
        # A dry run also reports SKIPPED; only a target on disk was kept.
        kept = result.action is SeedAction.SKIPPED and result.dst.exists()
        warn_on = (SeedAction.MISSING, SeedAction.SKIPPED) if kept else (SeedAction.MISSING,)
        _log_seed_result(result, warn_on=warn_on)
        if result.action is SeedAction.COPIED:
            for note in mapping.notes:
                _log.info(note)
        elif kept:
            for note in mapping.skip_notes:
                _log.info(note)

    return report
