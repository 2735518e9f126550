"""Editor extension installation.

The editor CLI is hidden behind ``ExtensionInstaller`` so the setup run can be
exercised with a test double. ``CodeCliInstaller`` is the real implementation
and shells out to ``code`` (or a compatible CLI such as ``codium``).
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set

from common.shared.logging_utils import get_script_logger

from .errors import ExtensionListError

_log = get_script_logger("workspace-setup")

DEFAULT_CODE_COMMAND = "code"


class InstallStatus(str, Enum):
    """Outcome of ensuring one extension is installed."""

    ALREADY_INSTALLED = "already_installed"
    INSTALLED = "installed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class InstallResult:
    """Structured result for one extension."""

    extension_id: str
    status: InstallStatus
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not InstallStatus.FAILED

    def __str__(self) -> str:
        status = "✓" if self.ok else "✗"
        suffix = f" ({self.reason})" if self.reason else ""
        return f"{status} [{self.status.value.upper()}] {self.extension_id}{suffix}"


class ExtensionInstaller(ABC):
    """Capability to query and install editor extensions."""

    @abstractmethod
    def is_installed(self, extension_id: str) -> bool:
        """Return True if the extension is already installed (case-insensitive)."""

    @abstractmethod
    def install(self, extension_id: str) -> InstallResult:
        """Install one extension; failures are reported, not raised."""


class CodeCliInstaller(ExtensionInstaller):
    """``ExtensionInstaller`` backed by the VS Code command line."""

    def __init__(
        self,
        command: str = DEFAULT_CODE_COMMAND,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.command = command
        self._runner = runner
        self._installed: Optional[Set[str]] = None

    def list_installed(self) -> Set[str]:
        """
        List installed extensions once and cache the lowercased IDs.

        Raises:
            ExtensionListError: If the editor CLI cannot list extensions.
        """
        if self._installed is None:
            try:
                proc = self._runner(
                    [self.command, "--list-extensions"],
                    capture_output=True,
                    text=True,
                    check=False,
                )
            except OSError as e:
                raise ExtensionListError(
                    f"Failed to run '{self.command} --list-extensions': {e}"
                ) from e
            if proc.returncode != 0:
                raise ExtensionListError(
                    f"Failed to list installed extensions (exit code {proc.returncode}). "
                    f"Is the '{self.command}' command working correctly?"
                )
            self._installed = {
                line.strip().lower() for line in proc.stdout.splitlines() if line.strip()
            }
        return self._installed

    def is_installed(self, extension_id: str) -> bool:
        return extension_id.lower() in self.list_installed()

    def install(self, extension_id: str) -> InstallResult:
        try:
            proc = self._runner(
                [self.command, "--install-extension", extension_id],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            return InstallResult(extension_id, InstallStatus.FAILED, reason=str(e))

        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout or "").strip().splitlines()
            reason = detail[-1] if detail else f"exit code {proc.returncode}"
            return InstallResult(extension_id, InstallStatus.FAILED, reason=reason)

        self.list_installed().add(extension_id.lower())
        return InstallResult(extension_id, InstallStatus.INSTALLED)


def read_extension_list(path: Path) -> List[str]:
    """
    Read extension IDs from a list file.

    One ID per line; surrounding whitespace is trimmed, blank lines and lines
    starting with ``#`` are ignored, and repeated IDs (case-insensitive) are
    kept only once in first-seen order.

    Raises:
        ExtensionListError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise ExtensionListError(f"Extensions list file not found: {path}")
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ExtensionListError(f"Cannot read extensions list {path}: {e}") from e

    seen: Set[str] = set()
    extension_ids: List[str] = []
    for line in lines:
        extension_id = line.strip()
        if not extension_id or extension_id.startswith("#"):
            continue
        key = extension_id.lower()
        if key in seen:
            continue
        seen.add(key)
        extension_ids.append(extension_id)
    return extension_ids


def install_extensions(
    installer: ExtensionInstaller,
    extension_ids: Iterable[str],
    dry_run: bool = False,
) -> List[InstallResult]:
    """
    Ensure every extension in ``extension_ids`` is installed.

    Args:
        installer: Installer capability.
        extension_ids: Extension IDs, in install order.
        dry_run: Only check what is installed; never install.

    Returns:
        One InstallResult per extension.

    Raises:
        ExtensionListError: If the installer cannot list installed extensions.
    """
    results: List[InstallResult] = []
    for extension_id in extension_ids:
        if installer.is_installed(extension_id):
            _log.info(f"Extension already installed: {extension_id}")
            results.append(InstallResult(extension_id, InstallStatus.ALREADY_INSTALLED))
            continue

        if dry_run:
            _log.info(f"Dry run - would install extension: {extension_id}")
            results.append(
                InstallResult(extension_id, InstallStatus.SKIPPED, reason="dry run")
            )
            continue

        _log.info(f"Installing extension: {extension_id}...")
        result = installer.install(extension_id)
        if result.ok:
            _log.info(f"Installed {extension_id}")
        else:
            _log.warning(
                f"Failed to install {extension_id} ({result.reason}). It might be invalid, "
                f"deprecated, or require manual installation."
            )
        results.append(result)
    return results
