"""
@meta
name: workspace_execution
type: script
domain: workspace
responsibility:
  - Main entry point for workspace setup
  - Resolve the template bundle and workspace
  - Run the setup steps and map failures to an exit status
inputs:
  - Command-line arguments
  - Template bundle directory
outputs:
  - Configured workspace files
  - Process exit status
tags:
  - entrypoint
  - workspace
lifecycle:
  status: active
"""

"""Workspace setup entry point.

Exit status is 0 on success and 1 when a fatal error aborts the run (or when
``--fail-on-extension-error`` is given and an extension failed to install).
"""

from typing import List, Optional

from common.shared.argument_parsing import validate_config_dir, validate_workspace_dir
from common.shared.logging_utils import get_script_logger, set_log_level

from .cli import parse_setup_arguments
from .errors import WorkspaceSetupError
from .extensions import CodeCliInstaller, ExtensionInstaller
from .layout import load_workspace_layout
from .orchestrator import SetupOptions, SetupReport, run_workspace_setup

_log = get_script_logger("workspace-setup")


def _exit_status(report: SetupReport, options: SetupOptions) -> int:
    if options.fail_on_extension_error and report.failed_extensions:
        failed = ", ".join(r.extension_id for r in report.failed_extensions)
        _log.error(f"Extension installation failed for: {failed}")
        return 1
    return 0


def main(
    argv: Optional[List[str]] = None,
    installer: Optional[ExtensionInstaller] = None,
) -> int:
    """
    Run workspace setup from the command line.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).
        installer: Extension installer override; defaults to ``CodeCliInstaller``
            using ``--code-command``.

    Returns:
        Process exit status.
    """
    args = parse_setup_arguments(argv)
    set_log_level(args.log_level, _log)

    options = SetupOptions(
        code_command=args.code_command,
        skip_extensions=args.skip_extensions,
        dry_run=args.dry_run,
        fail_on_extension_error=args.fail_on_extension_error,
    )

    try:
        config_dir = validate_config_dir(args.config_dir)
        workspace_root = validate_workspace_dir(args.workspace)
        layout = load_workspace_layout(config_dir, workspace_root)
        _log.info(f"Setting up workspace '{layout.workspace_root}' from '{layout.template_dir}'")

        if installer is None and not options.skip_extensions:
            installer = CodeCliInstaller(command=options.code_command)
        report = run_workspace_setup(layout, installer, options)
    except FileNotFoundError as e:
        _log.error(str(e))
        return 1
    except WorkspaceSetupError as e:
        _log.error(str(e))
        _log.error("Workspace setup aborted. Files already in place were left untouched.")
        return 1

    for failure in report.failed_files:
        _log.error(f"Not applied: {failure.dst}")

    status = _exit_status(report, options)
    if status == 0:
        if options.dry_run:
            _log.info("Dry run finished. No files were changed.")
        else:
            _log.info("VS Code workspace setup finished!")
            _log.info(
                "You may need to reload the VS Code window ('Developer: Reload Window') "
                "for all changes to take effect."
            )
    return status
