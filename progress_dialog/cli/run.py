"""
Progress Dialog - Run a package manifest with a progress dialog

Usage:
    progress-dialog manifest.yml
    progress-dialog manifest.yml --fullscreen --kiosk
    progress-dialog --check
"""

import sys
import argparse
import logging
from pathlib import Path

from progress_dialog.config import ConfigError, load_config, load_manifest
from progress_dialog.notifications import (
    CompositeNotifier,
    ConsoleNotifier,
    DialogNotifier,
    create_notifier_from_config,
)
from progress_dialog.runner import ManifestError, parse_phases, run_manifest

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config: dict, verbose: bool = False) -> None:
    logging_config = config.get("logging") or {}
    level_name = "DEBUG" if verbose else str(logging_config.get("level", "INFO")).upper()
    handlers = [logging.StreamHandler(sys.stderr)]

    log_file = logging_config.get("file")
    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run a package manifest while showing progress in csharpDialog/swiftDialog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  progress-dialog manifest.yml
  progress-dialog manifest.yml --console
  progress-dialog manifest.yml --fullscreen --kiosk
  progress-dialog manifest.yml --dry-run
  progress-dialog --check
        """
    )

    parser.add_argument(
        "manifest",
        nargs="?",
        help="Path to package manifest (YAML)"
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file (default: $PROGRESS_DIALOG_CONFIG or .progress-dialog.yml)"
    )
    parser.add_argument(
        "--dialog-path",
        help="Path to the dialog executable (overrides config)"
    )
    parser.add_argument(
        "--command-file",
        help="Path to the dialog command file (overrides config)"
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Also show progress in the terminal"
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        default=None,
        help="Show the dialog fullscreen"
    )
    parser.add_argument(
        "--kiosk",
        action="store_true",
        default=None,
        help="Show the dialog in kiosk mode"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the packages that would be processed without running anything"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report whether the dialog executable is available"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if not args.manifest and not args.check:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(config, verbose=args.verbose)
    except OSError as e:
        print(f"Error: Could not open log file: {e}", file=sys.stderr)
        return 1

    notifications_config = config.get("notifications") or {}
    dialog_config = notifications_config.get("dialog") or {}
    if args.dialog_path:
        dialog_config["path"] = args.dialog_path
    if args.command_file:
        dialog_config["command_file"] = args.command_file
    notifications_config["dialog"] = dialog_config
    config["notifications"] = notifications_config

    if args.check:
        dialog = DialogNotifier(
            dialog_path=dialog_config.get("path"),
            command_file=dialog_config.get("command_file"),
        )
        if dialog.is_available():
            print(f"Dialog available: {dialog.dialog_path}", file=sys.stderr)
            return 0
        print(f"Dialog not found at {dialog.dialog_path} - runs will be headless", file=sys.stderr)
        return 1

    try:
        notifier = create_notifier_from_config(config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        manifest = load_manifest(args.manifest)
        phases = parse_phases(manifest)
    except (ConfigError, ManifestError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dry_run:
        print("\nDRY RUN - Would process the following packages:", file=sys.stderr)
        for phase in phases:
            print(f"   [{phase.name}]", file=sys.stderr)
            for pkg in phase.packages:
                print(f"   - {pkg.name}", file=sys.stderr)
        return 0

    if args.console:
        notifier = CompositeNotifier([notifier, ConsoleNotifier()])

    summary = run_manifest(manifest, notifier, fullscreen=args.fullscreen, kiosk=args.kiosk)

    print(
        f"\nDone: {len(summary.succeeded)} installed, {len(summary.failed)} failed, "
        f"{len(summary.skipped)} skipped",
        file=sys.stderr,
    )
    for name in summary.failed:
        print(f"   Failed: {name}", file=sys.stderr)
    return 0 if summary.ok else 1


if __name__ == "__main__":
    sys.exit(main())
