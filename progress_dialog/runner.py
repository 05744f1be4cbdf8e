"""
Manifest Runner - Process package phases with progress notifications

Runs the download/install commands of each package in a manifest and reports
every step to a progress notifier:

    title: Setting up your device
    message: Please wait while apps are installed
    phases:
      - name: Core
        packages:
          - name: Git
            skip_if_exists: C:/Program Files/Git/cmd/git.exe
            install: winget install --silent Git.Git
          - name: Python
            download: ["curl", "-o", "python.exe", "https://example.com/python.exe"]
            install: ["python.exe", "/quiet"]

The notifier is terminated on every exit path; notification failures never
interrupt the package work.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from progress_dialog.notifications import ItemStatus, ProgressNotifierInterface

logger = logging.getLogger(__name__)

Command = Union[str, List[str]]


class ManifestError(ValueError):
    """Raised when a manifest is structurally invalid"""
    pass


@dataclass
class PackageSpec:
    """One package entry of a manifest phase"""
    name: str
    install: Command
    download: Optional[Command] = None
    skip_if_exists: Optional[str] = None


@dataclass
class PhaseSpec:
    name: str
    packages: List[PackageSpec] = field(default_factory=list)


@dataclass
class RunSummary:
    """Outcome of a manifest run, by package name"""
    succeeded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed) + len(self.skipped)

    @property
    def ok(self) -> bool:
        return not self.failed


def _check_command(value: Any, where: str) -> Command:
    if isinstance(value, str) and value.strip():
        return value
    if isinstance(value, list) and value and all(isinstance(part, str) for part in value):
        return value
    raise ManifestError(f"{where}: expected a command string or list of strings")


def parse_phases(manifest: Dict[str, Any]) -> List[PhaseSpec]:
    """
    Validate and parse the phases of a manifest.

    Raises:
        ManifestError: If phases or packages are missing required fields
    """
    raw_phases = manifest.get("phases")
    if not isinstance(raw_phases, list) or not raw_phases:
        raise ManifestError("Manifest must define a non-empty 'phases' list")

    phases = []
    for i, raw_phase in enumerate(raw_phases, 1):
        if not isinstance(raw_phase, dict) or not raw_phase.get("name"):
            raise ManifestError(f"Phase {i}: missing 'name'")
        phase = PhaseSpec(name=str(raw_phase["name"]))

        for j, raw_pkg in enumerate(raw_phase.get("packages") or [], 1):
            where = f"Phase '{phase.name}' package {j}"
            if not isinstance(raw_pkg, dict) or not raw_pkg.get("name"):
                raise ManifestError(f"{where}: missing 'name'")
            if "install" not in raw_pkg:
                raise ManifestError(f"{where}: missing 'install'")
            phase.packages.append(PackageSpec(
                name=str(raw_pkg["name"]),
                install=_check_command(raw_pkg["install"], where),
                download=_check_command(raw_pkg["download"], where) if raw_pkg.get("download") else None,
                skip_if_exists=raw_pkg.get("skip_if_exists"),
            ))
        phases.append(phase)
    return phases


def _run_step(command: Command, run: Callable[..., Any]) -> Optional[str]:
    """Run one command; return None on success or a failure description."""
    try:
        result = run(command, shell=isinstance(command, str), check=False)
    except OSError as e:
        return str(e)
    if result.returncode != 0:
        return f"Exit code {result.returncode}"
    return None


def run_manifest(
    manifest: Dict[str, Any],
    notifier: ProgressNotifierInterface,
    run: Callable[..., Any] = subprocess.run,
    fullscreen: Optional[bool] = None,
    kiosk: Optional[bool] = None,
) -> RunSummary:
    """
    Process every package in the manifest, reporting progress to notifier.

    Args:
        manifest: Parsed manifest mapping
        notifier: Progress notifier (dialog, console, composite or null)
        run: Command runner with the subprocess.run signature
        fullscreen: Override the manifest's fullscreen flag
        kiosk: Override the manifest's kiosk flag

    Returns:
        RunSummary of succeeded/failed/skipped package names

    Raises:
        ManifestError: If the manifest is invalid (raised before any UI is shown)
    """
    phases = parse_phases(manifest)
    packages = [pkg for phase in phases for pkg in phase.packages]
    summary = RunSummary()

    with notifier:
        notifier.initialize(
            manifest.get("title", "Setting up your device"),
            manifest.get("message", "Please wait while software is installed."),
            len(packages),
            icon=manifest.get("icon"),
            fullscreen=manifest.get("fullscreen", False) if fullscreen is None else fullscreen,
            kiosk=manifest.get("kiosk", False) if kiosk is None else kiosk,
        )
        for pkg in packages:
            notifier.add_item(pkg.name, ItemStatus.PENDING)

        for phase in phases:
            notifier.notify_phase_started(phase.name)

            for pkg in phase.packages:
                if pkg.skip_if_exists and Path(pkg.skip_if_exists).exists():
                    logger.info(f"Skipping {pkg.name}: {pkg.skip_if_exists} exists")
                    notifier.notify_package_skipped(pkg.name)
                    summary.skipped.append(pkg.name)
                    continue

                error = None
                if pkg.download is not None:
                    notifier.notify_download_started(pkg.name)
                    error = _run_step(pkg.download, run)

                if error is None:
                    notifier.notify_install_started(pkg.name)
                    error = _run_step(pkg.install, run)

                if error is None:
                    logger.info(f"Installed {pkg.name}")
                    notifier.notify_package_success(pkg.name)
                    summary.succeeded.append(pkg.name)
                else:
                    logger.error(f"Failed to install {pkg.name}: {error}")
                    notifier.notify_package_failure(pkg.name, error)
                    summary.failed.append(pkg.name)

        notifier.complete(manifest.get("complete_message", "Setup Complete"))
        notifier.close()

    logger.info(
        f"Run finished: {len(summary.succeeded)} installed, "
        f"{len(summary.failed)} failed, {len(summary.skipped)} skipped"
    )
    return summary
