"""Base Notifier - Package-processing helpers shared by every notifier"""

import logging

from .models import ItemStatus

logger = logging.getLogger(__name__)


class BaseNotifier:
    """
    Convenience helpers composed from the primitive notifier calls.

    Subclasses implement the primitives (update_item, update_progress_text,
    terminate_dialog, ...). Using a notifier as a context manager terminates
    it on every exit path, including errors raised inside the block.
    """

    def notify_download_started(self, package_name: str) -> None:
        self.update_item(package_name, ItemStatus.WAIT, "Downloading...")
        self.update_progress_text(f"Downloading {package_name}...")

    def notify_install_started(self, package_name: str) -> None:
        self.update_item(package_name, ItemStatus.WAIT, "Installing...")
        self.update_progress_text(f"Installing {package_name}...")

    def notify_package_success(self, package_name: str) -> None:
        self.update_item(package_name, ItemStatus.SUCCESS, "Installed")

    def notify_package_failure(self, package_name: str, error: str) -> None:
        self.update_item(package_name, ItemStatus.FAIL, error)

    def notify_package_skipped(self, package_name: str, reason: str = "Already installed") -> None:
        self.update_item(package_name, ItemStatus.SUCCESS, reason)

    def notify_phase_started(self, phase: str) -> None:
        self.update_progress_text(f"Phase: {phase}")
        logger.info(f"{'=' * 20} Processing {phase} packages {'=' * 20}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.terminate_dialog()
