"""
Notifier Interface - Protocol definition for progress notifier implementations
"""

from typing import Optional, Protocol, runtime_checkable

from .models import ItemStatus


@runtime_checkable
class ProgressNotifierInterface(Protocol):
    """Protocol for progress notifier implementations."""

    def is_available(self) -> bool:
        """Whether notifications can be shown at all."""
        ...

    def initialize(
        self,
        title: str,
        message: str,
        total_items: int,
        icon: Optional[str] = None,
        fullscreen: bool = False,
        kiosk: bool = False,
    ) -> None:
        """Open the progress display for a run of total_items items."""
        ...

    def add_item(self, name: str, status: ItemStatus = ItemStatus.PENDING, text: str = "") -> None:
        """Add a named list item."""
        ...

    def update_item(self, name: str, status: ItemStatus, text: str = "") -> None:
        """Update a list item; SUCCESS/FAIL count towards progress."""
        ...

    def update_progress(self, percent: int) -> None:
        ...

    def update_progress_text(self, text: str) -> None:
        ...

    def update_title(self, title: str) -> None:
        ...

    def update_message(self, message: str) -> None:
        ...

    def complete(self, message: str = "Setup Complete") -> None:
        """Mark the run as finished."""
        ...

    def close(self) -> None:
        """Ask the display to quit, then terminate it."""
        ...

    def terminate_dialog(self) -> None:
        """Tear the display down immediately."""
        ...

    def notify_download_started(self, package_name: str) -> None:
        ...

    def notify_install_started(self, package_name: str) -> None:
        ...

    def notify_package_success(self, package_name: str) -> None:
        ...

    def notify_package_failure(self, package_name: str, error: str) -> None:
        ...

    def notify_package_skipped(self, package_name: str, reason: str = "Already installed") -> None:
        ...

    def notify_phase_started(self, phase: str) -> None:
        ...

    def __enter__(self) -> "ProgressNotifierInterface":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        """Terminate the display on every exit path."""
        ...
