"""
Null Notifier - No-op implementation for headless runs
"""

from typing import Optional

from .base import BaseNotifier
from .models import ItemStatus


class NullNotifier(BaseNotifier):
    """No-op notifier implementation."""

    def is_available(self) -> bool:
        return False

    def initialize(
        self,
        title: str,
        message: str,
        total_items: int,
        icon: Optional[str] = None,
        fullscreen: bool = False,
        kiosk: bool = False,
    ) -> None:
        pass

    def add_item(self, name: str, status: ItemStatus = ItemStatus.PENDING, text: str = "") -> None:
        pass

    def update_item(self, name: str, status: ItemStatus, text: str = "") -> None:
        pass

    def update_progress(self, percent: int) -> None:
        pass

    def update_progress_text(self, text: str) -> None:
        pass

    def update_title(self, title: str) -> None:
        pass

    def update_message(self, message: str) -> None:
        pass

    def complete(self, message: str = "Setup Complete") -> None:
        pass

    def close(self) -> None:
        pass

    def terminate_dialog(self) -> None:
        pass
