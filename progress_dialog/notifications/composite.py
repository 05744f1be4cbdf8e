"""Composite Notifier - Combine multiple notifiers"""

import logging
from typing import List, Optional

from .base import BaseNotifier
from .interface import ProgressNotifierInterface
from .models import ItemStatus

logger = logging.getLogger(__name__)


class CompositeNotifier(BaseNotifier):
    """Combines multiple notifiers into one."""

    def __init__(self, notifiers: List[ProgressNotifierInterface]):
        self.notifiers = notifiers

    def _each(self, method: str, *args, **kwargs) -> None:
        for n in self.notifiers:
            try:
                getattr(n, method)(*args, **kwargs)
            except Exception as e:
                logger.debug(f"{type(n).__name__}.{method} failed: {e}")

    def is_available(self) -> bool:
        return any(n.is_available() for n in self.notifiers)

    def initialize(
        self,
        title: str,
        message: str,
        total_items: int,
        icon: Optional[str] = None,
        fullscreen: bool = False,
        kiosk: bool = False,
    ) -> None:
        self._each("initialize", title, message, total_items, icon=icon, fullscreen=fullscreen, kiosk=kiosk)

    def add_item(self, name: str, status: ItemStatus = ItemStatus.PENDING, text: str = "") -> None:
        self._each("add_item", name, status, text)

    def update_item(self, name: str, status: ItemStatus, text: str = "") -> None:
        self._each("update_item", name, status, text)

    def update_progress(self, percent: int) -> None:
        self._each("update_progress", percent)

    def update_progress_text(self, text: str) -> None:
        self._each("update_progress_text", text)

    def update_title(self, title: str) -> None:
        self._each("update_title", title)

    def update_message(self, message: str) -> None:
        self._each("update_message", message)

    def complete(self, message: str = "Setup Complete") -> None:
        self._each("complete", message)

    def close(self) -> None:
        self._each("close")

    def terminate_dialog(self) -> None:
        self._each("terminate_dialog")

    def add(self, notifier: ProgressNotifierInterface) -> None:
        self.notifiers.append(notifier)

    def remove(self, notifier: ProgressNotifierInterface) -> bool:
        try:
            self.notifiers.remove(notifier)
            return True
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self.notifiers)
