"""Console Notifier - Terminal rendering of dialog progress"""

import sys
from datetime import datetime
from typing import Optional, TextIO

from .base import BaseNotifier
from .commands import clamp_percent
from .models import ItemStatus, completion_percent


class ConsoleNotifier(BaseNotifier):
    """Console-based progress notifier with progress bar support."""

    def __init__(
        self,
        output: TextIO = sys.stderr,
        show_progress_bar: bool = True,
        use_colors: Optional[bool] = None,
    ):
        self.output = output
        self.show_progress_bar = show_progress_bar
        self.use_colors = use_colors if use_colors is not None else (hasattr(output, 'isatty') and output.isatty())
        self._start_time: Optional[datetime] = None
        self._total_items = 0
        self._completed_items = 0

    def _color(self, text: str, code: str) -> str:
        return f"\033[{code}m{text}\033[0m" if self.use_colors else text

    def _green(self, text: str) -> str: return self._color(text, "32")
    def _red(self, text: str) -> str: return self._color(text, "31")
    def _cyan(self, text: str) -> str: return self._color(text, "36")
    def _dim(self, text: str) -> str: return self._color(text, "90")

    def _progress_bar(self, percent: int, width: int = 20) -> str:
        filled = int(width * percent / 100)
        return f"[{'█' * filled}{'░' * (width - filled)}] {percent}%"

    def _print(self, line: str) -> None:
        print(line, file=self.output)

    def is_available(self) -> bool:
        return True

    def initialize(
        self,
        title: str,
        message: str,
        total_items: int,
        icon: Optional[str] = None,
        fullscreen: bool = False,
        kiosk: bool = False,
    ) -> None:
        self._start_time = datetime.now()
        self._total_items = total_items
        self._completed_items = 0
        self._print(f"\n📦 {self._cyan(title)}")
        if message:
            self._print(f"   {message}")

    def add_item(self, name: str, status: ItemStatus = ItemStatus.PENDING, text: str = "") -> None:
        self._print_item(name, status, text)

    def update_item(self, name: str, status: ItemStatus, text: str = "") -> None:
        self._print_item(name, status, text)
        if status.is_terminal:
            self._completed_items += 1
            self.update_progress(completion_percent(self._completed_items, self._total_items))

    def _print_item(self, name: str, status: ItemStatus, text: str) -> None:
        label = f"{status.emoji} {name}"
        if status is ItemStatus.FAIL or status is ItemStatus.ERROR:
            label = self._red(label)
        elif status is ItemStatus.SUCCESS:
            label = self._green(label)
        suffix = f" {self._dim(text)}" if text else ""
        self._print(f"   {label}{suffix}")

    def update_progress(self, percent: int) -> None:
        if self.show_progress_bar:
            self._print(f"   {self._dim(self._progress_bar(clamp_percent(percent)))}")

    def update_progress_text(self, text: str) -> None:
        self._print(f"   {text}")

    def update_title(self, title: str) -> None:
        self._print(f"\n📦 {self._cyan(title)}")

    def update_message(self, message: str) -> None:
        self._print(f"   {message}")

    def complete(self, message: str = "Setup Complete") -> None:
        duration = (datetime.now() - self._start_time).total_seconds() if self._start_time else 0
        self.update_progress(100)
        self._print(f"   {self._green('✅')} {message} {self._dim(f'({duration:.1f}s)')}")

    def close(self) -> None:
        self._start_time = None

    def terminate_dialog(self) -> None:
        self._start_time = None
