"""
Dialog Notifier - Progress UI through an external dialog process

Launches csharpDialog/swiftDialog and drives it by appending commands to the
shared command file the dialog polls. Gracefully degrades to headless mode
when the dialog executable is not installed: every call becomes a no-op and
nothing is written or spawned.

Nothing here raises to the caller. Launch, file and termination failures are
logged and the run carries on without a dialog.
"""

import logging
import subprocess
import threading
import time
from pathlib import Path
from typing import Optional, Union

from progress_dialog.utils.platform_paths import (
    default_command_file,
    default_dialog_path,
    dialog_candidates,
    find_dialog_executable,
)

from .base import BaseNotifier
from .commands import (
    DONE_BUTTON_TEXT,
    QUIT_COMMAND,
    CommandFile,
    build_dialog_arguments,
    field_command,
    list_item_command,
    progress_command,
)
from .models import ItemStatus, completion_percent

logger = logging.getLogger(__name__)

DEFAULT_CLOSE_GRACE_PERIOD = 0.5  # seconds between "quit" and forced termination
TERMINATE_WAIT_TIMEOUT = 5


class DialogNotifier(BaseNotifier):
    """Progress notifier backed by an external dialog executable."""

    def __init__(
        self,
        dialog_path: Optional[Union[str, Path]] = None,
        command_file: Optional[Union[str, Path]] = None,
        close_grace_period: float = DEFAULT_CLOSE_GRACE_PERIOD,
    ):
        if dialog_path:
            self.dialog_path = Path(dialog_path)
        else:
            self.dialog_path = find_dialog_executable(dialog_candidates()) or default_dialog_path()
        self.command_file = CommandFile(command_file or default_command_file())
        self.close_grace_period = close_grace_period

        self._available = self.dialog_path.is_file()
        self._running = False
        self._process: Optional[subprocess.Popen] = None
        self._total_items = 0
        self._completed_items = 0
        self._lock = threading.Lock()

        if not self._available:
            logger.debug(f"Dialog not found at {self.dialog_path} - running in headless mode")

    @property
    def command_file_path(self) -> Path:
        return self.command_file.path

    @property
    def running(self) -> bool:
        return self._running

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def completed_items(self) -> int:
        return self._completed_items

    def is_available(self) -> bool:
        return self._available

    def initialize(
        self,
        title: str,
        message: str,
        total_items: int,
        icon: Optional[str] = None,
        fullscreen: bool = False,
        kiosk: bool = False,
    ) -> None:
        if not self._available:
            logger.debug("Dialog not available, skipping initialization")
            return

        self._total_items = total_items
        self._completed_items = 0

        self.command_file.ensure_directory()
        self.command_file.clear()

        arguments = build_dialog_arguments(
            title,
            message,
            self.command_file.path,
            icon=icon,
            fullscreen=fullscreen,
            kiosk=kiosk,
        )
        self._launch(arguments)

    def add_item(self, name: str, status: ItemStatus = ItemStatus.PENDING, text: str = "") -> None:
        self._write(list_item_command("add", name, status, text))
        logger.debug(f"Dialog: Added list item '{name}' with status {status.value}")

    def update_item(self, name: str, status: ItemStatus, text: str = "") -> None:
        self._write(list_item_command("update", name, status, text))

        if status.is_terminal:
            with self._lock:
                self._completed_items += 1
                percent = completion_percent(self._completed_items, self._total_items)
            self.update_progress(percent)

    def update_progress(self, percent: int) -> None:
        self._write(progress_command(percent))

    def update_progress_text(self, text: str) -> None:
        self._write(field_command("progresstext", text))

    def update_title(self, title: str) -> None:
        self._write(field_command("title", title))

    def update_message(self, message: str) -> None:
        self._write(field_command("message", message))

    def complete(self, message: str = "Setup Complete") -> None:
        self.update_progress_text(message)
        self.update_progress(100)
        self._write(field_command("button1text", DONE_BUTTON_TEXT))
        logger.info("Dialog: Marked as complete")

    def close(self) -> None:
        if not self._running:
            return

        self._write(QUIT_COMMAND)
        time.sleep(self.close_grace_period)
        self.terminate_dialog()

    def terminate_dialog(self) -> None:
        if not self._running or self._process is None:
            return

        try:
            if self._process.poll() is None:
                self._process.kill()
                self._process.wait(timeout=TERMINATE_WAIT_TIMEOUT)
        except Exception as e:
            logger.debug(f"Error terminating dialog: {e}")
        finally:
            self._process = None
            self._running = False
            logger.debug("Dialog process terminated")

    def _launch(self, arguments) -> None:
        if self._running:
            logger.warning("Dialog already running, skipping launch")
            return

        try:
            self._process = subprocess.Popen([str(self.dialog_path), *arguments])
            self._running = True
            logger.info(f"Dialog launched successfully ({self.dialog_path})")
        except Exception as e:
            logger.error(f"Failed to launch dialog: {e}")
            self._process = None
            self._running = False

    def _write(self, command: str) -> None:
        if not self._available or not self._running:
            return
        with self._lock:
            self.command_file.append(command)
