"""
Dialog Commands - Line protocol spoken to the dialog process

The dialog polls a command file and applies each new line. Lines are either
`key: value` pairs or list item commands:

    progress: 42
    progresstext: Installing Git...
    listitem: add, title: Git, status: pending
    listitem: update, title: Git, status: success, statustext: Installed
    quit

The serializer functions below never touch the filesystem; CommandFile owns
the file itself.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .models import ItemStatus

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"
LIST_ITEM_ACTIONS = ("add", "update")

INITIAL_PROGRESS_TEXT = "Preparing..."
INITIAL_BUTTON_TEXT = "Please Wait"
DONE_BUTTON_TEXT = "Done"


def clamp_percent(percent: int) -> int:
    return max(0, min(100, int(percent)))


def field_command(key: str, value: object) -> str:
    return f"{key}: {value}"


def progress_command(percent: int) -> str:
    return field_command("progress", clamp_percent(percent))


def list_item_command(action: str, title: str, status: ItemStatus, status_text: str = "") -> str:
    """
    Build a list item command line.

    Args:
        action: "add" or "update"
        title: List item name shown in the dialog
        status: Item status (written as its lowercase wire name)
        status_text: Optional text shown next to the status

    Returns:
        Command line without trailing newline

    Raises:
        ValueError: If action is not a known list item action
    """
    if action not in LIST_ITEM_ACTIONS:
        raise ValueError(f"Unknown list item action: {action}")

    command = f"listitem: {action}, title: {title}, status: {status.value}"
    if status_text:
        command += f", statustext: {status_text}"
    return command


def build_dialog_arguments(
    title: str,
    message: str,
    command_file: Union[str, Path],
    icon: Optional[str] = None,
    fullscreen: bool = False,
    kiosk: bool = False,
) -> List[str]:
    """Build the dialog argument list (executable not included)."""
    arguments = [
        "--title", title,
        "--message", message,
        "--progressbar",
        "--progress", "0",
        "--progresstext", INITIAL_PROGRESS_TEXT,
        "--commandfile", str(command_file),
        "--button1text", INITIAL_BUTTON_TEXT,
    ]

    if icon:
        arguments.extend(["--icon", icon])
    if fullscreen:
        arguments.append("--fullscreen")
    if kiosk:
        arguments.append("--kiosk")

    return arguments


class CommandFile:
    """Append-only command file shared with the dialog process."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def ensure_directory(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            return True
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to create command file directory {self.path.parent}: {e}")
            return False

    def clear(self) -> bool:
        try:
            self.path.write_text("", encoding="utf-8")
            return True
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to clear command file: {e}")
            return False

    def append(self, command: str) -> bool:
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(command + "\n")
            return True
        except (OSError, ValueError) as e:
            logger.debug(f"Failed to write dialog command: {e}")
            return False

    def read_commands(self) -> List[str]:
        """Return the commands written so far (empty if the file is missing)."""
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []
