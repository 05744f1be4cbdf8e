"""
Platform Paths - Default locations for the dialog executable and command file

Portable Design:
- Windows: csharpDialog under Program Files, command file under ProgramData
- macOS: swiftDialog in /usr/local/bin, command file under /Library/Application Support
- Other platforms: swiftDialog-compatible binary in /usr/local/bin, command file under /var/tmp
- Callers degrade to headless mode when no executable is found
"""

import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

APP_DIR_NAME = "ManagedBootstrap"
COMMAND_FILE_NAME = "dialog_commands.txt"


def default_dialog_path(platform: Optional[str] = None) -> Path:
    """Default dialog executable for the given (or current) platform"""
    platform = platform or sys.platform
    if platform.startswith("win"):
        program_files = os.environ.get("ProgramFiles", "C:\\Program Files")
        return Path(program_files) / "csharpDialog" / "dialog.exe"
    return Path("/usr/local/bin/dialog")


def dialog_candidates(platform: Optional[str] = None) -> List[Path]:
    """Known install locations, most specific first"""
    platform = platform or sys.platform
    candidates = [default_dialog_path(platform)]
    if platform == "darwin":
        candidates.append(Path("/Library/Application Support/Dialog/Dialog.app/Contents/MacOS/Dialog"))
    return candidates


def shared_data_dir(platform: Optional[str] = None) -> Path:
    """Machine-wide application data directory for the given (or current) platform"""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return Path(os.environ.get("ProgramData", "C:\\ProgramData"))
    if platform == "darwin":
        return Path("/Library/Application Support")
    return Path("/var/tmp")


def default_command_file(platform: Optional[str] = None) -> Path:
    return shared_data_dir(platform) / APP_DIR_NAME / COMMAND_FILE_NAME


def find_dialog_executable(candidates: Iterable[Union[str, Path]]) -> Optional[Path]:
    """
    Return the first candidate that exists as a file

    Args:
        candidates: Paths to check in priority order (e.g. configured path first,
            platform default last)

    Returns:
        Path of the first existing executable, or None if none exist
    """
    for candidate in candidates:
        if candidate and Path(candidate).is_file():
            return Path(candidate)
    return None
