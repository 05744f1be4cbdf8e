"""
Progress Dialog - Best-effort progress UI for device setup workflows

Drives an external progress dialog (csharpDialog on Windows, swiftDialog on
macOS) from Python:
- Command-file protocol (list items, progress, titles, messages)
- Completion tracking with integer progress percentages
- Headless no-op mode when the dialog is not installed
- Console rendering and composite fan-out
- YAML-driven package manifest runner

License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"
__license__ = "MIT"

from progress_dialog.notifications import DialogNotifier, ItemStatus
from progress_dialog.runner import run_manifest

__all__ = [
    "DialogNotifier",
    "ItemStatus",
    "run_manifest",
]
