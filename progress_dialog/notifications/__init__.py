"""
Progress Dialog Notifications - Pluggable progress notification system

Drives an external progress dialog (csharpDialog/swiftDialog) through its
command file, with terminal rendering and a headless no-op fallback.

Usage:
    from progress_dialog.notifications import DialogNotifier, ItemStatus

    with DialogNotifier() as notifier:
        notifier.initialize("Setting up your device", "Installing apps", total_items=2)
        notifier.add_item("Git")
        notifier.notify_install_started("Git")
        notifier.notify_package_success("Git")
        notifier.complete()
        notifier.close()
"""

from .models import ItemStatus, STATUS_INFO, completion_percent
from .commands import (
    CommandFile,
    build_dialog_arguments,
    clamp_percent,
    field_command,
    list_item_command,
    progress_command,
)
from .interface import ProgressNotifierInterface
from .base import BaseNotifier
from .null import NullNotifier
from .dialog import DialogNotifier
from .console import ConsoleNotifier
from .composite import CompositeNotifier
from .factory import create_notifier_from_config

__all__ = [
    # Models
    "ItemStatus",
    "STATUS_INFO",
    "completion_percent",
    # Command protocol
    "CommandFile",
    "build_dialog_arguments",
    "clamp_percent",
    "field_command",
    "list_item_command",
    "progress_command",
    # Interface
    "ProgressNotifierInterface",
    "BaseNotifier",
    # Implementations
    "NullNotifier",
    "DialogNotifier",
    "ConsoleNotifier",
    "CompositeNotifier",
    # Factory
    "create_notifier_from_config",
]
