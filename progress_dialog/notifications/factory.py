"""Notifier Factory - Create notifiers from configuration"""

import logging
from typing import Any, Dict, List

from progress_dialog.config import ConfigError

from .interface import ProgressNotifierInterface
from .null import NullNotifier
from .console import ConsoleNotifier
from .dialog import DEFAULT_CLOSE_GRACE_PERIOD, DialogNotifier
from .composite import CompositeNotifier

logger = logging.getLogger(__name__)


def _grace_period(value: Any) -> float:
    if value is None:
        return DEFAULT_CLOSE_GRACE_PERIOD
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid close_grace_period: {value!r}") from e
    if seconds < 0:
        raise ConfigError(f"close_grace_period must not be negative: {value!r}")
    return seconds


def create_notifier_from_config(config: Dict[str, Any]) -> ProgressNotifierInterface:
    """
    Create a notifier from configuration dictionary.

    The dialog notifier is enabled unless explicitly disabled; it stays
    headless on machines without the dialog executable. The console notifier
    is opt-in.
    """
    notifications_config = config.get("notifications") or {}
    notifiers: List[ProgressNotifierInterface] = []

    # Dialog notifier
    dialog_config = notifications_config.get("dialog") or {}
    if dialog_config.get("enabled", True):
        dialog = DialogNotifier(
            dialog_path=dialog_config.get("path"),
            command_file=dialog_config.get("command_file"),
            close_grace_period=_grace_period(dialog_config.get("close_grace_period", DEFAULT_CLOSE_GRACE_PERIOD)),
        )
        if not dialog.is_available():
            logger.info(f"Dialog executable not found at {dialog.dialog_path}, progress UI disabled")
        notifiers.append(dialog)

    # Console notifier
    console_config = notifications_config.get("console") or {}
    if console_config.get("enabled", False):
        notifiers.append(ConsoleNotifier(
            show_progress_bar=console_config.get("show_progress_bar", True),
        ))

    if not notifiers:
        return NullNotifier()
    elif len(notifiers) == 1:
        return notifiers[0]
    else:
        return CompositeNotifier(notifiers)
