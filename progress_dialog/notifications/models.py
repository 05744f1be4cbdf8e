"""
Notification Models - Status values for dialog list items

Defines the list item statuses understood by csharpDialog and swiftDialog,
plus the display table used when rendering the same statuses in a terminal.
"""

from enum import Enum


class ItemStatus(Enum):
    """List item status indicators matching csharpDialog/swiftDialog"""
    NONE = "none"
    PENDING = "pending"
    WAIT = "wait"            # Work in flight (spinner in the dialog)
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"
    PROGRESS = "progress"

    @property
    def is_terminal(self) -> bool:
        """Check if this status counts an item as completed"""
        return self in (ItemStatus.SUCCESS, ItemStatus.FAIL)

    @property
    def emoji(self) -> str:
        return STATUS_INFO.get(self, ("❓", "Unknown"))[0]

    @property
    def description(self) -> str:
        return STATUS_INFO.get(self, ("❓", "Unknown"))[1]


# Status display configuration (emoji, description)
STATUS_INFO = {
    ItemStatus.NONE: ("▫️", "None"),
    ItemStatus.PENDING: ("⏳", "Pending"),
    ItemStatus.WAIT: ("🔄", "Working"),
    ItemStatus.SUCCESS: ("✅", "Success"),
    ItemStatus.FAIL: ("❌", "Failed"),
    ItemStatus.ERROR: ("⚠️", "Error"),
    ItemStatus.PROGRESS: ("📊", "In progress"),
}


def completion_percent(completed: int, total: int) -> int:
    """Integer completion percentage; 0 when there is nothing to count."""
    if total <= 0:
        return 0
    return (completed * 100) // total
