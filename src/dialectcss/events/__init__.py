"""Event system: bus and event types for compile and coordinator lifecycle."""

from dialectcss.events.bus import EventBus
from dialectcss.events.types import (
    CoordinatorActivated,
    CoordinatorIdled,
    DecorationsCleared,
    DecorationsReconciled,
    InputChanged,
    StylesheetCompiled,
    StylesParsed,
)

__all__ = [
    "EventBus",
    "CoordinatorActivated",
    "CoordinatorIdled",
    "DecorationsCleared",
    "DecorationsReconciled",
    "InputChanged",
    "StylesheetCompiled",
    "StylesParsed",
]
