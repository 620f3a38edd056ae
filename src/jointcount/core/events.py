"""EventBus for decoupled publish/subscribe communication."""

from enum import Enum, auto
from typing import Any, Callable
from collections import defaultdict


class EventType(Enum):
    # Selection
    JOINT_TOGGLED = auto()        # data: joint_id (int), selected (bool), assessment_type (str)
    COUNT_CHANGED = auto()        # data: selected (int), total (int), assessment_type (str)

    # Hover
    HOVER_CHANGED = auto()        # data: joint_id (int | None), name (str)

    # Background image
    BACKGROUND_LOADED = auto()    # data: path (str), width (int), height (int)
    BACKGROUND_FAILED = auto()    # data: path (str), error (AssetLoadError)

    # Audio
    SOUND_PLAYED = auto()         # data: index (int)

    # Export
    SNAPSHOT_SAVED = auto()       # data: path (Path)


class EventBus:
    """Simple publish/subscribe event system."""

    def __init__(self):
        self._handlers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EventType, **data: Any) -> None:
        for handler in list(self._handlers[event_type]):
            handler(**data)

    def clear(self) -> None:
        self._handlers.clear()
