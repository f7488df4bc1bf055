"""
Event type inference and color lookup.
"""

from enum import Enum

from core.config import COLOR_MAPPING, TYPE_RULES


class EventType(str, Enum):
    """Semantic event categories, in classification priority order."""

    FAMILY = "family"
    WORK = "work"
    SELF_IMPROVEMENT = "self-improvement"
    PERSONAL = "personal"


def infer_event_type(text: str | None) -> EventType | None:
    """
    Infer an event type from free text.

    Types are checked in declaration order and each type's triggers in the
    order they are configured; the first trigger contained in the text
    decides. Matching is case-sensitive substring containment.
    """
    if not text:
        return None

    for event_type in EventType:
        for trigger in TYPE_RULES.get(event_type.value, ()):
            if trigger in text:
                return event_type

    return None


def color_for(event_type: EventType | str | None) -> str | None:
    """Return the calendar colorId for an event type, or None if unmapped."""
    if event_type is None:
        return None
    if isinstance(event_type, EventType):
        event_type = event_type.value
    return COLOR_MAPPING.get(event_type)
