"""
Data models for calendar event payloads sent to Google.

TypedDicts mirror the Google Calendar event resource fields we emit.
"""

from typing import NotRequired, TypedDict


class EventTime(TypedDict):
    """Event boundary in Google's dateTime/timeZone form."""
    dateTime: str
    timeZone: str


class ReminderOverride(TypedDict):
    """Single reminder: method is 'popup' or 'email'."""
    method: str
    minutes: int


class RemindersBlock(TypedDict):
    """Reminder settings. useDefault is always True when emitted."""
    useDefault: bool
    overrides: NotRequired[list[ReminderOverride]]


class EnrichedEvent(TypedDict):
    """Event body for calendar insert."""
    summary: str
    description: NotRequired[str]
    start: EventTime
    end: EventTime
    colorId: NotRequired[str]
    reminders: NotRequired[RemindersBlock]
