"""Domain models for the scheduling assistant."""

from __future__ import annotations

from .enums import Intent
from .models import (
    AssistantResponse,
    CalendarEvent,
    ConversationMessage,
    EventDraft,
    FreeBusyReport,
    FreeSlot,
)

__all__ = [
    "AssistantResponse",
    "CalendarEvent",
    "ConversationMessage",
    "EventDraft",
    "FreeBusyReport",
    "FreeSlot",
    "Intent",
]
