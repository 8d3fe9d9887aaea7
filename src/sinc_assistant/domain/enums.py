from __future__ import annotations

from enum import Enum


class Intent(str, Enum):
    GREETING = "greeting"
    CALENDAR_ANALYSIS = "calendar_analysis"
    MEETING_SUGGESTION = "meeting_suggestion"
    EVENT_CREATION = "event_creation"
    HELP = "help"
