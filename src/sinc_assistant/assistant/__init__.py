"""Rule-based scheduling assistant: intent classification, free/busy analysis and event extraction."""

from __future__ import annotations

from .availability import analyze_free_busy, find_free_slots
from .engine import AssistantEngine
from .extraction import ExtractedDetails, extract_event_details, extract_event_draft
from .intents import classify_intent

__all__ = [
    "AssistantEngine",
    "ExtractedDetails",
    "analyze_free_busy",
    "classify_intent",
    "extract_event_details",
    "extract_event_draft",
    "find_free_slots",
]
