from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..assistant import (
    AssistantEngine,
    analyze_free_busy as _analyze_free_busy,
    classify_intent as _classify_intent,
    extract_event_details,
    find_free_slots as _find_free_slots,
)
from ..config import get_settings
from ..domain import CalendarEvent, ConversationMessage
from .registry import get_api_functions, register_api


def _parse_today(value: Optional[str]) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO date: {value}") from exc


def _parse_events(records: Optional[List[Dict[str, Any]]]) -> List[CalendarEvent]:
    events = []
    for record in records or []:
        if not isinstance(record, dict):
            raise ValueError(f"Invalid event record {record!r}: expected an object")
        try:
            events.append(CalendarEvent.from_record(record))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid event record {record!r}: {exc}") from exc
    return events


@register_api(
    "classify_intent",
    description="Classify a free-text request as greeting, calendar analysis, meeting suggestion, event creation or help.",
    category="assistant",
    tags=("intent", "read"),
)
def classify_intent(text: str) -> Dict[str, Any]:
    return {"text": text, "intent": _classify_intent(text).value}


@register_api(
    "extract_event_draft",
    description="Extract title, date and start/end time from a free-text event request.",
    category="assistant",
    tags=("extraction", "read"),
)
def extract_event_draft(text: str, today: Optional[str] = None) -> Dict[str, Any]:
    details = extract_event_details(text, _parse_today(today))
    draft = details.draft
    return {"title": details.title, "eventData": draft.to_dict() if draft else None}


@register_api(
    "analyze_free_busy",
    description="List calendar days with no events and days with at least one event.",
    category="availability",
    tags=("availability", "read"),
)
def analyze_free_busy(
    events: Optional[List[Dict[str, Any]]] = None, today: Optional[str] = None, window_days: int = 30
) -> Dict[str, Any]:
    report = _analyze_free_busy(_parse_events(events), _parse_today(today), window_days)
    return {
        "freeDays": report.free_days,
        "busyDays": report.busy_days,
        "freeDates": [day.isoformat() for day in report.free_dates],
        "busyDates": [day.isoformat() for day in report.busy_dates],
    }


@register_api(
    "find_free_slots",
    description="List free working-hour slots that do not overlap existing events.",
    category="availability",
    tags=("availability", "read"),
)
def find_free_slots(
    events: Optional[List[Dict[str, Any]]] = None, today: Optional[str] = None, window_days: int = 14
) -> Dict[str, Any]:
    slots = _find_free_slots(_parse_events(events), _parse_today(today), window_days)
    return {"slots": [slot.to_dict() for slot in slots]}


@register_api(
    "assistant_reply",
    description="Run the rule-based assistant on a message against the supplied events.",
    category="assistant",
    tags=("assistant", "read"),
)
def assistant_reply(
    text: str,
    events: Optional[List[Dict[str, Any]]] = None,
    today: Optional[str] = None,
    history: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    engine = AssistantEngine(get_settings().assistant)
    response = engine.respond(
        text,
        events=_parse_events(events),
        today=_parse_today(today),
        history=[ConversationMessage.from_dict(item) for item in history or []],
    )
    return response.to_dict()


@register_api(
    "list_available_tools",
    description="List all deterministic assistant functions with descriptions, categories, and parameters.",
    category="meta",
    tags=("tools", "metadata"),
)
def list_available_tools() -> Dict[str, List[dict]]:
    return {"tools": [func.describe() for func in sorted(get_api_functions(), key=lambda item: item.name)]}
