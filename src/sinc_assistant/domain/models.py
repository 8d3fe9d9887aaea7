from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from .enums import Intent

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")


def _parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def normalize_clock(value: Any) -> Optional[str]:
    """Return ``value`` as a zero-padded ``HH:MM`` string, or ``None`` if it is not a clock time."""

    if not isinstance(value, str):
        return None
    match = _CLOCK_PATTERN.match(value.strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return f"{hour:02d}:{minute:02d}"


@dataclass(frozen=True, slots=True)
class CalendarEvent:
    date: date
    time: Optional[str] = None
    end_time: Optional[str] = None
    title: str = ""
    group_id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        end_raw = record.get("end_time", record.get("endTime"))
        group = record.get("group_id", record.get("group"))
        return cls(
            date=_parse_date(record["date"]),
            time=normalize_clock(record.get("time")),
            end_time=normalize_clock(end_raw),
            title=str(record.get("title") or ""),
            group_id=str(group) if group is not None else None,
        )


@dataclass(frozen=True, slots=True)
class EventDraft:
    title: str
    date: Optional[str]
    time: Optional[str]
    end_time: Optional[str]
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventDraft":
        return cls(
            title=str(data.get("title") or ""),
            date=data.get("date"),
            time=data.get("time"),
            end_time=data.get("endTime", data.get("end_time")),
            description=str(data.get("description") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "date": self.date,
            "time": self.time,
            "endTime": self.end_time,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class FreeSlot:
    date: str
    time: str
    day_label: str

    def to_dict(self) -> Dict[str, str]:
        return {"date": self.date, "time": self.time, "dayLabel": self.day_label}


@dataclass(frozen=True, slots=True)
class FreeBusyReport:
    """Free and busy calendar days; ``*_days`` hold the labelled form of ``*_dates``."""

    free_dates: List[date] = field(default_factory=list)
    busy_dates: List[date] = field(default_factory=list)
    free_days: List[str] = field(default_factory=list)
    busy_days: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ConversationMessage:
    type: str
    content: str = ""
    event_data: Optional[EventDraft] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConversationMessage":
        raw_draft = data.get("eventData")
        return cls(
            type=str(data.get("type") or ""),
            content=str(data.get("content") or ""),
            event_data=EventDraft.from_dict(raw_draft) if isinstance(raw_draft, dict) else None,
        )


@dataclass(frozen=True, slots=True)
class AssistantResponse:
    message: str
    type: Intent
    event_data: Optional[EventDraft] = None
    suggestions: Optional[List[FreeSlot]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "message": self.message,
            "eventData": self.event_data.to_dict() if self.event_data else None,
            "type": self.type.value,
        }
        if self.suggestions is not None:
            payload["suggestions"] = [slot.to_dict() for slot in self.suggestions]
        return payload
