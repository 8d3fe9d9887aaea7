from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple

from ..domain import EventDraft
from ..domain.models import normalize_clock
from .keywords import (
    DEFAULT_TITLE,
    NEXT_MONTH_KEYWORD,
    RELATIVE_DATE_KEYWORDS,
    TIME_OF_DAY_KEYWORDS,
    TITLE_KEYWORDS,
)

_EXPLICIT_TIME = re.compile(r"\d{1,2}:\d{2}")


@dataclass(frozen=True, slots=True)
class ExtractedDetails:
    title: str
    date: Optional[str]
    time: Optional[str]
    end_time: Optional[str]
    description: str

    @property
    def has_date(self) -> bool:
        return self.date is not None

    @property
    def has_time(self) -> bool:
        return self.time is not None

    @property
    def draft(self) -> Optional[EventDraft]:
        if not (self.has_date or self.has_time):
            return None
        return EventDraft(
            title=self.title,
            date=self.date,
            time=self.time,
            end_time=self.end_time,
            description=self.description,
        )


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole months, clamping the day to the target month's length."""

    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _relative_date_rules(today: date) -> List[Tuple[str, date]]:
    rules = [(keyword, today + timedelta(days=offset)) for keyword, offset in RELATIVE_DATE_KEYWORDS]
    rules.append((NEXT_MONTH_KEYWORD, add_months(today, 1)))
    return rules


def extract_date(lowered: str, today: date) -> Optional[str]:
    for keyword, resolved in _relative_date_rules(today):
        if keyword in lowered:
            return resolved.isoformat()
    return None


def extract_explicit_times(text: str) -> List[str]:
    """Return valid ``HH:MM`` tokens in order of appearance, zero-padded."""

    times = []
    for token in _EXPLICIT_TIME.findall(text):
        normalized = normalize_clock(token)
        if normalized is not None:
            times.append(normalized)
    return times


def extract_times(lowered: str) -> Tuple[Optional[str], Optional[str]]:
    start: Optional[str] = None
    for keyword, clock in TIME_OF_DAY_KEYWORDS:
        if keyword in lowered:
            start = clock
            break

    explicit = extract_explicit_times(lowered)
    if not explicit:
        return start, None
    end = explicit[1] if len(explicit) > 1 else None
    return explicit[0], end


def extract_title(text: str, lowered: str) -> str:
    for keywords, title in TITLE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return title
    tokens = text.split()
    if not tokens:
        return DEFAULT_TITLE
    return tokens[0].capitalize()


def extract_event_details(text: str, today: date) -> ExtractedDetails:
    lowered = text.lower()
    start, end = extract_times(lowered)
    return ExtractedDetails(
        title=extract_title(text, lowered),
        date=extract_date(lowered, today),
        time=start,
        end_time=end,
        description=text,
    )


def extract_event_draft(text: str, today: date) -> Optional[EventDraft]:
    return extract_event_details(text, today).draft
