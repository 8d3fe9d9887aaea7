from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from ..domain import CalendarEvent, FreeBusyReport, FreeSlot
from .keywords import DEFAULT_CANDIDATE_TIMES, WEEKDAY_LABELS

logger = logging.getLogger(__name__)


def _date_range(start: date, days: int) -> Iterable[date]:
    for index in range(days):
        yield start + timedelta(days=index)


def weekday_label(day: date) -> str:
    # date.weekday() counts from Monday; the label table starts on Sunday.
    return WEEKDAY_LABELS[(day.weekday() + 1) % 7]


def format_day(day: date) -> str:
    return f"{weekday_label(day)} {day.day}.{day.month}."


def add_hour(clock: str) -> str:
    """Add one hour to ``HH:MM``, wrapping 23:xx to 00:xx on the same day."""

    hour, minute = clock.split(":")
    return f"{(int(hour) + 1) % 24:02d}:{minute}"


def effective_end(event: CalendarEvent) -> Optional[str]:
    if event.time is None:
        return None
    return event.end_time or add_hour(event.time)


def overlaps(event: CalendarEvent, clock: str) -> bool:
    """Whether ``clock`` falls in the half-open busy interval of a timed event."""

    end = effective_end(event)
    if event.time is None or end is None:
        return False
    return event.time <= clock < end


def analyze_free_busy(events: Sequence[CalendarEvent], today: date, window_days: int = 30) -> FreeBusyReport:
    busy_dates = sorted({event.date for event in events})
    busy_lookup = set(busy_dates)
    free_dates = [day for day in _date_range(today, window_days) if day not in busy_lookup]
    logger.debug("Free/busy over %s days: %s free, %s busy", window_days, len(free_dates), len(busy_dates))
    return FreeBusyReport(
        free_dates=free_dates,
        busy_dates=busy_dates,
        free_days=[format_day(day) for day in free_dates],
        busy_days=[format_day(day) for day in busy_dates],
    )


def find_free_slots(
    events: Sequence[CalendarEvent],
    today: date,
    window_days: int = 14,
    candidate_times: Sequence[str] = DEFAULT_CANDIDATE_TIMES,
) -> List[FreeSlot]:
    by_day: Dict[date, List[CalendarEvent]] = {}
    for event in events:
        by_day.setdefault(event.date, []).append(event)

    slots: List[FreeSlot] = []
    for day in _date_range(today, window_days):
        day_events = by_day.get(day, [])
        label = format_day(day)
        for clock in candidate_times:
            if any(overlaps(event, clock) for event in day_events):
                continue
            slots.append(FreeSlot(date=day.isoformat(), time=clock, day_label=label))
    logger.debug("Found %s free slots over %s days", len(slots), window_days)
    return slots
