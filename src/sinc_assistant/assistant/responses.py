"""Message templates and assembly of :class:`AssistantResponse` objects."""

from __future__ import annotations

from typing import Sequence

from ..domain import AssistantResponse, EventDraft, FreeBusyReport, FreeSlot, Intent
from .extraction import ExtractedDetails

GREETING_MESSAGE = (
    "Ahoj! Jsem tvůj kalendářový asistent. Umím najít volné dny, navrhnout termín schůzky "
    "nebo připravit novou událost. S čím ti můžu pomoct?"
)
HELP_MESSAGE = (
    "Můžu ti pomoct s kalendářem. Zkus například: \"kdy mám volno\", "
    "\"kdy se můžeme sejít\" nebo \"schůzka zítra v 14:00\"."
)
CLARIFICATION_MESSAGE = (
    "Rozumím, že chceš vytvořit událost. Můžeš mi prosím poskytnout datum a čas? "
    "Například: \"zítra 14:00\" nebo \"v pátek večer\""
)


def _join(items: Sequence[str]) -> str:
    return ", ".join(items)


def compose_greeting() -> AssistantResponse:
    return AssistantResponse(message=GREETING_MESSAGE, type=Intent.GREETING)


def compose_help() -> AssistantResponse:
    return AssistantResponse(message=HELP_MESSAGE, type=Intent.HELP)


def compose_calendar_analysis(
    report: FreeBusyReport,
    *,
    has_events: bool,
    window_days: int,
    free_preview: int = 5,
    busy_preview: int = 3,
) -> AssistantResponse:
    if not has_events:
        message = (
            f"Tvůj kalendář je na příštích {window_days} dní úplně prázdný! "
            "Můžeš si naplánovat cokoliv."
        )
        return AssistantResponse(message=message, type=Intent.CALENDAR_ANALYSIS)

    if report.free_days:
        message = (
            f"Na příštích {window_days} dní máš {len(report.free_days)} volných dní. "
            f"Nejbližší volné dny: {_join(report.free_days[:free_preview])}."
        )
    else:
        message = f"Na příštích {window_days} dní nemáš žádný úplně volný den."
    if report.busy_days:
        message += f" Obsazené dny: {_join(report.busy_days[:busy_preview])}."
    return AssistantResponse(message=message, type=Intent.CALENDAR_ANALYSIS)


def compose_meeting_suggestion(slots: Sequence[FreeSlot], *, window_days: int, limit: int = 5) -> AssistantResponse:
    top = list(slots[:limit])
    if not top:
        message = f"V příštích {window_days} dnech jsem bohužel nenašel žádný volný termín."
        return AssistantResponse(message=message, type=Intent.MEETING_SUGGESTION, suggestions=[])

    listed = _join(f"{slot.day_label} v {slot.time}" for slot in top)
    message = f"Tady jsou nejbližší volné termíny pro schůzku: {listed}. Který ti vyhovuje?"
    return AssistantResponse(message=message, type=Intent.MEETING_SUGGESTION, suggestions=top)


def compose_event_creation(details: ExtractedDetails) -> AssistantResponse:
    if details.has_date and details.has_time:
        until = f" až {details.end_time}" if details.end_time else ""
        message = (
            f"Vytvořím událost \"{details.title}\" na {details.date} v {details.time}{until}. "
            "Chceš ji přidat do nějaké konkrétní skupiny?"
        )
        return AssistantResponse(message=message, type=Intent.EVENT_CREATION, event_data=details.draft)
    if details.has_date:
        message = (
            f"Vidím, že chceš vytvořit událost \"{details.title}\" na {details.date}. "
            "Můžeš mi prosím upřesnit čas?"
        )
    elif details.has_time:
        message = (
            f"Vidím, že chceš vytvořit událost \"{details.title}\" v {details.time}. "
            "Můžeš mi prosím upřesnit datum?"
        )
    else:
        message = CLARIFICATION_MESSAGE
    return AssistantResponse(message=message, type=Intent.EVENT_CREATION)


def compose_confirmation(draft: EventDraft) -> AssistantResponse:
    message = (
        f"Skvělé! Vytvořím událost \"{draft.title}\" na {draft.date} v {draft.time}. "
        "Událost bude přidána do vaší skupiny."
    )
    return AssistantResponse(message=message, type=Intent.EVENT_CREATION, event_data=draft)


def compose_group_follow_up(draft: EventDraft) -> AssistantResponse:
    message = (
        "Rozumím, chcete událost přidat do skupiny. "
        f"Vytvořím událost \"{draft.title}\" na {draft.date} v {draft.time}."
    )
    return AssistantResponse(message=message, type=Intent.EVENT_CREATION, event_data=draft)
