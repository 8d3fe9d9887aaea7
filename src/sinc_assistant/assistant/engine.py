from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..config import AssistantSettings
from ..domain import AssistantResponse, CalendarEvent, ConversationMessage, Intent
from . import responses
from .availability import analyze_free_busy, find_free_slots
from .extraction import extract_event_details
from .intents import classify_intent, contains_any
from .keywords import CONFIRMATION_KEYWORDS, GROUP_KEYWORDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssistantEngine:
    """Rule-based assistant: classify the request, analyse the supplied events, compose a reply.

    The engine is stateless. Events, conversation history and the reference
    ``today`` are supplied on every call, so identical inputs always produce
    identical responses.
    """

    settings: AssistantSettings = field(default_factory=AssistantSettings)

    def window_for(self, intent: Intent) -> Optional[int]:
        """Number of days of events ``respond`` needs for ``intent``, or ``None`` if it needs none."""

        if intent is Intent.CALENDAR_ANALYSIS:
            return self.settings.analysis_window_days
        if intent is Intent.MEETING_SUGGESTION:
            return self.settings.slot_window_days
        return None

    def respond(
        self,
        text: str,
        *,
        events: Sequence[CalendarEvent],
        today: date,
        history: Sequence[ConversationMessage] = (),
    ) -> AssistantResponse:
        follow_up = self._follow_up(text, history)
        if follow_up is not None:
            return follow_up

        intent = classify_intent(text)
        if intent is Intent.GREETING:
            return responses.compose_greeting()
        if intent is Intent.CALENDAR_ANALYSIS:
            window = self.settings.analysis_window_days
            return responses.compose_calendar_analysis(
                analyze_free_busy(events, today, window),
                has_events=bool(events),
                window_days=window,
                free_preview=self.settings.free_day_preview,
                busy_preview=self.settings.busy_day_preview,
            )
        if intent is Intent.MEETING_SUGGESTION:
            window = self.settings.slot_window_days
            return responses.compose_meeting_suggestion(
                find_free_slots(events, today, window),
                window_days=window,
                limit=self.settings.suggestion_limit,
            )
        if intent is Intent.EVENT_CREATION:
            return responses.compose_event_creation(extract_event_details(text, today))
        return responses.compose_help()

    def _follow_up(self, text: str, history: Sequence[ConversationMessage]) -> Optional[AssistantResponse]:
        if not history or history[-1].event_data is None:
            return None
        draft = history[-1].event_data
        lowered = text.lower()
        if contains_any(lowered, CONFIRMATION_KEYWORDS):
            logger.debug("Confirming pending draft %r", draft.title)
            return responses.compose_confirmation(draft)
        if contains_any(lowered, GROUP_KEYWORDS):
            logger.debug("Attaching pending draft %r to a group", draft.title)
            return responses.compose_group_follow_up(draft)
        return None
