from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Sequence

from ..assistant import classify_intent
from ..data import EventStoreError
from ..domain import AssistantResponse, CalendarEvent, ConversationMessage, Intent
from ..llm import AssistantOrchestrator
from .context import ServiceContext

logger = logging.getLogger(__name__)

STORE_FAILURE_MESSAGE = "Omlouvám se, nepodařilo se mi načíst tvůj kalendář. Zkus to prosím znovu."


@dataclass(slots=True)
class AssistantService:
    context: ServiceContext
    orchestrator: AssistantOrchestrator = field(init=False)

    def __post_init__(self) -> None:
        self.orchestrator = AssistantOrchestrator(settings=self.context.settings)

    def _load_events(self, user_id: str, intent: Intent, today: date) -> List[CalendarEvent]:
        window = self.orchestrator.engine.window_for(intent)
        if window is None:
            return []
        return self.context.events.fetch_for_member(user_id, today, today + timedelta(days=window))

    def process(
        self,
        user_id: str,
        text: str,
        *,
        history: Sequence[ConversationMessage] = (),
        today: date,
    ) -> AssistantResponse:
        intent = classify_intent(text)
        logger.info("Assistant request from user %s classified as %s", user_id, intent.value)
        try:
            events = self._load_events(user_id, intent, today)
        except EventStoreError:
            logger.exception("Event store query failed for user %s", user_id)
            return AssistantResponse(message=STORE_FAILURE_MESSAGE, type=Intent.HELP)
        return self.orchestrator.orchestrate(text, events=events, today=today, history=history)
