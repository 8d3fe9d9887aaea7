from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional, Sequence

from openai import OpenAI

from ..assistant import AssistantEngine
from ..config import AppSettings, get_settings
from ..domain import AssistantResponse, CalendarEvent, ConversationMessage
from .prompts import REPHRASE_TEMPLATE, SYSTEM_PROMPT

logger = logging.getLogger(__name__)

_ROLES = {"user": "user", "ai": "assistant", "assistant": "assistant"}


class AssistantOrchestrator:
    """Runs the rule engine and, when a model is configured, lets it phrase the reply.

    Structured fields always come from the rule engine; the model only touches
    ``message``. Any model failure falls back to the rule engine's wording.
    """

    def __init__(self, engine: Optional[AssistantEngine] = None, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or get_settings()
        self.engine = engine or AssistantEngine(self.settings.assistant)
        self._client: Optional[OpenAI] = None

    def _ensure_client(self) -> Optional[OpenAI]:
        if not self.settings.llm.is_configured:
            return None
        if self._client is None:
            llm = self.settings.llm
            self._client = OpenAI(api_key=llm.api_key, base_url=llm.base_url, timeout=llm.timeout_seconds)
        return self._client

    def orchestrate(
        self,
        text: str,
        *,
        events: Sequence[CalendarEvent],
        today: date,
        history: Sequence[ConversationMessage] = (),
    ) -> AssistantResponse:
        response = self.engine.respond(text, events=events, today=today, history=history)

        client = self._ensure_client()
        if client is None:
            logger.debug("Language model not configured (missing: %s)", ", ".join(self.settings.llm.missing_env_vars))
            return response

        try:
            completion = client.chat.completions.create(
                model=self.settings.llm.model,
                temperature=0.4,
                max_tokens=150,
                messages=self._build_messages(text, response.message, history),
            )
            content = (completion.choices[0].message.content or "").strip()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Language model request failed, using rule-based reply: %s", exc)
            return response

        if not content:
            return response
        return replace(response, message=content)

    def _build_messages(
        self, text: str, draft: str, history: Sequence[ConversationMessage]
    ) -> List[Dict[str, str]]:
        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        for item in history:
            role = _ROLES.get(item.type)
            if role and item.content:
                messages.append({"role": role, "content": item.content})
        messages.append({"role": "user", "content": REPHRASE_TEMPLATE.format(text=text, draft=draft)})
        return messages
