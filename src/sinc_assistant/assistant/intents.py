from __future__ import annotations

import logging
from typing import Tuple

from ..domain import Intent
from .keywords import (
    CALENDAR_ANALYSIS_KEYWORDS,
    EVENT_CREATION_KEYWORDS,
    GREETING_KEYWORDS,
    MEETING_SUGGESTION_KEYWORDS,
)

logger = logging.getLogger(__name__)

# Precedence order; "schůzka" sits in both meeting and creation tables and resolves to meeting.
INTENT_RULES: Tuple[Tuple[Intent, Tuple[str, ...]], ...] = (
    (Intent.GREETING, GREETING_KEYWORDS),
    (Intent.CALENDAR_ANALYSIS, CALENDAR_ANALYSIS_KEYWORDS),
    (Intent.MEETING_SUGGESTION, MEETING_SUGGESTION_KEYWORDS),
    (Intent.EVENT_CREATION, EVENT_CREATION_KEYWORDS),
)


def contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify_intent(text: str) -> Intent:
    """Pick the first intent whose keyword table has a substring hit in ``text``."""

    lowered = text.lower()
    for intent, keywords in INTENT_RULES:
        if contains_any(lowered, keywords):
            logger.debug("Classified %r as %s", text, intent.value)
            return intent
    return Intent.HELP
