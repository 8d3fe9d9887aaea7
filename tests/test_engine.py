"""
Tests for the rule-based assistant engine and response composition.

Tests cover:
- Message variants per intent
- Display truncation of free/busy days and slot suggestions
- Draft gating in event creation replies
- Conversation follow-ups on a pending draft
- Wire shape and idempotence
"""

import pytest

from sinc_assistant.assistant import AssistantEngine
from sinc_assistant.assistant.responses import CLARIFICATION_MESSAGE, GREETING_MESSAGE, HELP_MESSAGE
from sinc_assistant.config import AssistantSettings
from sinc_assistant.domain import ConversationMessage, EventDraft, Intent


@pytest.fixture
def engine():
    return AssistantEngine(AssistantSettings())


@pytest.fixture
def pending_draft():
    return EventDraft(title="Večeře", date="2024-01-11", time="19:00", end_time=None, description="večeře zítra večer")


class TestGreetingAndHelp:
    """Fixed replies."""

    def test_greeting(self, engine, today):
        response = engine.respond("Ahoj", events=[], today=today)
        assert response.type is Intent.GREETING
        assert response.message == GREETING_MESSAGE
        assert response.to_dict() == {"message": GREETING_MESSAGE, "eventData": None, "type": "greeting"}

    def test_help(self, engine, today):
        response = engine.respond("jaké je počasí", events=[], today=today)
        assert response.type is Intent.HELP
        assert response.message == HELP_MESSAGE


class TestCalendarAnalysis:
    """Free/busy replies."""

    def test_empty_calendar_short_circuit(self, engine, today):
        response = engine.respond("kdy mám volno", events=[], today=today)
        assert response.type is Intent.CALENDAR_ANALYSIS
        assert "úplně prázdný" in response.message
        assert "Nejbližší volné dny" not in response.message
        assert "St 10.1." not in response.message

    def test_lists_first_free_and_busy_days(self, engine, today, make_event):
        events = [make_event(day) for day in ("2024-01-10", "2024-01-11", "2024-01-12", "2024-01-13")]
        message = engine.respond("kdy mám volno", events=events, today=today).message
        assert "máš 26 volných dní" in message
        assert "Ne 14.1., Po 15.1., Út 16.1., St 17.1., Čt 18.1." in message
        assert "Pá 19.1." not in message
        assert "Obsazené dny: St 10.1., Čt 11.1., Pá 12.1." in message
        assert "So 13.1." not in message

    def test_no_free_day(self, today, make_event):
        engine = AssistantEngine(AssistantSettings(analysis_window_days=2))
        events = [make_event("2024-01-10"), make_event("2024-01-11")]
        message = engine.respond("kdy mám volno", events=events, today=today).message
        assert "nemáš žádný úplně volný den" in message

    def test_analysis_has_no_suggestions(self, engine, today):
        assert "suggestions" not in engine.respond("kdy mám volno", events=[], today=today).to_dict()


class TestMeetingSuggestion:
    """Free slot suggestions."""

    def test_top_five_in_chronological_order(self, engine, today, make_event):
        events = [make_event("2024-01-10", "09:00", "11:00")]
        payload = engine.respond("Kdy se můžeme sejít?", events=events, today=today).to_dict()
        assert payload["type"] == "meeting_suggestion"
        assert payload["eventData"] is None
        assert [slot["time"] for slot in payload["suggestions"]] == ["11:00", "14:00", "15:00", "16:00", "17:00"]
        assert payload["suggestions"][0] == {"date": "2024-01-10", "time": "11:00", "dayLabel": "St 10.1."}
        assert "St 10.1. v 11:00" in payload["message"]

    def test_fully_booked(self, engine, today, make_event):
        events = [make_event(f"2024-01-{day:02d}", "00:00", "23:59") for day in range(10, 24)]
        response = engine.respond("pozvat kamaráda", events=events, today=today)
        assert response.suggestions == []
        assert "nenašel" in response.message


class TestEventCreation:
    """Reply variants gated on extracted date and time."""

    def test_full_draft_is_attached(self, engine, today):
        text = "vytvoř meeting zítra v 14:00 a 15:00"
        payload = engine.respond(text, events=[], today=today).to_dict()
        assert payload["type"] == "event_creation"
        assert payload["eventData"] == {
            "title": "Schůzka",
            "date": "2024-01-11",
            "time": "14:00",
            "endTime": "15:00",
            "description": text,
        }
        assert "v 14:00 až 15:00" in payload["message"]
        assert "skupiny" in payload["message"]

    def test_date_only_asks_for_time(self, engine, today):
        response = engine.respond("zítra", events=[], today=today)
        assert response.event_data is None
        assert "2024-01-11" in response.message
        assert "upřesnit čas" in response.message

    def test_time_only_asks_for_date(self, engine, today):
        response = engine.respond("doktor v 14:00", events=[], today=today)
        assert response.event_data is None
        assert "upřesnit datum" in response.message
        assert '"Doktor"' in response.message

    def test_neither_asks_for_both(self, engine, today):
        response = engine.respond("přidej něco", events=[], today=today)
        assert response.event_data is None
        assert response.message == CLARIFICATION_MESSAGE


class TestFollowUps:
    """Replies to a previous draft in the conversation history."""

    def test_confirmation_reattaches_draft(self, engine, today, pending_draft):
        history = [ConversationMessage(type="ai", content="...", event_data=pending_draft)]
        response = engine.respond("ano", events=[], today=today, history=history)
        assert response.type is Intent.EVENT_CREATION
        assert response.event_data == pending_draft
        assert response.message.startswith("Skvělé!")

    def test_group_mention_reattaches_draft(self, engine, today, pending_draft):
        history = [ConversationMessage(type="ai", content="...", event_data=pending_draft)]
        response = engine.respond("přidej do skupiny Rodina", events=[], today=today, history=history)
        assert response.event_data == pending_draft
        assert "přidat do skupiny" in response.message

    def test_confirmation_without_pending_draft(self, engine, today):
        history = [ConversationMessage(type="ai", content="Ahoj")]
        response = engine.respond("ano", events=[], today=today, history=history)
        assert response.type is Intent.HELP

    def test_only_last_message_counts(self, engine, today, pending_draft):
        history = [
            ConversationMessage(type="ai", content="...", event_data=pending_draft),
            ConversationMessage(type="user", content="hmm"),
        ]
        response = engine.respond("ano", events=[], today=today, history=history)
        assert response.event_data is None

    def test_history_from_wire_format(self, engine, today):
        history = [
            ConversationMessage.from_dict(
                {"type": "ai", "content": "...", "eventData": {"title": "Kafe", "date": "2024-01-12", "time": "10:00"}}
            )
        ]
        payload = engine.respond("ok", events=[], today=today, history=history).to_dict()
        assert payload["eventData"]["title"] == "Kafe"
        assert payload["eventData"]["endTime"] is None


class TestDeterminism:
    """Identical inputs give identical output."""

    @pytest.mark.parametrize("text", ["ahoj", "kdy mám volno", "kdy se můžeme sejít", "večeře zítra v 19:00", "?"])
    def test_repeat_calls(self, engine, today, make_event, text):
        events = [make_event("2024-01-10", "09:00", "10:00"), make_event("2024-01-15")]
        first = engine.respond(text, events=events, today=today).to_dict()
        second = engine.respond(text, events=events, today=today).to_dict()
        assert first == second

    def test_window_for(self, engine):
        assert engine.window_for(Intent.CALENDAR_ANALYSIS) == 30
        assert engine.window_for(Intent.MEETING_SUGGESTION) == 14
        assert engine.window_for(Intent.EVENT_CREATION) is None
