from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List

from ...domain import CalendarEvent
from ..supabase import EventStoreError, SupabaseGateway

logger = logging.getLogger(__name__)

_EVENT_COLUMNS = "date, time, end_time, title, group_id"


@dataclass(slots=True)
class EventRepository:
    gateway: SupabaseGateway
    table_name: str
    group_members_table: str

    def group_ids_for_member(self, user_id: str) -> List[str]:
        response = (
            self.gateway.table(self.group_members_table)
            .select("group_id")
            .eq("user_id", user_id)
            .execute()
        )
        return [str(row["group_id"]) for row in response.data or []]

    def fetch_for_member(self, user_id: str, start: date, end: date) -> List[CalendarEvent]:
        """Events in groups ``user_id`` belongs to, dated within ``[start, end)``."""

        try:
            group_ids = self.group_ids_for_member(user_id)
            if not group_ids:
                return []
            response = (
                self.gateway.table(self.table_name)
                .select(_EVENT_COLUMNS)
                .in_("group_id", group_ids)
                .gte("date", start.isoformat())
                .lt("date", end.isoformat())
                .order("date", desc=False)
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise EventStoreError(f"Could not load events for user {user_id}: {exc}") from exc

        events: list[CalendarEvent] = []
        for record in response.data or []:
            try:
                events.append(CalendarEvent.from_record(record))
            except (KeyError, ValueError):
                logger.warning("Skipping malformed event record: %r", record)
        return events
