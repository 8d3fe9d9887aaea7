from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import SupabaseGateway
from ..data.repositories import EventRepository


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: SupabaseGateway = field(init=False)
    events: EventRepository = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        self.events = EventRepository(
            gateway=self.gateway,
            table_name=self.settings.storage.events_table,
            group_members_table=self.settings.storage.group_members_table,
        )
