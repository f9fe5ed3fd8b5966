"""Module B: Event repository. Public reads, admin-only writes."""
from typing import Any

from sitecms.database import EVENTS
from sitecms.models import Event
from sitecms.services.repository import Repository


class EventRepository(Repository[Event]):
    collection = EVENTS
    model = Event
    entity = "event"
    defaults = {"archived": False}

    def audit_details(self, record: Event) -> dict[str, Any]:
        return {"eventId": record.id, "title": record.title}

    def create(self, data: dict[str, Any], actor_id: str | None) -> Event:
        # New events always start in the active view
        return super().create({**data, "archived": False}, actor_id)

    def list_events(self, archived: bool | None = False) -> list[Event]:
        """archived=False: active view, True: archived view, None: everything."""
        if archived is None:
            return self.list()
        return self.list(lambda e: e.archived is archived)

    def archive(self, event_id: str, actor_id: str | None) -> Event | None:
        return self.update(event_id, {"archived": True}, actor_id, action="event_archived")

    def unarchive(self, event_id: str, actor_id: str | None) -> Event | None:
        return self.update(event_id, {"archived": False}, actor_id, action="event_unarchived")
