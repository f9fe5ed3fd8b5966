"""Module B: Events. Listing is public; every write needs an admin session."""
from fastapi import APIRouter, Depends, HTTPException

from sitecms.dependencies import get_events, require_admin
from sitecms.models import Event
from sitecms.schemas.common import MessageResponse
from sitecms.schemas.event import EventCreate, EventUpdate
from sitecms.services.auth import SessionData
from sitecms.services.events import EventRepository

router = APIRouter(prefix="/api/events", tags=["events"])


def _not_found():
    return HTTPException(status_code=404, detail="Event not found")


@router.get("", response_model=list[Event])
def list_events(events: EventRepository = Depends(get_events)):
    return events.list_events(archived=False)


@router.get("/archived", response_model=list[Event])
def list_archived_events(events: EventRepository = Depends(get_events)):
    return events.list_events(archived=True)


@router.get("/{event_id}", response_model=Event)
def get_event(event_id: str, events: EventRepository = Depends(get_events)):
    event = events.get(event_id)
    if not event:
        raise _not_found()
    return event


@router.post("", response_model=Event, status_code=201)
def create_event(
    data: EventCreate,
    events: EventRepository = Depends(get_events),
    session: SessionData = Depends(require_admin),
):
    if not data.title or not data.date:
        raise HTTPException(status_code=400, detail="Title and date are required")
    return events.create(data.model_dump(by_alias=True), session.user_id)


@router.put("/{event_id}", response_model=Event)
def update_event(
    event_id: str,
    data: EventUpdate,
    events: EventRepository = Depends(get_events),
    session: SessionData = Depends(require_admin),
):
    event = events.update(event_id, data.model_dump(by_alias=True, exclude_unset=True), session.user_id)
    if not event:
        raise _not_found()
    return event


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: str,
    events: EventRepository = Depends(get_events),
    session: SessionData = Depends(require_admin),
):
    if not events.delete(event_id, session.user_id):
        raise _not_found()
    return MessageResponse(message="Event deleted")


@router.post("/{event_id}/archive", response_model=Event)
def archive_event(
    event_id: str,
    events: EventRepository = Depends(get_events),
    session: SessionData = Depends(require_admin),
):
    event = events.archive(event_id, session.user_id)
    if not event:
        raise _not_found()
    return event


@router.post("/{event_id}/unarchive", response_model=Event)
def unarchive_event(
    event_id: str,
    events: EventRepository = Depends(get_events),
    session: SessionData = Depends(require_admin),
):
    event = events.unarchive(event_id, session.user_id)
    if not event:
        raise _not_found()
    return event
