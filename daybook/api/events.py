"""
Calendar API
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from daybook.api.dependencies import get_event_service, get_session, require_record, require_stored
from daybook.models.event import Event
from daybook.models.schemas import EventCreate, EventUpdate
from daybook.models.user import Session
from daybook.services.event_service import EventService
from daybook.services.filters import events_on_day, upcoming_events

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("")
async def list_events(session: Session = Depends(get_session),
                      service: EventService = Depends(get_event_service)) -> Dict[str, Any]:
    events = await service.list_for_user(session.user_id)
    return {
        "events": events,
        "upcoming": upcoming_events(events),
    }


@router.get("/day/{day}")
async def list_events_on_day(day: str, session: Session = Depends(get_session),
                             service: EventService = Depends(get_event_service)) -> Dict[str, Any]:
    """Events starting on one calendar day (YYYY-MM-DD)"""
    events = await service.list_for_user(session.user_id)
    return {"day": day, "events": events_on_day(events, day)}


@router.post("", status_code=201)
async def create_event(body: EventCreate, session: Session = Depends(get_session),
                       service: EventService = Depends(get_event_service)) -> Event:
    return require_stored(await service.create(session, body.model_dump()), "event")


@router.put("/{event_id}")
async def update_event(event_id: str, body: EventUpdate, session: Session = Depends(get_session),
                       service: EventService = Depends(get_event_service)) -> Event:
    event = require_record(await service.get(session.user_id, event_id), "event")
    return require_stored(await service.update(event, body.model_dump(exclude_unset=True)), "event")


@router.delete("/{event_id}")
async def delete_event(event_id: str, session: Session = Depends(get_session),
                       service: EventService = Depends(get_event_service)) -> Dict[str, Any]:
    require_record(await service.get(session.user_id, event_id), "event")
    require_stored(await service.delete(event_id), "event")
    return {"deleted": event_id}
