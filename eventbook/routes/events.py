from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eventbook.core.exceptions import BookingAPIError
from eventbook.database.db import get_db
from eventbook.routes.params import parse_id
from eventbook.schemas.events import EventCreate, EventDeletedOut, EventOut, EventUpdate
from eventbook.schemas.reports import EventStatsOut
from eventbook.services import bookings as booking_service
from eventbook.services import events as event_service

router = APIRouter(tags=["events"])


@router.get("/events", response_model=list[EventOut])
def list_events(db: Session = Depends(get_db)):
    return event_service.list_events(db)


@router.post("/events/add", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    try:
        return event_service.create_event(
            db,
            title=payload.title,
            description=payload.description,
            date=payload.date,
            capacity=payload.capacity,
            location=payload.location,
        )
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/event/{event_id}", response_model=EventOut)
def get_event(event_id: str, db: Session = Depends(get_db)):
    try:
        return event_service.get_event(db, parse_id(event_id))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/event/{event_id}", response_model=EventOut)
def update_event(event_id: str, payload: EventUpdate, db: Session = Depends(get_db)):
    try:
        return event_service.update_event(db, parse_id(event_id), payload.model_dump(exclude_none=True))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/event/{event_id}", response_model=EventDeletedOut)
def delete_event(event_id: str, db: Session = Depends(get_db)):
    """Cancel an event; its bookings are removed with it."""
    try:
        event = event_service.delete_event(db, parse_id(event_id))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return EventDeletedOut(message="Event cancelled", event=EventOut.model_validate(event))


@router.get("/event/{event_id}/stats", response_model=EventStatsOut)
def event_stats(event_id: str, db: Session = Depends(get_db)):
    try:
        return booking_service.get_event_stats(db, parse_id(event_id))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
