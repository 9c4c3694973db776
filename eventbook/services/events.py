import logging
from typing import Any, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from eventbook.core.exceptions import NotFoundError, ValidationError
from eventbook.database.db import transaction
from eventbook.models.bookings import Booking
from eventbook.models.events import Event

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "date", "capacity", "location")


def next_event_id(db: Session) -> int:
    # max + 1, so deleting the newest event frees its id for reuse
    return (db.scalar(select(func.max(Event.id))) or 0) + 1


def get_event_or_404(db: Session, event_id: Optional[int]) -> Event:
    event = db.get(Event, event_id) if event_id is not None else None
    if event is None:
        raise NotFoundError("Event not found")
    return event


def list_events(db: Session) -> list[Event]:
    with transaction(db):
        return list(db.scalars(select(Event).order_by(Event.id)))


def create_event(
    db: Session,
    *,
    title: Optional[str],
    date: Optional[str],
    capacity: Optional[int],
    description: Optional[str] = None,
    location: Optional[str] = None,
) -> Event:
    if not title or not date or not capacity:
        raise ValidationError("title, date and capacity are required")

    with transaction(db):
        event = Event(
            id=next_event_id(db),
            title=title,
            description=description or "",
            date=date,
            capacity=int(capacity),
            location=location or "",
        )
        db.add(event)
        db.flush()

    logger.info("Event %s created (capacity=%s)", event.id, event.capacity)
    return event


def get_event(db: Session, event_id: Optional[int]) -> Event:
    with transaction(db):
        return get_event_or_404(db, event_id)


def update_event(db: Session, event_id: Optional[int], changes: dict[str, Any]) -> Event:
    """Apply the whitelisted fields in ``changes``; anything else is ignored."""
    with transaction(db):
        event = get_event_or_404(db, event_id)
        for field in UPDATABLE_FIELDS:
            if changes.get(field) is None:
                continue
            value = changes[field]
            setattr(event, field, int(value) if field == "capacity" else value)

    logger.info("Event %s updated", event.id)
    return event


def delete_event(db: Session, event_id: Optional[int]) -> Event:
    """
    Cancel an event and the bookings made against it.

    Both steps run in one transaction: if removing the bookings fails the
    event removal is rolled back too.
    """
    with transaction(db):
        event = get_event_or_404(db, event_id)

        # Step 1: remove the event
        db.execute(delete(Event).where(Event.id == event.id))

        # Step 2: remove dependent bookings
        removed = db.execute(delete(Booking).where(Booking.event_id == event.id))

    logger.info("Event %s cancelled, %s booking(s) removed", event.id, removed.rowcount)
    return event
