import logging
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from eventbook.core.exceptions import (
    CapacityExceededError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from eventbook.database.db import transaction
from eventbook.models.bookings import Booking, utc_timestamp
from eventbook.models.events import Event
from eventbook.services.events import get_event_or_404

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone")


def next_booking_id(db: Session) -> int:
    return (db.scalar(select(func.max(Booking.id))) or 0) + 1


def get_booking_or_404(db: Session, booking_id: Optional[int]) -> Booking:
    booking = db.get(Booking, booking_id) if booking_id is not None else None
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def seats_booked(db: Session, event_id: int, *, exclude_booking_id: Optional[int] = None) -> int:
    """Sum of seats held by the event's bookings, recomputed from the table on every call."""
    stmt = select(func.coalesce(func.sum(Booking.seats), 0)).where(Booking.event_id == event_id)
    if exclude_booking_id is not None:
        stmt = stmt.where(Booking.id != exclude_booking_id)
    return int(db.scalar(stmt) or 0)


def _ensure_positive(seats: int) -> None:
    if seats < 1:
        raise ValidationError("seats must be a positive integer")


def list_bookings(db: Session) -> list[Booking]:
    with transaction(db):
        return list(db.scalars(select(Booking).order_by(Booking.id)))


def create_booking(
    db: Session,
    *,
    event_id: Optional[int],
    name: Optional[str],
    email: Optional[str],
    seats: Optional[int],
    phone: Optional[str] = None,
) -> Booking:
    """
    Reserve seats for an event.
    The seats-booked sum and the insert happen under the store lock, so two
    concurrent requests cannot both take the last seats.
    """
    if not event_id or not name or not email or not seats:
        raise ValidationError("eventId, name, email and seats are required")
    _ensure_positive(seats)

    with transaction(db):
        event = get_event_or_404(db, event_id)

        booked = seats_booked(db, event.id)
        if booked + seats > event.capacity:
            logger.warning(
                "Booking rejected for event %s: %s booked + %s requested > capacity %s",
                event.id, booked, seats, event.capacity,
            )
            raise CapacityExceededError("Not enough seats available")

        booking = Booking(
            id=next_booking_id(db),
            event_id=event.id,
            name=name,
            email=email,
            phone=phone or "",
            seats=seats,
            created_at=utc_timestamp(),
        )
        db.add(booking)
        db.flush()

    logger.info("Booking %s created for event %s (%s seat(s))", booking.id, booking.event_id, booking.seats)
    return booking


def get_booking(db: Session, booking_id: Optional[int]) -> Booking:
    with transaction(db):
        return get_booking_or_404(db, booking_id)


def update_booking(db: Session, booking_id: Optional[int], changes: dict[str, Any]) -> Booking:
    with transaction(db):
        booking = get_booking_or_404(db, booking_id)

        new_seats = changes.get("seats")
        if new_seats is not None:
            _ensure_positive(new_seats)
            event = db.get(Event, booking.event_id)
            if event is None:
                logger.error("Booking %s references missing event %s", booking.id, booking.event_id)
                raise InternalError("Associated event missing")

            others = seats_booked(db, event.id, exclude_booking_id=booking.id)
            if others + new_seats > event.capacity:
                logger.warning(
                    "Seat update rejected for booking %s: %s booked by others + %s > capacity %s",
                    booking.id, others, new_seats, event.capacity,
                )
                raise CapacityExceededError("Not enough seats available for this update")
            booking.seats = new_seats

        for field in CONTACT_FIELDS:
            if changes.get(field) is not None:
                setattr(booking, field, changes[field])

    logger.info("Booking %s updated", booking.id)
    return booking


def delete_booking(db: Session, booking_id: Optional[int]) -> Booking:
    with transaction(db):
        booking = get_booking_or_404(db, booking_id)
        db.delete(booking)

    logger.info("Booking %s cancelled", booking.id)
    return booking


def get_event_stats(db: Session, event_id: Optional[int]) -> dict:
    with transaction(db):
        event = get_event_or_404(db, event_id)
        booked = seats_booked(db, event.id)
        booking_count = db.scalar(select(func.count(Booking.id)).where(Booking.event_id == event.id))

    return {
        "event_id": event.id,
        "capacity": event.capacity,
        "seats_booked": booked,
        "seats_available": max(event.capacity - booked, 0),
        "booking_count": int(booking_count or 0),
    }


def get_overall_report(db: Session) -> dict:
    """Return aggregated totals across all events."""
    with transaction(db):
        total_capacity = db.scalar(select(func.sum(Event.capacity)))
        total_seats = db.scalar(select(func.sum(Booking.seats)))
        total_bookings = db.scalar(select(func.count(Booking.id)))

    return {
        "total_capacity": int(total_capacity or 0),
        "total_seats_booked": int(total_seats or 0),
        "total_bookings": int(total_bookings or 0),
    }
