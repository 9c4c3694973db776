import logging

from eventbook.database.db import Base, SessionLocal, engine, store_lock
from eventbook.models.bookings import Booking, utc_timestamp
from eventbook.models.events import Event

logger = logging.getLogger(__name__)

SEED_EVENTS = [
    {
        "id": 1,
        "title": "Synergia Tech Talk",
        "description": "A tech talk on fullstack development",
        "date": "2025-12-10",
        "capacity": 100,
        "location": "Main Auditorium",
    },
]

SEED_BOOKINGS = [
    {
        "id": 1,
        "event_id": 1,
        "name": "Alice Kumar",
        "email": "alice@example.com",
        "phone": "9876543210",
        "seats": 1,
    },
]


def init_db() -> None:
    """Recreate both tables and load the sample event and booking."""
    with store_lock:
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)

        db = SessionLocal()
        try:
            db.add_all(Event(**data) for data in SEED_EVENTS)
            db.add_all(Booking(created_at=utc_timestamp(), **data) for data in SEED_BOOKINGS)
            db.commit()
        finally:
            db.close()

    logger.info("Store initialized with %s event(s) and %s booking(s)", len(SEED_EVENTS), len(SEED_BOOKINGS))
