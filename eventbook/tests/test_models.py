"""
Test database models (Event and Booking).
"""
from sqlalchemy.orm import Session

from eventbook.models.bookings import Booking, utc_timestamp
from eventbook.models.events import Event


class TestEventModel:
    """Test the Event model."""

    def test_create_event(self, db_session: Session):
        """Test creating an event."""
        event = Event(id=10, title="Test Event", date="2026-01-01", capacity=100)
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)

        assert event.title == "Test Event"
        assert event.description == ""
        assert event.location == ""

    def test_event_relationship_with_bookings(self, db_session: Session):
        """Test the relationship between Event and Booking."""
        event = Event(id=10, title="Concert", date="2026-01-01", capacity=50)
        db_session.add(event)
        db_session.add_all(
            [
                Booking(id=10, event_id=10, name="A", email="a@example.com", seats=2),
                Booking(id=11, event_id=10, name="B", email="b@example.com", seats=3),
            ]
        )
        db_session.commit()
        db_session.refresh(event)

        assert [b.id for b in event.bookings] == [10, 11]
        assert sum(b.seats for b in event.bookings) == 5


class TestBookingModel:
    """Test the Booking model."""

    def test_booking_defaults(self, db_session: Session):
        """Test booking column defaults."""
        booking = Booking(id=10, event_id=1, name="Dana", email="dana@example.com", seats=1)
        db_session.add(booking)
        db_session.commit()
        db_session.refresh(booking)

        assert booking.phone == ""
        assert booking.created_at.endswith("Z")
        assert booking.event.title == "Synergia Tech Talk"

    def test_utc_timestamp_format(self):
        """Test createdAt timestamps use millisecond UTC ISO format."""
        stamp = utc_timestamp()

        # 2025-12-10T09:30:00.123Z
        assert len(stamp) == 24
        assert stamp[10] == "T"
        assert stamp[19] == "."
        assert stamp.endswith("Z")
