from pydantic import BaseModel, Field


class EventStatsOut(BaseModel):
    event_id: int = Field(serialization_alias="eventId")
    capacity: int
    seats_booked: int = Field(serialization_alias="seatsBooked")
    seats_available: int = Field(serialization_alias="seatsAvailable")
    booking_count: int = Field(serialization_alias="bookingCount")


class ReportOut(BaseModel):
    total_capacity: int = Field(serialization_alias="totalCapacity")
    total_seats_booked: int = Field(serialization_alias="totalSeatsBooked")
    total_bookings: int = Field(serialization_alias="totalBookings")
