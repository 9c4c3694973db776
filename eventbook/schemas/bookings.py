from typing import Optional

from pydantic import BaseModel, Field

from eventbook.database.db import SQLITE_INT_MAX


class BookingCreate(BaseModel):
    event_id: Optional[int] = Field(default=None, alias="eventId", ge=-SQLITE_INT_MAX, le=SQLITE_INT_MAX)
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    seats: Optional[int] = Field(default=None, ge=-SQLITE_INT_MAX, le=SQLITE_INT_MAX)

    class Config:
        populate_by_name = True


class BookingUpdate(BaseModel):
    seats: Optional[int] = Field(default=None, ge=-SQLITE_INT_MAX, le=SQLITE_INT_MAX)
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class BookingOut(BaseModel):
    id: int
    event_id: int = Field(serialization_alias="eventId")
    name: str
    email: str
    phone: str
    seats: int
    created_at: str = Field(serialization_alias="createdAt")

    class Config:
        from_attributes = True


class BookingDeletedOut(BaseModel):
    message: str
    booking: BookingOut
