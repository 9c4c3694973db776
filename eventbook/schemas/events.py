from typing import Optional

from pydantic import BaseModel, Field

from eventbook.database.db import SQLITE_INT_MAX


# ---------- Event ----------
class EventCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=-SQLITE_INT_MAX, le=SQLITE_INT_MAX)
    location: Optional[str] = None


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=-SQLITE_INT_MAX, le=SQLITE_INT_MAX)
    location: Optional[str] = None


class EventOut(BaseModel):
    id: int
    title: str
    description: str
    date: str
    capacity: int
    location: str

    class Config:
        from_attributes = True


class EventDeletedOut(BaseModel):
    message: str
    event: EventOut
