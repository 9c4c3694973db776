from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eventbook.core.exceptions import BookingAPIError
from eventbook.database.db import get_db
from eventbook.routes.params import parse_id
from eventbook.schemas.bookings import BookingCreate, BookingDeletedOut, BookingOut, BookingUpdate
from eventbook.services import bookings as booking_service

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.get("", response_model=list[BookingOut])
def list_bookings(db: Session = Depends(get_db)):
    return booking_service.list_bookings(db)


@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
def book_seats(payload: BookingCreate, db: Session = Depends(get_db)):
    try:
        return booking_service.create_booking(
            db,
            event_id=payload.event_id,
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            seats=payload.seats,
        )
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    try:
        return booking_service.get_booking(db, parse_id(booking_id))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{booking_id}", response_model=BookingOut)
def update_booking(booking_id: str, payload: BookingUpdate, db: Session = Depends(get_db)):
    try:
        return booking_service.update_booking(db, parse_id(booking_id), payload.model_dump(exclude_none=True))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{booking_id}", response_model=BookingDeletedOut)
def cancel_booking(booking_id: str, db: Session = Depends(get_db)):
    try:
        booking = booking_service.delete_booking(db, parse_id(booking_id))
    except BookingAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return BookingDeletedOut(message="Booking cancelled", booking=BookingOut.model_validate(booking))
