from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventbook.database.db import get_db
from eventbook.schemas.reports import ReportOut
from eventbook.services.bookings import get_overall_report

router = APIRouter(prefix="/report", tags=["reports"])


@router.get("", response_model=ReportOut)
def overall_report(db: Session = Depends(get_db)):
    """Aggregate seat totals across all events."""
    return get_overall_report(db)
