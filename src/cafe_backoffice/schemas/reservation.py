from datetime import date, datetime
from typing import Optional

from pydantic import Field, constr

from .base import CamelModel
from ..models.reservation import ReservationStatusEnum


class ReservationCreate(CamelModel):
    customer_name: constr(strip_whitespace=True, min_length=1)
    phone: constr(strip_whitespace=True, min_length=3, max_length=32)
    date: date
    time: constr(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    guests: int = Field(..., ge=1)
    table_id: constr(strip_whitespace=True, min_length=1)
    table_name: Optional[str] = None
    notes: Optional[str] = None


class ReservationStatusUpdate(CamelModel):
    status: ReservationStatusEnum


class ReservationRead(CamelModel):
    id: int
    customer_name: str
    phone: str
    date: date
    time: str
    date_time: datetime
    guests: int
    table_id: str
    table_name: Optional[str] = None
    status: ReservationStatusEnum
    notes: Optional[str] = None
    created_at: datetime
