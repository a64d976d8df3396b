import enum
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum as SAEnum, func
from ..db.base import Base


class ReservationStatusEnum(str, enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String(128), nullable=False)
    phone = Column(String(32), nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # HH:MM
    date_time = Column(DateTime, nullable=False)
    guests = Column(Integer, nullable=False)
    table_id = Column(String(32), nullable=False)
    table_name = Column(String(64), nullable=True)
    status = Column(
        SAEnum(ReservationStatusEnum, name="reservation_status"),
        nullable=False,
        default=ReservationStatusEnum.pending,
    )
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
