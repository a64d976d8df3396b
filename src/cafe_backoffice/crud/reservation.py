import logging
from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.models import Reservation, ReservationStatusEnum
from cafe_backoffice.schemas.reservation import ReservationCreate

logger = logging.getLogger(__name__)


def combine_date_time(day: date, hhmm: str) -> datetime:
    hours, minutes = (int(part) for part in hhmm.split(":"))
    return datetime.combine(day, time(hours, minutes))


async def get_reservations(db: AsyncSession, on_date: Optional[date] = None) -> List[Reservation]:
    """
    Брони, новые (по дате визита) первыми; опционально за один день.
    """
    stmt = select(Reservation).order_by(Reservation.date_time.desc(), Reservation.id.desc())
    if on_date:
        stmt = stmt.where(Reservation.date == on_date)
    result = await db.execute(stmt)
    return result.scalars().all()


async def create_reservation(db: AsyncSession, reservation_in: ReservationCreate) -> Reservation:
    """
    Создаёт бронь со статусом pending.
    """
    data = reservation_in.model_dump()
    reservation = Reservation(
        **data,
        date_time=combine_date_time(reservation_in.date, reservation_in.time),
        status=ReservationStatusEnum.pending,
    )
    db.add(reservation)
    await db.commit()
    await db.refresh(reservation)
    logger.info("Reservation created: id=%s table=%s at %s", reservation.id, reservation.table_id, reservation.date_time)
    return reservation


async def update_reservation_status(
    db: AsyncSession, reservation_id: int, status: ReservationStatusEnum
) -> Optional[Reservation]:
    reservation = await db.get(Reservation, reservation_id)
    if not reservation:
        return None
    reservation.status = status
    await db.commit()
    await db.refresh(reservation)
    return reservation


async def delete_reservation(db: AsyncSession, reservation_id: int) -> bool:
    reservation = await db.get(Reservation, reservation_id)
    if not reservation:
        return False
    await db.delete(reservation)
    await db.commit()
    return True
