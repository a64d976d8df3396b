from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.reservation import (
    create_reservation,
    delete_reservation,
    get_reservations,
    update_reservation_status,
)
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.schemas.reservation import ReservationCreate, ReservationRead, ReservationStatusUpdate

router = APIRouter(prefix="/api/reservations", tags=["reservations"])


@router.get("", response_model=List[ReservationRead])
async def list_reservations(
    on_date: Optional[date] = Query(None, alias="date", description="Фильтр по дню (YYYY-MM-DD)"),
    db: AsyncSession = Depends(get_async_session),
):
    return await get_reservations(db, on_date=on_date)


@router.post("", response_model=ReservationRead, status_code=201)
async def create_reservation_endpoint(
    reservation_in: ReservationCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Публичная форма бронирования. Статус всегда pending.
    """
    reservation = await create_reservation(db, reservation_in)
    await record_activity(
        db, "reservation_created", actor=reservation.customer_name,
        reservation_id=reservation.id, table_id=reservation.table_id,
    )
    return reservation


@router.put("/{reservation_id}/status", response_model=ReservationRead)
async def update_reservation_status_endpoint(
    reservation_id: int,
    payload: ReservationStatusUpdate,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Смена статуса: pending / confirmed / cancelled.
    """
    reservation = await update_reservation_status(db, reservation_id, payload.status)
    if not reservation:
        raise HTTPException(status_code=404, detail="Reservation not found")
    await record_activity(
        db, "reservation_status_changed", actor=actor,
        reservation_id=reservation_id, status=payload.status.value,
    )
    return reservation


@router.delete("/{reservation_id}", status_code=204)
async def remove_reservation(
    reservation_id: int,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    deleted = await delete_reservation(db, reservation_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Reservation not found")
    await record_activity(db, "reservation_deleted", actor=actor, reservation_id=reservation_id)
