import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.exceptions import ConflictError, NotFoundError
from cafe_backoffice.models import Employee, WorkSession

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite отдаёт naive datetime, PostgreSQL aware
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def hours_between(start: datetime, end: datetime) -> float:
    return (_as_utc(end) - _as_utc(start)).total_seconds() / 3600


async def get_open_session(db: AsyncSession, employee_id: int) -> WorkSession | None:
    stmt = (
        select(WorkSession)
        .where(WorkSession.employee_id == employee_id, WorkSession.end_time.is_(None))
        .order_by(WorkSession.start_time.desc())
    )
    result = await db.execute(stmt)
    return result.scalars().first()


async def start_work(db: AsyncSession, employee_id: int) -> WorkSession:
    """
    Открывает смену.
    NotFoundError: нет сотрудника. ConflictError: смена уже открыта.
    """
    if not await db.get(Employee, employee_id):
        raise NotFoundError("Employee", employee_id)
    if await get_open_session(db, employee_id):
        raise ConflictError(f"Employee {employee_id} already has an open work session")

    session = WorkSession(employee_id=employee_id, start_time=utc_now())
    db.add(session)
    try:
        await db.commit()
    except IntegrityError:
        # параллельный start уже открыл смену
        await db.rollback()
        raise ConflictError(f"Employee {employee_id} already has an open work session") from None
    logger.info("Work session started: employee=%s session=%s", employee_id, session.id)
    return session


async def stop_work(db: AsyncSession, employee_id: int) -> WorkSession:
    """
    Закрывает открытую смену и считает отработанные часы.
    NotFoundError, если открытой смены нет.
    """
    session = await get_open_session(db, employee_id)
    if not session:
        raise NotFoundError("Open work session for employee", employee_id)

    end_time = utc_now()
    session.end_time = end_time
    session.total_hours = hours_between(session.start_time, end_time)
    await db.commit()
    logger.info(
        "Work session stopped: employee=%s session=%s hours=%.2f",
        employee_id, session.id, session.total_hours,
    )
    return session


async def get_work_sessions(db: AsyncSession, employee_id: int | None = None) -> List[WorkSession]:
    """
    Смены, новые первыми; опционально одного сотрудника.
    """
    stmt = select(WorkSession).order_by(WorkSession.start_time.desc(), WorkSession.id.desc())
    if employee_id is not None:
        stmt = stmt.where(WorkSession.employee_id == employee_id)
    result = await db.execute(stmt)
    return result.scalars().all()


async def reset_work_sessions(db: AsyncSession, employee_id: int) -> int:
    """
    Удаляет все смены сотрудника. Возвращает число удалённых.
    """
    result = await db.execute(delete(WorkSession).where(WorkSession.employee_id == employee_id))
    await db.commit()
    logger.info("Work sessions reset: employee=%s deleted=%s", employee_id, result.rowcount)
    return result.rowcount
