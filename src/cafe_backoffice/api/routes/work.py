from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.work_session import get_work_sessions, reset_work_sessions, start_work, stop_work
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.exceptions import ConflictError, NotFoundError
from cafe_backoffice.schemas.order import BulkDeleteResult
from cafe_backoffice.schemas.work_session import WorkClockRequest, WorkSessionRead

router = APIRouter(prefix="/api/work", tags=["work"])


@router.post("/start", response_model=WorkSessionRead, status_code=201)
async def start_work_endpoint(payload: WorkClockRequest, db: AsyncSession = Depends(get_async_session)):
    """
    Начало смены.
    """
    try:
        session = await start_work(db, payload.employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await record_activity(db, "work_started", actor=str(payload.employee_id), session_id=session.id)
    return session


@router.post("/stop", response_model=WorkSessionRead)
async def stop_work_endpoint(payload: WorkClockRequest, db: AsyncSession = Depends(get_async_session)):
    """
    Конец смены: считает отработанные часы.
    """
    try:
        session = await stop_work(db, payload.employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    await record_activity(
        db, "work_stopped", actor=str(payload.employee_id),
        session_id=session.id, total_hours=round(session.total_hours, 4),
    )
    return session


@router.get("/user/{employee_id}", response_model=List[WorkSessionRead])
async def list_employee_sessions(employee_id: int, db: AsyncSession = Depends(get_async_session)):
    return await get_work_sessions(db, employee_id=employee_id)


@router.delete("/user/{employee_id}", response_model=BulkDeleteResult)
async def reset_employee_sessions(
    employee_id: int,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Удаляет все смены сотрудника.
    """
    deleted = await reset_work_sessions(db, employee_id)
    await record_activity(db, "work_reset", actor=actor, employee_id=employee_id, deleted=deleted)
    return {"deleted": deleted}
