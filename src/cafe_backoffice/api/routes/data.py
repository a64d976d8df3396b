from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.crud.activity_log import get_activity_logs
from cafe_backoffice.crud.snapshot import get_snapshot
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.schemas.activity_log import ActivityLogRead
from cafe_backoffice.schemas.snapshot import DataSnapshot

router = APIRouter(prefix="/api", tags=["data"])


@router.get("/data", response_model=DataSnapshot)
async def get_all_data(db: AsyncSession = Depends(get_async_session)):
    """
    Снимок всех коллекций одним ответом (для панели управления).
    """
    return await get_snapshot(db)


@router.get("/logs", response_model=List[ActivityLogRead])
async def list_logs(
    limit: Optional[int] = Query(100, ge=1, le=1000, description="Количество записей"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Журнал действий, новые первыми.
    """
    return await get_activity_logs(db, limit=limit)
