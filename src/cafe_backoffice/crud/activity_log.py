import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.models import ActivityLog

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "system"


async def record_activity(
    db: AsyncSession,
    action: str,
    actor: Optional[str] = None,
    **details: Any,
) -> bool:
    """
    Пишет запись в журнал действий отдельной сессией на том же движке,
    чтобы откат записи журнала не задевал объекты основного запроса.
    Журнал вспомогательный: ошибка записи логируется и не ломает запрос.
    """
    actor = actor or SYSTEM_ACTOR
    async with AsyncSession(db.bind, expire_on_commit=False) as log_db:
        log_db.add(ActivityLog(actor=actor, action=action, details=details))
        try:
            await log_db.commit()
        except SQLAlchemyError:
            logger.exception("Failed to record activity %s by %s", action, actor)
            await log_db.rollback()
            return False
    return True


async def get_activity_logs(db: AsyncSession, limit: Optional[int] = None) -> List[ActivityLog]:
    """
    Журнал действий, новые записи первыми.
    """
    stmt = select(ActivityLog).order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc())
    if limit:
        stmt = stmt.limit(limit)
    result = await db.execute(stmt)
    return result.scalars().all()
