from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.employee import get_active_sessions, login_employee, logout_employee, setup_admins
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.exceptions import ConflictError, NotFoundError
from cafe_backoffice.schemas.employee import (
    ActiveSessionRead,
    EmployeeRead,
    LoginRequest,
    LogoutResult,
    SetupAdminsResult,
)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=EmployeeRead)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_async_session)):
    """
    Вход по логину (без пароля). Логин сравнивается без учёта регистра.
    """
    try:
        employee = await login_employee(db, payload.login)
    except NotFoundError:
        raise HTTPException(status_code=401, detail="Unknown login")

    await record_activity(db, "login", actor=employee.login)
    return employee


@router.post("/logout", response_model=LogoutResult)
async def logout(payload: LoginRequest, db: AsyncSession = Depends(get_async_session)):
    removed = await logout_employee(db, payload.login)
    if removed:
        await record_activity(db, "logout", actor=payload.login)
    return {"ok": True, "removed": removed}


@router.get("/active-sessions", response_model=List[ActiveSessionRead])
async def list_active_sessions(db: AsyncSession = Depends(get_async_session)):
    """
    Кто сейчас в системе.
    """
    return await get_active_sessions(db)


@router.get("/setup-admins", response_model=SetupAdminsResult)
async def setup_admin_accounts(
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Создаёт служебные учётки admin и manager, если их ещё нет.
    """
    try:
        result = await setup_admins(db)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)

    if result["created"]:
        await record_activity(db, "setup_admins", actor=actor, created=result["created"])
    return result
