from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.employee import create_employee, get_employee_by_id, get_employees, update_employee
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.exceptions import ConflictError
from cafe_backoffice.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeRead])
async def list_employees(db: AsyncSession = Depends(get_async_session)):
    return await get_employees(db)


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int = Path(..., description="ID сотрудника"),
    db: AsyncSession = Depends(get_async_session),
):
    employee = await get_employee_by_id(db, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.post("", response_model=EmployeeRead, status_code=201)
async def create_employee_endpoint(
    employee_in: EmployeeCreate,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Создаёт сотрудника. 409, если логин уже занят.
    """
    try:
        employee = await create_employee(db, employee_in)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await record_activity(db, "employee_created", actor=actor, employee_id=employee.id, login=employee.login)
    return employee


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee_endpoint(
    employee_id: int,
    employee_in: EmployeeUpdate,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Частичное обновление сотрудника.
    """
    try:
        employee = await update_employee(db, employee_id, employee_in)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)

    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    await record_activity(
        db, "employee_updated", actor=actor,
        employee_id=employee_id, fields=sorted(employee_in.model_fields_set),
    )
    return employee
