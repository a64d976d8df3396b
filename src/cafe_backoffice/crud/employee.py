import logging
from typing import List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.exceptions import ConflictError, NotFoundError
from cafe_backoffice.models import ActiveSession, Employee, RoleEnum
from cafe_backoffice.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

# Привилегированные учётки, которые создаёт GET /api/setup-admins
SEED_ADMINS = [
    {
        "name": "Administrator",
        "login": "admin",
        "position": "Administrator",
        "workplace": "Office",
        "hourly_rate": 0.0,
        "role": RoleEnum.admin,
    },
    {
        "name": "Manager",
        "login": "manager",
        "position": "Manager",
        "workplace": "Office",
        "hourly_rate": 0.0,
        "role": RoleEnum.manager,
    },
]


async def get_employees(db: AsyncSession) -> List[Employee]:
    """
    Все сотрудники, по имени.
    """
    result = await db.execute(select(Employee).order_by(Employee.name, Employee.id))
    return result.scalars().all()


async def get_employee_by_id(db: AsyncSession, employee_id: int) -> Optional[Employee]:
    return await db.get(Employee, employee_id)


async def get_employee_by_login(db: AsyncSession, login: str) -> Optional[Employee]:
    """
    Поиск по логину без учёта регистра.
    """
    stmt = select(Employee).where(func.lower(Employee.login) == login.strip().lower())
    result = await db.execute(stmt)
    return result.scalars().first()


async def create_employee(db: AsyncSession, employee_in: EmployeeCreate) -> Employee:
    """
    Создаёт сотрудника. ConflictError, если логин занят.
    Проверка заранее даёт понятное сообщение, уникальный индекс закрывает гонку.
    """
    if await get_employee_by_login(db, employee_in.login):
        raise ConflictError(f"Login already exists: {employee_in.login}")

    employee = Employee(**employee_in.model_dump())
    db.add(employee)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"Login already exists: {employee_in.login}") from None

    await db.refresh(employee)
    logger.info("Employee created: id=%s login=%s", employee.id, employee.login)
    return employee


async def update_employee(
    db: AsyncSession, employee_id: int, employee_in: EmployeeUpdate
) -> Optional[Employee]:
    """
    Частичное обновление. None, если сотрудника нет.
    """
    employee = await db.get(Employee, employee_id)
    if not employee:
        return None

    update_data = employee_in.model_dump(exclude_unset=True, exclude_none=True)

    if "login" in update_data:
        other = await get_employee_by_login(db, update_data["login"])
        if other and other.id != employee.id:
            raise ConflictError(f"Login already exists: {update_data['login']}")

    for key, value in update_data.items():
        setattr(employee, key, value)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"Login already exists: {update_data.get('login')}") from None

    await db.refresh(employee)
    return employee


async def login_employee(db: AsyncSession, login: str) -> Employee:
    """
    Находит сотрудника по логину и отмечает его в active_sessions.
    NotFoundError, если логин неизвестен.
    """
    employee = await get_employee_by_login(db, login)
    if not employee:
        raise NotFoundError("Employee", login)

    employee_id = employee.id
    canonical_login = employee.login

    exists = await db.scalar(select(ActiveSession.id).where(ActiveSession.login == canonical_login))
    if exists is None:
        db.add(ActiveSession(login=canonical_login))
        try:
            await db.commit()
        except IntegrityError:
            # параллельный вход того же логина уже добавил запись
            await db.rollback()

    employee = await db.get(Employee, employee_id, populate_existing=True)
    logger.info("Employee logged in: %s", canonical_login)
    return employee


async def logout_employee(db: AsyncSession, login: str) -> bool:
    """
    Убирает логин из active_sessions. True, если запись была.
    """
    result = await db.execute(
        delete(ActiveSession).where(func.lower(ActiveSession.login) == login.strip().lower())
    )
    await db.commit()
    return result.rowcount > 0


async def get_active_sessions(db: AsyncSession) -> List[ActiveSession]:
    result = await db.execute(select(ActiveSession).order_by(ActiveSession.since, ActiveSession.id))
    return result.scalars().all()


async def setup_admins(db: AsyncSession) -> dict:
    """
    Создаёт недостающие служебные учётки одной транзакцией.
    Повторный вызов ничего не меняет.
    """
    created, existing = [], []
    for account in SEED_ADMINS:
        if await get_employee_by_login(db, account["login"]):
            existing.append(account["login"])
            continue
        db.add(Employee(**account))
        created.append(account["login"])

    if created:
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError("Admin accounts were created concurrently, retry the request") from None
        logger.info("Seeded admin accounts: %s", ", ".join(created))

    return {"created": created, "existing": existing}
