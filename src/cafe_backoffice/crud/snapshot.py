import logging
from typing import Any, Dict

from pydantic import TypeAdapter
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.crud.activity_log import get_activity_logs
from cafe_backoffice.crud.catalog import get_categories, get_holidays
from cafe_backoffice.crud.employee import get_active_sessions, get_employees
from cafe_backoffice.crud.menu_item import get_menu_items
from cafe_backoffice.crud.order import get_orders
from cafe_backoffice.crud.product import get_products
from cafe_backoffice.crud.reservation import get_reservations
from cafe_backoffice.crud.work_session import get_work_sessions
from cafe_backoffice.models import Category, Employee, Holiday, MenuItem, Product
from cafe_backoffice.schemas.catalog import CategoryCreate, HolidayCreate
from cafe_backoffice.schemas.employee import EmployeeCreate
from cafe_backoffice.schemas.menu_item import MenuItemCreate
from cafe_backoffice.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class _SeedProduct(ProductCreate):
    image: str


# коллекция снимка -> (модель, схема входа)
SEEDABLE = {
    "users": (Employee, EmployeeCreate),
    "products": (Product, _SeedProduct),
    "menuItems": (MenuItem, MenuItemCreate),
    "categories": (Category, CategoryCreate),
    "holidays": (Holiday, HolidayCreate),
}


async def get_snapshot(db: AsyncSession) -> Dict[str, Any]:
    """
    Все коллекции одним словарём для GET /api/data.
    """
    return {
        "users": await get_employees(db),
        "products": await get_products(db),
        "orders": await get_orders(db),
        "reservations": await get_reservations(db),
        "categories": await get_categories(db),
        "holidays": await get_holidays(db),
        "work_sessions": await get_work_sessions(db),
        "active_sessions": await get_active_sessions(db),
        "logs": await get_activity_logs(db),
        "menu_items": await get_menu_items(db),
    }


async def load_snapshot(db: AsyncSession, data: Dict[str, Any], replace: bool = False) -> Dict[str, int]:
    """
    Загружает начальные данные из снимка (формат как у GET /api/data).
    Всё в одной транзакции: при ошибке валидации или записи хранилище не меняется.
    Возвращает число загруженных записей по коллекциям.
    """
    unknown = set(data) - set(SEEDABLE)
    if unknown:
        logger.warning("Snapshot collections ignored: %s", ", ".join(sorted(unknown)))

    # сначала валидируем всё, потом пишем
    validated = {}
    for key, (model, schema) in SEEDABLE.items():
        if key not in data:
            continue
        validated[key] = TypeAdapter(list[schema]).validate_python(data[key])

    counts = {}
    try:
        for key, records in validated.items():
            model = SEEDABLE[key][0]
            if replace:
                await db.execute(delete(model))
            db.add_all(model(**record.model_dump()) for record in records)
            counts[key] = len(records)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info("Snapshot loaded: %s", counts)
    return counts
