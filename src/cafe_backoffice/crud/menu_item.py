import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.models import MenuItem
from cafe_backoffice.schemas.menu_item import MenuItemCreate, MenuItemUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"description", "image"}


async def get_menu_items(
    db: AsyncSession,
    category: Optional[str] = None,
    available: Optional[bool] = None,
) -> List[MenuItem]:
    """
    Публичное меню: по категории, затем по имени.
    """
    stmt = select(MenuItem).order_by(MenuItem.category, MenuItem.name, MenuItem.id)
    if category:
        stmt = stmt.where(MenuItem.category == category)
    if available is not None:
        stmt = stmt.where(MenuItem.available == available)
    result = await db.execute(stmt)
    return result.scalars().all()


async def get_menu_item_by_id(db: AsyncSession, item_id: int) -> Optional[MenuItem]:
    return await db.get(MenuItem, item_id)


async def create_menu_item(db: AsyncSession, item_in: MenuItemCreate) -> MenuItem:
    item = MenuItem(**item_in.model_dump())
    db.add(item)
    await db.commit()
    await db.refresh(item)
    logger.info("Menu item created: id=%s name=%s", item.id, item.name)
    return item


async def update_menu_item(db: AsyncSession, item_id: int, item_in: MenuItemUpdate) -> Optional[MenuItem]:
    item = await db.get(MenuItem, item_id)
    if not item:
        return None

    for key, value in item_in.model_dump(exclude_unset=True).items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        setattr(item, key, value)

    await db.commit()
    await db.refresh(item)
    return item


async def delete_menu_item(db: AsyncSession, item_id: int) -> bool:
    item = await db.get(MenuItem, item_id)
    if not item:
        return False
    await db.delete(item)
    await db.commit()
    return True
