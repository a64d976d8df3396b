from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.exceptions import ConflictError
from cafe_backoffice.models import Category, Holiday
from cafe_backoffice.schemas.catalog import CategoryCreate, HolidayCreate


async def get_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category).order_by(Category.name))
    return result.scalars().all()


async def create_category(db: AsyncSession, category_in: CategoryCreate) -> Category:
    category = Category(name=category_in.name)
    db.add(category)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"Category already exists: {category_in.name}") from None
    return category


async def delete_category(db: AsyncSession, category_id: int) -> bool:
    category = await db.get(Category, category_id)
    if not category:
        return False
    await db.delete(category)
    await db.commit()
    return True


async def get_holidays(db: AsyncSession) -> List[Holiday]:
    result = await db.execute(select(Holiday).order_by(Holiday.date))
    return result.scalars().all()


async def create_holiday(db: AsyncSession, holiday_in: HolidayCreate) -> Holiday:
    holiday = Holiday(date=holiday_in.date, name=holiday_in.name)
    db.add(holiday)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"Holiday already exists for {holiday_in.date}") from None
    return holiday


async def delete_holiday(db: AsyncSession, holiday_id: int) -> bool:
    holiday = await db.get(Holiday, holiday_id)
    if not holiday:
        return False
    await db.delete(holiday)
    await db.commit()
    return True
