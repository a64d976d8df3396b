import logging
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cafe_backoffice.models import Order, OrderItem, UNKNOWN_ORDERER
from cafe_backoffice.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


async def get_orders(db: AsyncSession, limit: Optional[int] = None) -> List[Order]:
    """
    Возвращает список заказов с позициями.
    Сортируем по created_at (новые первыми).
    """
    stmt = (
        select(Order)
        .options(selectinload(Order.items))
        .order_by(Order.created_at.desc(), Order.id.desc())
    )
    if limit:
        stmt = stmt.limit(limit)
    result = await db.execute(stmt)
    return result.scalars().unique().all()


async def get_order_by_id(db: AsyncSession, order_id: int) -> Optional[Order]:
    """
    Заказ по ID с подгруженными items.
    Предотвращает MissingGreenlet при сериализации.
    """
    stmt = (
        select(Order)
        .where(Order.id == order_id)
        .options(selectinload(Order.items))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalars().unique().first()


async def create_order(db: AsyncSession, order_in: OrderCreate) -> Order:
    """
    Создаём заказ и позиции одной транзакцией.
    Сумма берётся как есть, по позициям не пересчитывается.
    """
    order = Order(
        ordered_by=(order_in.ordered_by or "").strip() or UNKNOWN_ORDERER,
        total_price=order_in.total_price,
        items=[
            OrderItem(**item.model_dump(mode="json"))
            for item in order_in.items
        ],
    )
    db.add(order)
    await db.commit()

    logger.info("Order created: id=%s by=%s total=%s", order.id, order.ordered_by, order.total_price)
    # загружаем заказ обратно с items и created_at
    return await get_order_by_id(db, order.id)


async def delete_all_orders(db: AsyncSession) -> int:
    """
    Удаляет все заказы вместе с позициями. Возвращает число удалённых заказов.
    """
    await db.execute(delete(OrderItem))
    result = await db.execute(delete(Order))
    await db.commit()
    logger.info("All orders deleted: %s", result.rowcount)
    return result.rowcount
