from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.order import create_order, delete_all_orders, get_order_by_id, get_orders
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.schemas.order import BulkDeleteResult, OrderCreate, OrderRead

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=List[OrderRead])
async def list_orders(
    limit: Optional[int] = Query(None, ge=1, description="Количество записей для вывода"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Возвращает список заказов, новые первыми.
    """
    return await get_orders(db, limit=limit)


@router.post("", response_model=OrderRead, status_code=201)
async def create_order_endpoint(
    order_in: OrderCreate,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Возвращает созданный заказ.
    Пустой список позиций или нулевая/отсутствующая сумма -> 400.
    """
    order = await create_order(db, order_in)
    await record_activity(
        db, "order_created", actor=actor or order.ordered_by,
        order_id=order.id, total_price=float(order.total_price), items=len(order.items),
    )
    return order


# объявлен до /{order_id}, иначе "all" разбирается как id
@router.delete("/all", response_model=BulkDeleteResult)
async def remove_all_orders(
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Удаляет все заказы.
    """
    deleted = await delete_all_orders(db)
    await record_activity(db, "orders_cleared", actor=actor, deleted=deleted)
    return {"deleted": deleted}


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: int = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Возвращает детализацию заказа по id.
    """
    order = await get_order_by_id(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
