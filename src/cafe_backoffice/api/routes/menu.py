from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.api.deps import get_actor
from cafe_backoffice.crud.activity_log import record_activity
from cafe_backoffice.crud.menu_item import (
    create_menu_item,
    delete_menu_item,
    get_menu_item_by_id,
    get_menu_items,
    update_menu_item,
)
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.schemas.menu_item import MenuItemCreate, MenuItemRead, MenuItemUpdate

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("", response_model=List[MenuItemRead])
async def list_menu(
    category: Optional[str] = Query(None, description="Фильтр по категории"),
    available: Optional[bool] = Query(None, description="Только доступные / недоступные"),
    db: AsyncSession = Depends(get_async_session),
):
    return await get_menu_items(db, category=category, available=available)


@router.get("/{item_id}", response_model=MenuItemRead)
async def get_menu_item(item_id: int, db: AsyncSession = Depends(get_async_session)):
    item = await get_menu_item_by_id(db, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.post("", response_model=MenuItemRead, status_code=201)
async def create_menu_item_endpoint(
    item_in: MenuItemCreate,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    item = await create_menu_item(db, item_in)
    await record_activity(db, "menu_item_created", actor=actor, item_id=item.id, name=item.name)
    return item


@router.put("/{item_id}", response_model=MenuItemRead)
async def update_menu_item_endpoint(
    item_id: int,
    item_in: MenuItemUpdate,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Частичное обновление позиции меню.
    """
    item = await update_menu_item(db, item_id, item_in)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    await record_activity(db, "menu_item_updated", actor=actor, item_id=item_id)
    return item


@router.delete("/{item_id}", status_code=204)
async def remove_menu_item(
    item_id: int,
    db: AsyncSession = Depends(get_async_session),
    actor: Optional[str] = Depends(get_actor),
):
    deleted = await delete_menu_item(db, item_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Menu item not found")
    await record_activity(db, "menu_item_deleted", actor=actor, item_id=item_id)
