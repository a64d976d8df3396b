from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_backoffice.crud.catalog import (
    create_category,
    create_holiday,
    delete_category,
    delete_holiday,
    get_categories,
    get_holidays,
)
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.exceptions import ConflictError
from cafe_backoffice.schemas.catalog import CategoryCreate, CategoryRead, HolidayCreate, HolidayRead

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/categories", response_model=List[CategoryRead])
async def list_categories(db: AsyncSession = Depends(get_async_session)):
    return await get_categories(db)


@router.post("/categories", response_model=CategoryRead, status_code=201)
async def create_category_endpoint(category_in: CategoryCreate, db: AsyncSession = Depends(get_async_session)):
    try:
        return await create_category(db, category_in)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.delete("/categories/{category_id}", status_code=204)
async def remove_category(category_id: int, db: AsyncSession = Depends(get_async_session)):
    if not await delete_category(db, category_id):
        raise HTTPException(status_code=404, detail="Category not found")


@router.get("/holidays", response_model=List[HolidayRead])
async def list_holidays(db: AsyncSession = Depends(get_async_session)):
    """
    Дни, когда заведение закрыто, по дате.
    """
    return await get_holidays(db)


@router.post("/holidays", response_model=HolidayRead, status_code=201)
async def create_holiday_endpoint(holiday_in: HolidayCreate, db: AsyncSession = Depends(get_async_session)):
    try:
        return await create_holiday(db, holiday_in)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.delete("/holidays/{holiday_id}", status_code=204)
async def remove_holiday(holiday_id: int, db: AsyncSession = Depends(get_async_session)):
    if not await delete_holiday(db, holiday_id):
        raise HTTPException(status_code=404, detail="Holiday not found")
