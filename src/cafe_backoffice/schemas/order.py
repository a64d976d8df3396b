from datetime import datetime
from typing import List, Optional

from pydantic import Field, constr

from .base import CamelModel, Weekday


class OrderItemCreate(CamelModel):
    product_id: int
    name: constr(strip_whitespace=True, min_length=1)
    quantity: int = Field(..., ge=1)
    unit: constr(strip_whitespace=True, min_length=1)
    price_at_order: float = Field(..., ge=0)
    day: Optional[Weekday] = None


class OrderCreate(CamelModel):
    ordered_by: Optional[str] = None
    # 0 тоже отклоняется: заказ без суммы не принимается
    total_price: float = Field(..., gt=0)
    items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderItemRead(CamelModel):
    id: int
    product_id: int
    name: str
    quantity: int
    unit: str
    price_at_order: float
    day: Optional[Weekday] = None


class OrderRead(CamelModel):
    id: int
    ordered_by: str
    total_price: float
    created_at: datetime
    items: List[OrderItemRead] = []


class BulkDeleteResult(CamelModel):
    deleted: int
