from datetime import datetime
from typing import List, Optional

from pydantic import Field, constr

from .base import CamelModel, Weekday
from ..models.product import UnitEnum


class WeeklyDemand(CamelModel):
    """Плановый расход товара по дням недели."""

    monday: float = Field(0, ge=0)
    tuesday: float = Field(0, ge=0)
    wednesday: float = Field(0, ge=0)
    thursday: float = Field(0, ge=0)
    friday: float = Field(0, ge=0)
    saturday: float = Field(0, ge=0)
    sunday: float = Field(0, ge=0)


class ProductCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1)
    category: constr(strip_whitespace=True, min_length=1)
    unit: UnitEnum
    price_per_unit: float = Field(0, ge=0)
    supplier: constr(strip_whitespace=True, min_length=1)
    alt_supplier: Optional[str] = None
    package_size: float = Field(1, gt=0)
    demand: WeeklyDemand = Field(default_factory=WeeklyDemand)
    schedule_days: List[Weekday] = []


class ProductUpdate(CamelModel):
    name: Optional[constr(strip_whitespace=True, min_length=1)] = None
    category: Optional[constr(strip_whitespace=True, min_length=1)] = None
    unit: Optional[UnitEnum] = None
    price_per_unit: Optional[float] = Field(None, ge=0)
    supplier: Optional[constr(strip_whitespace=True, min_length=1)] = None
    alt_supplier: Optional[str] = None
    package_size: Optional[float] = Field(None, gt=0)
    demand: Optional[WeeklyDemand] = None
    schedule_days: Optional[List[Weekday]] = None

    class Config:
        extra = "forbid"


class ProductRead(CamelModel):
    id: int
    name: str
    category: str
    unit: UnitEnum
    price_per_unit: float
    supplier: str
    alt_supplier: Optional[str] = None
    package_size: float
    image: str
    demand: WeeklyDemand
    schedule_days: List[Weekday]
    created_at: datetime
    updated_at: datetime
