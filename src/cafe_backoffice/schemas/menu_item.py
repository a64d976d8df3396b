from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, Field, constr

from .base import CamelModel
from ..images import parse_data_uri


def _check_data_uri(value: str) -> str:
    parse_data_uri(value)
    return value


DataUri = Annotated[str, AfterValidator(_check_data_uri)]


class MenuItemCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1)
    category: constr(strip_whitespace=True, min_length=1)
    price: float = Field(..., ge=0)
    description: Optional[str] = None
    image: Optional[DataUri] = None
    available: bool = True


class MenuItemUpdate(CamelModel):
    name: Optional[constr(strip_whitespace=True, min_length=1)] = None
    category: Optional[constr(strip_whitespace=True, min_length=1)] = None
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[DataUri] = None
    available: Optional[bool] = None

    class Config:
        extra = "forbid"


class MenuItemRead(CamelModel):
    id: int
    name: str
    category: str
    price: float
    description: Optional[str] = None
    image: Optional[str] = None
    available: bool
    created_at: datetime
    updated_at: datetime
