from datetime import date

from pydantic import constr

from .base import CamelModel


class CategoryCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=64)


class CategoryRead(CamelModel):
    id: int
    name: str


class HolidayCreate(CamelModel):
    date: date
    name: constr(strip_whitespace=True, min_length=1)


class HolidayRead(CamelModel):
    id: int
    date: date
    name: str
