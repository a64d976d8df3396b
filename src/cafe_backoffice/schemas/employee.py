from datetime import datetime
from typing import Optional

from pydantic import Field, constr

from .base import CamelModel
from ..models.user import RoleEnum


class EmployeeCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1)
    login: constr(strip_whitespace=True, min_length=1, max_length=64)
    position: constr(strip_whitespace=True, min_length=1)
    workplace: constr(strip_whitespace=True, min_length=1)
    hourly_rate: float = Field(..., ge=0)
    role: RoleEnum = RoleEnum.employee


class EmployeeUpdate(CamelModel):
    name: Optional[constr(strip_whitespace=True, min_length=1)] = None
    login: Optional[constr(strip_whitespace=True, min_length=1, max_length=64)] = None
    position: Optional[constr(strip_whitespace=True, min_length=1)] = None
    workplace: Optional[constr(strip_whitespace=True, min_length=1)] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    role: Optional[RoleEnum] = None

    class Config:
        extra = "forbid"


class EmployeeRead(CamelModel):
    id: int
    name: str
    login: str
    position: str
    workplace: str
    hourly_rate: float
    role: RoleEnum
    created_at: datetime
    updated_at: datetime


class LoginRequest(CamelModel):
    login: constr(strip_whitespace=True, min_length=1)


class LogoutResult(CamelModel):
    ok: bool = True
    removed: bool


class ActiveSessionRead(CamelModel):
    login: str
    since: datetime


class SetupAdminsResult(CamelModel):
    created: list[str]
    existing: list[str]
