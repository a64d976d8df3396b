from datetime import datetime
from typing import Optional

from .base import CamelModel


class WorkClockRequest(CamelModel):
    employee_id: int


class WorkSessionRead(CamelModel):
    id: int
    employee_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    total_hours: Optional[float] = None
