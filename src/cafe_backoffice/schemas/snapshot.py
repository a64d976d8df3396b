from typing import List

from .base import CamelModel
from .activity_log import ActivityLogRead
from .catalog import CategoryRead, HolidayRead
from .employee import ActiveSessionRead, EmployeeRead
from .menu_item import MenuItemRead
from .order import OrderRead
from .product import ProductRead
from .reservation import ReservationRead
from .work_session import WorkSessionRead


class DataSnapshot(CamelModel):
    """Все коллекции одним ответом (GET /api/data)."""

    users: List[EmployeeRead]
    products: List[ProductRead]
    orders: List[OrderRead]
    reservations: List[ReservationRead]
    categories: List[CategoryRead]
    holidays: List[HolidayRead]
    work_sessions: List[WorkSessionRead]
    active_sessions: List[ActiveSessionRead]
    logs: List[ActivityLogRead]
    menu_items: List[MenuItemRead]
