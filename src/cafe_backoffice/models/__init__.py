from .user import Employee, RoleEnum
from .product import Product, UnitEnum
from .order import Order, UNKNOWN_ORDERER
from .order_item import OrderItem
from .reservation import Reservation, ReservationStatusEnum
from .menu_item import MenuItem
from .work_session import WorkSession
from .active_session import ActiveSession
from .category import Category
from .holiday import Holiday
from .activity_log import ActivityLog

__all__ = [
    "Employee",
    "RoleEnum",
    "Product",
    "UnitEnum",
    "Order",
    "UNKNOWN_ORDERER",
    "OrderItem",
    "Reservation",
    "ReservationStatusEnum",
    "MenuItem",
    "WorkSession",
    "ActiveSession",
    "Category",
    "Holiday",
    "ActivityLog",
]
