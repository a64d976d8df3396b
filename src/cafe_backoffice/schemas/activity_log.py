from datetime import datetime
from typing import Any, Dict

from .base import CamelModel


class ActivityLogRead(CamelModel):
    id: int
    timestamp: datetime
    actor: str
    action: str
    details: Dict[str, Any] = {}
