from datetime import datetime
from typing import Optional

from .base import PosEntity


class Customer(PosEntity):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    points: Optional[int] = None
    total_spent: Optional[float] = None
    visits: Optional[int] = None
    last_visit: Optional[datetime] = None
    created_at: Optional[datetime] = None
