from typing import Optional

from .base import PosEntity


class Booking(PosEntity):
    customer_name: str
    date: str
    time: str
    guests: int
    phone: Optional[str] = None
    table_id: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
