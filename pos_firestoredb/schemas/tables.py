from typing import Optional

from .base import PosEntity


class Table(PosEntity):
    name: str
    seats: int
    status: str
    zone_id: Optional[str] = None
    current_order_id: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None


class Zone(PosEntity):
    name: str
    color: Optional[str] = None
