from datetime import datetime
from typing import Optional

from .base import PosEntity


class InventoryItem(PosEntity):
    name: str
    quantity: float
    unit: str
    min_quantity: Optional[float] = None
    cost_per_unit: Optional[float] = None
    supplier: Optional[str] = None
    last_restocked: Optional[datetime] = None
