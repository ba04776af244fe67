from datetime import datetime
from typing import List, Optional

from .base import PosEntity, PosRecord


class OrderItem(PosRecord):
    menu_item_id: str
    name: str
    price: float
    quantity: int
    notes: Optional[str] = None
    modifiers: Optional[List[str]] = None
    served_at: Optional[datetime] = None


class Order(PosEntity):
    items: List[OrderItem]
    total: float
    status: str
    timestamp: datetime
    table_id: Optional[str] = None
    customer_id: Optional[str] = None
    order_type: Optional[str] = None
    payment_method: Optional[str] = None
    discount: Optional[float] = None
    coupon_code: Optional[str] = None
    notes: Optional[str] = None
    completed_at: Optional[datetime] = None
