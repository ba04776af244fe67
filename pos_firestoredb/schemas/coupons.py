from typing import Optional

from .base import PosEntity


class Coupon(PosEntity):
    code: str
    discount_type: str
    value: float
    min_order: Optional[float] = None
    active: Optional[bool] = None
    valid_until: Optional[str] = None
    usage_limit: Optional[int] = None
    used_count: Optional[int] = None
