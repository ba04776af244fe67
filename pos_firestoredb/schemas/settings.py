from typing import Optional

from .base import PosRecord


class SystemSettings(PosRecord):
    restaurant_name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    currency: Optional[str] = None
    language: Optional[str] = None
    tax_rate: Optional[float] = None
    service_charge: Optional[float] = None
    receipt_footer: Optional[str] = None
    self_order_enabled: Optional[bool] = None
