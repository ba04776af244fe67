from typing import List

from pydantic import BaseModel, Field

from .bookings import Booking
from .coupons import Coupon
from .customers import Customer
from .inventory import InventoryItem
from .menu import Category, MenuItem
from .settings import SystemSettings
from .tables import Table, Zone
from .users import Role, User


class DatabaseSeed(BaseModel):
    """Everything written by a first-time database initialization.

    Orders are not part of the seed; the collection starts empty.
    """

    settings: SystemSettings
    menu: List[MenuItem] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)
    tables: List[Table] = Field(default_factory=list)
    zones: List[Zone] = Field(default_factory=list)
    inventory: List[InventoryItem] = Field(default_factory=list)
    customers: List[Customer] = Field(default_factory=list)
    coupons: List[Coupon] = Field(default_factory=list)
    bookings: List[Booking] = Field(default_factory=list)
    users: List[User] = Field(default_factory=list)
    roles: List[Role] = Field(default_factory=list)
