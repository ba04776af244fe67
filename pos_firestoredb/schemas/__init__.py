"""
Database schemas and models module.

This module contains all database schemas, models, and data structures including:
- Restaurant entities (menu, orders, tables, inventory, customers, ...)
- Collection names enumeration
- Database keys and constants
- The first-run seed bundle
"""

from .base import PosEntity, PosRecord
from .bookings import Booking
from .collection_names import DatabaseCollectionNames
from .coupons import Coupon
from .customers import Customer
from .inventory import InventoryItem
from .keys import FireStoreKeys
from .menu import Category, MenuItem, MenuItemOption
from .orders import Order, OrderItem
from .seed import DatabaseSeed
from .settings import SystemSettings
from .tables import Table, Zone
from .users import Role, User

__all__ = [
    "PosEntity",
    "PosRecord",
    "Booking",
    "DatabaseCollectionNames",
    "Coupon",
    "Customer",
    "InventoryItem",
    "FireStoreKeys",
    "Category",
    "MenuItem",
    "MenuItemOption",
    "Order",
    "OrderItem",
    "DatabaseSeed",
    "SystemSettings",
    "Table",
    "Zone",
    "Role",
    "User",
]
