"""
Restaurant POS FirestoreDB Package

Firestore persistence for the restaurant point-of-sale: menu, orders,
tables, inventory, customers, coupons, bookings, users and roles.
"""

__version__ = "1.0.0"

from .firestore import *
from .schemas import *
from .utils import *

__all__ = [
    "__version__",
]
