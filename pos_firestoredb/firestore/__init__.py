"""
Firestore database operations module.

This module contains all Firestore-related database operations including:
- Connection bootstrap and the "is Firebase usable" check
- Save / delete / load-all for every POS collection
- Live listeners for orders and tables
- First-run batch initialization
"""

from .client import FirebaseConnection, is_firebase_configured
from .repository import FirestoreCollectionDB, FirestoreWatchedCollectionDB
from .settings import FirestoreSettingsDB
from .menu import FirestoreMenuDB, FirestoreCategoriesDB
from .orders import FirestoreOrdersDB
from .tables import FirestoreTablesDB, FirestoreZonesDB
from .inventory import FirestoreInventoryDB
from .customers import FirestoreCustomersDB
from .coupons import FirestoreCouponsDB
from .bookings import FirestoreBookingsDB
from .users import FirestoreUsersDB, FirestoreRolesDB
from .seed import FirestoreSeeder
from .service import PosFirestoreService

__all__ = [
    "FirebaseConnection",
    "is_firebase_configured",
    "FirestoreCollectionDB",
    "FirestoreWatchedCollectionDB",
    "FirestoreSettingsDB",
    "FirestoreMenuDB",
    "FirestoreCategoriesDB",
    "FirestoreOrdersDB",
    "FirestoreTablesDB",
    "FirestoreZonesDB",
    "FirestoreInventoryDB",
    "FirestoreCustomersDB",
    "FirestoreCouponsDB",
    "FirestoreBookingsDB",
    "FirestoreUsersDB",
    "FirestoreRolesDB",
    "FirestoreSeeder",
    "PosFirestoreService",
]
