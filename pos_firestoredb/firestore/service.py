from typing import Callable, List, Optional

from ..schemas.orders import Order
from ..schemas.seed import DatabaseSeed
from ..schemas.tables import Table
from ..utils.config import PersistenceErrorPolicy
from ..utils.standard_response import StandardResponse
from .bookings import FirestoreBookingsDB
from .client import FirebaseConnection
from .coupons import FirestoreCouponsDB
from .customers import FirestoreCustomersDB
from .inventory import FirestoreInventoryDB
from .menu import FirestoreCategoriesDB, FirestoreMenuDB
from .orders import FirestoreOrdersDB
from .repository import Unsubscribe
from .seed import FirestoreSeeder
from .settings import FirestoreSettingsDB
from .tables import FirestoreTablesDB, FirestoreZonesDB
from .users import FirestoreRolesDB, FirestoreUsersDB


class PosFirestoreService:
    """Every collection of the POS behind one object.

    The UI/state layer talks to this. All repositories share one
    connection; when it is not configured every call is a no-op that
    returns an empty result.
    """

    _shared = None

    def __init__(
        self,
        connection: Optional[FirebaseConnection] = None,
        order_error_policy: PersistenceErrorPolicy = PersistenceErrorPolicy.REPORT,
        default_error_policy: PersistenceErrorPolicy = PersistenceErrorPolicy.RAISE,
    ):
        self.connection = connection if connection is not None else FirebaseConnection.shared()

        self.settings = FirestoreSettingsDB(self.connection, default_error_policy)
        self.menu = FirestoreMenuDB(self.connection, default_error_policy)
        self.categories = FirestoreCategoriesDB(self.connection, default_error_policy)
        self.orders = FirestoreOrdersDB(self.connection, order_error_policy)
        self.tables = FirestoreTablesDB(self.connection, default_error_policy)
        self.zones = FirestoreZonesDB(self.connection, default_error_policy)
        self.inventory = FirestoreInventoryDB(self.connection, default_error_policy)
        self.customers = FirestoreCustomersDB(self.connection, default_error_policy)
        self.coupons = FirestoreCouponsDB(self.connection, default_error_policy)
        self.bookings = FirestoreBookingsDB(self.connection, default_error_policy)
        self.users = FirestoreUsersDB(self.connection, default_error_policy)
        self.roles = FirestoreRolesDB(self.connection, default_error_policy)

        self.seeder = FirestoreSeeder(
            self.settings,
            {
                "menu": self.menu,
                "categories": self.categories,
                "tables": self.tables,
                "zones": self.zones,
                "inventory": self.inventory,
                "customers": self.customers,
                "coupons": self.coupons,
                "bookings": self.bookings,
                "users": self.users,
                "roles": self.roles,
            },
            self.connection,
        )

        # Names used by the state layer
        self.save_settings = self.settings.save_settings
        self.load_settings = self.settings.load_settings

        self.save_menu_item = self.menu.save
        self.delete_menu_item_from_db = self.menu.delete
        self.load_menu = self.menu.load_all

        self.save_category = self.categories.save
        self.delete_category_from_db = self.categories.delete
        self.load_categories = self.categories.load_all

        self.save_order = self.orders.save
        self.delete_order_from_db = self.orders.delete
        self.load_orders = self.orders.load_all

        self.save_table = self.tables.save
        self.delete_table_from_db = self.tables.delete
        self.load_tables = self.tables.load_all

        self.save_zone = self.zones.save
        self.delete_zone_from_db = self.zones.delete
        self.load_zones = self.zones.load_all

        self.save_inventory_item = self.inventory.save
        self.delete_inventory_item_from_db = self.inventory.delete
        self.load_inventory = self.inventory.load_all

        self.save_customer = self.customers.save
        self.delete_customer_from_db = self.customers.delete
        self.load_customers = self.customers.load_all

        self.save_coupon = self.coupons.save
        self.delete_coupon_from_db = self.coupons.delete
        self.load_coupons = self.coupons.load_all

        self.save_booking = self.bookings.save
        self.delete_booking_from_db = self.bookings.delete
        self.load_bookings = self.bookings.load_all

        self.save_user = self.users.save
        self.delete_user_from_db = self.users.delete
        self.load_users = self.users.load_all

        self.save_role = self.roles.save
        self.delete_role_from_db = self.roles.delete
        self.load_roles = self.roles.load_all

    @classmethod
    def shared(cls) -> "PosFirestoreService":
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def is_firebase_configured(self) -> bool:
        return self.connection.is_available

    def subscribe_to_orders(self, callback: Callable[[List[Order]], None]) -> Optional[Unsubscribe]:
        return self.orders.subscribe(callback)

    def subscribe_to_tables(self, callback: Callable[[List[Table]], None]) -> Optional[Unsubscribe]:
        return self.tables.subscribe(callback)

    async def initialize_database(self, seed: DatabaseSeed) -> StandardResponse:
        return await self.seeder.initialize_database(seed)

    async def is_database_empty(self) -> bool:
        return await self.seeder.is_database_empty()
