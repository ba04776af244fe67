from enum import Enum


class DatabaseCollectionNames(Enum):
    SETTINGS_COLLECTION_NAME = "settings"
    MENU_COLLECTION_NAME = "menu"
    CATEGORIES_COLLECTION_NAME = "categories"
    ORDERS_COLLECTION_NAME = "orders"
    TABLES_COLLECTION_NAME = "tables"
    ZONES_COLLECTION_NAME = "zones"
    INVENTORY_COLLECTION_NAME = "inventory"
    CUSTOMERS_COLLECTION_NAME = "customers"
    COUPONS_COLLECTION_NAME = "coupons"
    BOOKINGS_COLLECTION_NAME = "bookings"
    USERS_COLLECTION_NAME = "users"
    ROLES_COLLECTION_NAME = "roles"
