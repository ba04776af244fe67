from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.menu import Category, MenuItem
from .repository import FirestoreCollectionDB


class FirestoreMenuDB(FirestoreCollectionDB[MenuItem]):
    collection_name = DatabaseCollectionNames.MENU_COLLECTION_NAME.value
    model = MenuItem


class FirestoreCategoriesDB(FirestoreCollectionDB[Category]):
    collection_name = DatabaseCollectionNames.CATEGORIES_COLLECTION_NAME.value
    model = Category
