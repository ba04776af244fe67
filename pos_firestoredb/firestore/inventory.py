from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.inventory import InventoryItem
from .repository import FirestoreCollectionDB


# dates: last_restocked
class FirestoreInventoryDB(FirestoreCollectionDB[InventoryItem]):
    collection_name = DatabaseCollectionNames.INVENTORY_COLLECTION_NAME.value
    model = InventoryItem
    convert_dates = True
