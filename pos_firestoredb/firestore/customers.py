from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.customers import Customer
from .repository import FirestoreCollectionDB


# dates: last_visit, created_at
class FirestoreCustomersDB(FirestoreCollectionDB[Customer]):
    collection_name = DatabaseCollectionNames.CUSTOMERS_COLLECTION_NAME.value
    model = Customer
    convert_dates = True
