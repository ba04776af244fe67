from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.tables import Table, Zone
from .repository import FirestoreCollectionDB, FirestoreWatchedCollectionDB


class FirestoreTablesDB(FirestoreWatchedCollectionDB[Table]):
    collection_name = DatabaseCollectionNames.TABLES_COLLECTION_NAME.value
    model = Table


class FirestoreZonesDB(FirestoreCollectionDB[Zone]):
    collection_name = DatabaseCollectionNames.ZONES_COLLECTION_NAME.value
    model = Zone
