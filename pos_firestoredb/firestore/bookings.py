from ..schemas.bookings import Booking
from ..schemas.collection_names import DatabaseCollectionNames
from .repository import FirestoreCollectionDB

BOOKINGS_COLLECTION = DatabaseCollectionNames.BOOKINGS_COLLECTION_NAME.value


class FirestoreBookingsDB(FirestoreCollectionDB[Booking]):
    # date and time are stored as the strings the booking form produces
    collection_name = BOOKINGS_COLLECTION
    model = Booking
