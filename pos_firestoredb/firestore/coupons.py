from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.coupons import Coupon
from .repository import FirestoreCollectionDB


class FirestoreCouponsDB(FirestoreCollectionDB[Coupon]):
    collection_name = DatabaseCollectionNames.COUPONS_COLLECTION_NAME.value
    model = Coupon
