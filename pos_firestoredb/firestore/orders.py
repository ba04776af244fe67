from typing import Any, Optional

from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.keys import FireStoreKeys
from ..schemas.orders import Order
from ..utils.config import PersistenceErrorPolicy
from ..utils.logger import logger
from ..utils.standard_response import StandardResponse
from .repository import FirestoreWatchedCollectionDB

ORDERS_COLLECTION = DatabaseCollectionNames.ORDERS_COLLECTION_NAME.value


# indexing: timestamp DESC
class FirestoreOrdersDB(FirestoreWatchedCollectionDB[Order]):
    """Orders, newest first.

    Saving an order reports failures in the returned response instead of
    raising by default, so order entry keeps going when a write fails.
    Pass ``error_policy=PersistenceErrorPolicy.RAISE`` to get exceptions.
    """

    collection_name = ORDERS_COLLECTION
    model = Order
    convert_dates = True
    order_by = FireStoreKeys.timestamp
    default_error_policy = PersistenceErrorPolicy.REPORT

    async def save(self, entity: Any) -> StandardResponse:
        if not self.is_available:
            logger.error("❌ save_order: DB not initialized")
            return StandardResponse.skipped_response()

        logger.info(f"💾 saving order: {self._describe(entity)}")
        response = await super().save(entity)
        if response.is_success:
            logger.info(f"✅ save_order success: {response.data['id']}")
        return response

    @staticmethod
    def _describe(entity: Any) -> Optional[str]:
        if isinstance(entity, dict):
            return entity.get("id")
        return getattr(entity, "id", None)
