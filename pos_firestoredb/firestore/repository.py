from typing import Any, Callable, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from google.cloud import firestore
from pydantic import BaseModel, ValidationError

from ..schemas.base import PosEntity, PosRecord
from ..utils.config import PersistenceErrorPolicy
from ..utils.error_codes import ErrorCodes, InvalidEntityError
from ..utils.logger import logger
from ..utils.normalization import from_timestamps, strip_absent, to_document, to_timestamps
from ..utils.standard_response import StandardResponse
from ..utils.time_it import time_it
from .client import FirebaseConnection

ModelT = TypeVar("ModelT", bound=PosEntity)
RecordT = TypeVar("RecordT", bound=PosRecord)

Unsubscribe = Callable[[], None]


def to_record(model: Type[RecordT], data: dict, source: str) -> RecordT:
    """Build ``model`` from a stored document without rejecting or rewriting it.

    A document that does not fit the model, or whose values the model would
    coerce, comes back unvalidated with its stored values as is.
    """
    try:
        record = model.model_validate(data)
    except ValidationError as e:
        logger.warning(f"⚠️ {source} does not match {model.__name__} ({e.error_count()} errors), loading it as stored")
        return model.model_construct(**data)

    if record.model_dump(mode="python", exclude_unset=True) != data:
        logger.warning(f"⚠️ {source} has values {model.__name__} would change, loading it as stored")
        return model.model_construct(**data)
    return record


class FirestoreCollectionDB(Generic[ModelT]):
    """Upsert, delete and load-all over one Firestore collection.

    Subclasses set ``collection_name`` and ``model``. ``convert_dates``
    turns datetimes into Firestore timestamps on write and back on read.
    ``order_by`` makes ``load_all`` return documents sorted by that field,
    most recent first, using the backend query.
    """

    collection_name: str
    model: Type[ModelT]
    convert_dates: bool = False
    order_by: Optional[str] = None
    default_error_policy: PersistenceErrorPolicy = PersistenceErrorPolicy.RAISE

    def __init__(
        self,
        connection: Optional[FirebaseConnection] = None,
        error_policy: Optional[PersistenceErrorPolicy] = None,
    ):
        self.connection = connection if connection is not None else FirebaseConnection.shared()
        self.error_policy = error_policy if error_policy is not None else self.default_error_policy
        self.collection = self.connection.db.collection(self.collection_name) if self.connection.is_available else None

    @property
    def is_available(self) -> bool:
        return self.collection is not None

    def _entity_id(self, entity: Any) -> str:
        if isinstance(entity, BaseModel):
            doc_id = getattr(entity, "id", None)
        elif isinstance(entity, Mapping):
            doc_id = entity.get("id")
        else:
            doc_id = None
        if not isinstance(doc_id, str) or not doc_id:
            raise InvalidEntityError(f"{type(entity).__name__} saved to '{self.collection_name}' has no id")
        return doc_id

    def prepare_document(self, entity: Any) -> Tuple[str, dict]:
        """Return the document id and the payload to store for ``entity``."""
        doc_id = self._entity_id(entity)
        payload = strip_absent(to_document(entity))
        if self.convert_dates:
            payload = to_timestamps(payload)
        return doc_id, payload

    def document(self, doc_id: str):
        return self.collection.document(doc_id)

    def _from_snapshot(self, doc) -> ModelT:
        data = doc.to_dict() or {}
        if self.convert_dates:
            data = from_timestamps(data)
        data["id"] = doc.id
        return to_record(self.model, data, f"{self.collection_name}/{doc.id}")

    def _query(self, collection):
        if self.order_by:
            return collection.order_by(self.order_by, direction=firestore.Query.DESCENDING)
        return collection

    async def save(self, entity: Any) -> StandardResponse:
        """Write ``entity`` under its id, replacing any existing document."""
        if not self.is_available:
            return StandardResponse.skipped_response()

        try:
            doc_id, payload = self.prepare_document(entity)
            await self.document(doc_id).set(payload)
        except Exception as e:
            if self.error_policy is PersistenceErrorPolicy.RAISE:
                raise
            logger.error(f"❌ Error saving to {self.collection_name}: {str(e)}")
            return StandardResponse.failure(ErrorCodes.get_http_status_code(e), str(e))

        logger.debug(f"✅ Saved {self.collection_name}/{doc_id}")
        return StandardResponse.success(data={"id": doc_id}, message=f"Saved to {self.collection_name}")

    async def delete(self, doc_id: str) -> StandardResponse:
        """Delete a document. Deleting a missing document is not an error."""
        if not self.is_available:
            return StandardResponse.skipped_response()
        if not doc_id:
            raise InvalidEntityError(f"Cannot delete from {self.collection_name} without an id")

        await self.document(doc_id).delete()
        logger.debug(f"🗑️ Deleted {self.collection_name}/{doc_id}")
        return StandardResponse.success(data={"id": doc_id}, message=f"Deleted from {self.collection_name}")

    @time_it
    async def load_all(self) -> List[ModelT]:
        if not self.is_available:
            return []

        docs = [doc async for doc in self._query(self.collection).stream()]
        logger.debug(f"📥 Loaded {len(docs)} documents from {self.collection_name}")
        return [self._from_snapshot(doc) for doc in docs]


class FirestoreWatchedCollectionDB(FirestoreCollectionDB[ModelT]):
    """Collection that can also push its full contents to a listener on every change."""

    def subscribe(self, callback: Callable[[List[ModelT]], None]) -> Optional[Unsubscribe]:
        """Call ``callback`` with every record in the collection each time it changes.

        The callback runs on the listener thread. Returns the function that
        stops the listener, or ``None`` when Firebase is not available.
        """
        watch_db = self.connection.watch_client() if self.is_available else None
        if watch_db is None:
            return None

        def on_snapshot(docs, changes, read_time):
            callback([self._from_snapshot(doc) for doc in docs])

        watch = self._query(watch_db.collection(self.collection_name)).on_snapshot(on_snapshot)
        logger.info(f"👂 Listening to {self.collection_name}")
        return watch.unsubscribe
