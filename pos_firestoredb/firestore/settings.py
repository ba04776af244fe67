from typing import Any, Optional

from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.keys import FireStoreKeys
from ..schemas.settings import SystemSettings
from ..utils.config import PersistenceErrorPolicy
from ..utils.error_codes import ErrorCodes
from ..utils.logger import logger
from ..utils.normalization import strip_absent, to_document
from ..utils.standard_response import StandardResponse
from .client import FirebaseConnection
from .repository import to_record

SETTINGS_COLLECTION = DatabaseCollectionNames.SETTINGS_COLLECTION_NAME.value
SETTINGS_DOCUMENT_ID = FireStoreKeys.settingsDocumentId


class FirestoreSettingsDB:
    """The restaurant settings, kept as the single document ``settings/main``."""

    def __init__(
        self,
        connection: Optional[FirebaseConnection] = None,
        error_policy: Optional[PersistenceErrorPolicy] = None,
    ):
        self.connection = connection if connection is not None else FirebaseConnection.shared()
        self.error_policy = error_policy if error_policy is not None else PersistenceErrorPolicy.RAISE
        self.collection = self.connection.db.collection(SETTINGS_COLLECTION) if self.connection.is_available else None

    @property
    def is_available(self) -> bool:
        return self.collection is not None

    def document(self):
        return self.collection.document(SETTINGS_DOCUMENT_ID)

    @staticmethod
    def prepare_document(settings: Any) -> dict:
        return strip_absent(to_document(settings))

    async def save_settings(self, settings: Any) -> StandardResponse:
        if not self.is_available:
            return StandardResponse.skipped_response()

        try:
            await self.document().set(self.prepare_document(settings))
        except Exception as e:
            if self.error_policy is PersistenceErrorPolicy.RAISE:
                raise
            logger.error(f"❌ Error saving settings: {str(e)}")
            return StandardResponse.failure(ErrorCodes.get_http_status_code(e), str(e))

        logger.debug("✅ Settings saved")
        return StandardResponse.success(data={"id": SETTINGS_DOCUMENT_ID}, message="Settings saved")

    async def load_settings(self) -> Optional[SystemSettings]:
        if not self.is_available:
            return None

        snap = await self.document().get()
        if not snap.exists:
            return None
        return to_record(SystemSettings, snap.to_dict() or {}, f"{SETTINGS_COLLECTION}/{SETTINGS_DOCUMENT_ID}")

    async def delete_settings(self) -> StandardResponse:
        if not self.is_available:
            return StandardResponse.skipped_response()

        await self.document().delete()
        return StandardResponse.success(data={"id": SETTINGS_DOCUMENT_ID}, message="Settings deleted")

    async def is_database_empty(self) -> bool:
        """True until the settings document has been written. Always true without Firebase."""
        if not self.is_available:
            return True

        snap = await self.document().get()
        return not snap.exists
