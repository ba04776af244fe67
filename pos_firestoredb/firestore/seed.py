from typing import Dict, Optional

from ..schemas.seed import DatabaseSeed
from ..utils.logger import logger
from ..utils.standard_response import StandardResponse
from .client import FirebaseConnection
from .repository import FirestoreCollectionDB
from .settings import FirestoreSettingsDB


class FirestoreSeeder:
    """Writes a ``DatabaseSeed`` to every collection in one atomic batch.

    ``repositories`` maps each list field of the seed to the repository
    whose keys and date conversion it should use.
    """

    def __init__(
        self,
        settings_db: FirestoreSettingsDB,
        repositories: Dict[str, FirestoreCollectionDB],
        connection: Optional[FirebaseConnection] = None,
    ):
        self.connection = connection if connection is not None else settings_db.connection
        self.settings_db = settings_db
        self.repositories = repositories

    async def initialize_database(self, seed: DatabaseSeed) -> StandardResponse:
        if not self.connection.is_available:
            return StandardResponse.skipped_response()

        batch = self.connection.db.batch()
        batch.set(self.settings_db.document(), self.settings_db.prepare_document(seed.settings))

        written = 1
        for field_name, repository in self.repositories.items():
            for entity in getattr(seed, field_name):
                doc_id, payload = repository.prepare_document(entity)
                batch.set(repository.document(doc_id), payload)
                written += 1

        await batch.commit()
        logger.info(f"✅ Database initialized with default data ({written} documents)")
        return StandardResponse.success(data={"documents": written}, message="Database initialized")

    async def is_database_empty(self) -> bool:
        return await self.settings_db.is_database_empty()
