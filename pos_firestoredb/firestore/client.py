import os
from typing import Optional

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials as firebase_credentials
from google.cloud import firestore

from ..utils.config import FirebaseConfig, get_config
from ..utils.logger import logger


class FirebaseConnection:
    """Handles to the Firebase app, its Firestore database and its auth service.

    Built once from a ``FirebaseConfig``. When the config is incomplete or
    the handles cannot be created, ``app``, ``db`` and ``auth`` stay ``None``
    and every repository built on this connection becomes a no-op.
    Pre-built handles can be passed in directly, which is how tests inject
    an in-memory Firestore.
    """

    _shared = None

    def __init__(
        self,
        config: Optional[FirebaseConfig] = None,
        *,
        app=None,
        db=None,
        auth=None,
        watch_db=None,
    ):
        self.config = config if config is not None else get_config()
        self.app = app
        self.db = db
        self.auth = auth
        self._watch_db = watch_db
        self._google_credentials = None

        if db is not None:
            logger.debug("🔌 Using injected Firestore client")
            return

        if not self.config.is_configured():
            logger.warning("⚠️ Firebase not configured. Using local mock data.")
            return

        try:
            credential = self._resolve_credential()
            self.app = self._initialize_app(credential)
            self._google_credentials = credential.get_credential()
            self.db = firestore.AsyncClient(project=self.config.project_id, credentials=self._google_credentials)
            self.auth = firebase_auth.Client(self.app)
            logger.info("🔥 Firebase initialized successfully")
        except Exception as e:
            logger.error(f"❌ Firebase initialization error: {e}")
            self.app = None
            self.db = None
            self.auth = None
            self._google_credentials = None

    def _resolve_credential(self) -> firebase_credentials.Base:
        credentials_file = self.config.credentials_file
        if credentials_file and os.path.exists(credentials_file):
            logger.info(f"✅ Using service account file: {credentials_file}")
            return firebase_credentials.Certificate(credentials_file)

        logger.info("✅ Using Application Default Credentials (ADC).")
        return firebase_credentials.ApplicationDefault()

    def _initialize_app(self, credential: firebase_credentials.Base) -> firebase_admin.App:
        options = {"projectId": self.config.project_id}
        if self.config.storage_bucket:
            options["storageBucket"] = self.config.storage_bucket
        try:
            existing = firebase_admin.get_app(self.config.app_name)
            logger.debug(f"♻️ Reusing Firebase app '{self.config.app_name}'")
            return existing
        except ValueError:
            return firebase_admin.initialize_app(credential, options=options, name=self.config.app_name)

    @property
    def is_available(self) -> bool:
        return self.db is not None

    def watch_client(self):
        """Synchronous Firestore client used for realtime listeners.

        The async client has no ``on_snapshot``, so listeners go through a
        second, lazily created, sync client on the same project.
        """
        if not self.is_available:
            return None
        if self._watch_db is None:
            self._watch_db = firestore.Client(project=self.config.project_id, credentials=self._google_credentials)
        return self._watch_db

    @classmethod
    def shared(cls) -> "FirebaseConnection":
        if cls._shared is None:
            cls._shared = cls(get_config())
        return cls._shared


def is_firebase_configured() -> bool:
    """True when the shared connection can reach Firebase.

    A complete config whose bootstrap failed reports ``False``, the same as
    ``PosFirestoreService.is_firebase_configured``. ``FirebaseConfig.is_configured``
    checks the config values alone.
    """
    return FirebaseConnection.shared().is_available
