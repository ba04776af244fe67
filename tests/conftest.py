"""
In-memory stand-in for the Firestore clients.

It covers the surface the repositories use: collections, documents,
descending ``order_by`` queries, async ``stream``, write batches and
``on_snapshot`` listeners. Stored datetimes come back as
``DatetimeWithNanoseconds`` in UTC the same way the real backend returns
them; naive values are read as UTC.
"""

import time
from datetime import datetime, timezone

import pytest
from google.api_core import exceptions as google_exceptions
from google.api_core.datetime_helpers import DatetimeWithNanoseconds

from pos_firestoredb.firestore.client import FirebaseConnection
from pos_firestoredb.firestore.service import PosFirestoreService
from pos_firestoredb.utils.config import FirebaseConfig
from pos_firestoredb.utils.normalization import ABSENT


def _encode(value):
    if value is ABSENT:
        raise TypeError("Cannot convert to a Firestore Value: ABSENT")
    if isinstance(value, datetime):
        # naive values are read as UTC and everything comes back in UTC
        utc = value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)
        return DatetimeWithNanoseconds(
            utc.year, utc.month, utc.day, utc.hour, utc.minute, utc.second, utc.microsecond,
            tzinfo=timezone.utc,
        )
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def _copy(value):
    if isinstance(value, dict):
        return {key: _copy(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy(item) for item in value]
    return value


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return _copy(self._data) if self._data is not None else None


class FakeWatch:
    def __init__(self, store, listener):
        self._store = store
        self._listener = listener

    def unsubscribe(self):
        if self._listener in self._store.listeners:
            self._store.listeners.remove(self._listener)


class FakeDocument:
    def __init__(self, store, collection_name, doc_id):
        if not doc_id:
            raise ValueError("A document must have an even number of path elements")
        self._store = store
        self.collection_name = collection_name
        self.id = doc_id

    async def set(self, data, merge=False):
        if self._store.fail_writes is not None:
            raise self._store.fail_writes
        self._store.write(self.collection_name, self.id, data)

    async def get(self):
        return FakeSnapshot(self.id, self._store.collections.get(self.collection_name, {}).get(self.id))

    async def delete(self):
        if self._store.fail_writes is not None:
            raise self._store.fail_writes
        self._store.remove(self.collection_name, self.id)


class FakeQuery:
    def __init__(self, store, collection_name, order_field=None, descending=False):
        self._store = store
        self.collection_name = collection_name
        self.order_field = order_field
        self.descending = descending

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self._store, self.collection_name, field, direction == "DESCENDING")

    def snapshots(self):
        docs = list(self._store.collections.get(self.collection_name, {}).items())
        if self.order_field:
            # documents without the ordering field are left out, like Firestore does
            docs = [(doc_id, data) for doc_id, data in docs if self.order_field in data]
            docs.sort(key=lambda item: item[1][self.order_field], reverse=self.descending)
        return [FakeSnapshot(doc_id, _copy(data)) for doc_id, data in docs]

    async def stream(self):
        for snap in self.snapshots():
            yield snap

    def on_snapshot(self, callback):
        listener = (self, callback)
        self._store.listeners.append(listener)
        callback(self.snapshots(), [], None)
        return FakeWatch(self._store, listener)


class FakeCollection(FakeQuery):
    def document(self, doc_id):
        return FakeDocument(self._store, self.collection_name, doc_id)


class FakeBatch:
    def __init__(self, store):
        self._store = store
        self.writes = []

    def set(self, doc_ref, data, merge=False):
        # encode now so unsupported values fail before anything is committed
        self.writes.append((doc_ref.collection_name, doc_ref.id, _encode(data)))

    async def commit(self):
        if self._store.fail_commit is not None:
            raise self._store.fail_commit
        for collection_name, doc_id, data in self.writes:
            self._store.collections.setdefault(collection_name, {})[doc_id] = data
        for collection_name in {write[0] for write in self.writes}:
            self._store.notify(collection_name)


class FakeFirestore:
    def __init__(self):
        self.collections = {}
        self.listeners = []
        self.fail_writes = None
        self.fail_commit = None

    def collection(self, name):
        return FakeCollection(self, name)

    def batch(self):
        return FakeBatch(self)

    def write(self, collection_name, doc_id, data):
        self.collections.setdefault(collection_name, {})[doc_id] = _encode(data)
        self.notify(collection_name)

    def remove(self, collection_name, doc_id):
        self.collections.get(collection_name, {}).pop(doc_id, None)
        self.notify(collection_name)

    def notify(self, collection_name):
        for query, callback in list(self.listeners):
            if query.collection_name == collection_name:
                callback(query.snapshots(), [], None)


def configured() -> FirebaseConfig:
    return FirebaseConfig(
        api_key="test-api-key",
        auth_domain="pos-test.firebaseapp.com",
        project_id="pos-test",
        storage_bucket="pos-test.appspot.com",
        messaging_sender_id="1234567890",
        app_id="1:1234567890:web:abcdef",
        credentials_file=None,
    )


def unconfigured() -> FirebaseConfig:
    return FirebaseConfig(api_key=None, auth_domain=None, project_id=None, credentials_file=None)


def at(hour: int, minute: int) -> datetime:
    return datetime(2026, 10, 17, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def connection(fake_db):
    return FirebaseConnection(configured(), db=fake_db, watch_db=fake_db, auth=object())


@pytest.fixture
def offline_connection():
    return FirebaseConnection(unconfigured())


@pytest.fixture
def service(connection):
    return PosFirestoreService(connection)


@pytest.fixture
def offline_service(offline_connection):
    return PosFirestoreService(offline_connection)


@pytest.fixture
def permission_denied():
    return google_exceptions.PermissionDenied("Missing or insufficient permissions.")


@pytest.fixture
def local_time_plus_7(monkeypatch):
    """Run with the process clock at UTC+7 (POSIX offsets are west of UTC)."""
    monkeypatch.setenv("TZ", "ICT-7")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
