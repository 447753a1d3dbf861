"""
Test configuration for collection downloader unit tests.

Ensures the project root is on sys.path so the package can be imported without
an install, points log files at a temporary directory, and provides an
in-memory stand-in for the MongoDB client.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="downloader-logs-"))
os.environ.setdefault("REQUEST_LOGGING_ENABLED", "true")

from collection_downloader import config, database  # noqa: E402

API_KEY = "test-api-key"
ACCESS_KEY = "test-access-key"
MONGODB_URI = "mongodb://fake-host:27017"


class FakeCursor:
    def __init__(self, documents, error=None):
        self._documents = documents
        self._error = error

    async def to_list(self, length=None):
        if self._error is not None:
            raise self._error
        return list(self._documents)


class FakeCollection:
    def __init__(self, store, error=None):
        self._store = store
        self._error = error
        self.filters = []

    def find(self, filter=None):
        self.filters.append(filter)
        return FakeCursor(self._store, self._error)


class FakeDatabase:
    def __init__(self, client, name):
        self._client = client
        self._name = name

    def __getitem__(self, collection_name):
        self._client.selected.append((self._name, collection_name))
        documents = self._client.data.get(self._name, {}).get(collection_name, [])
        collection = FakeCollection(documents, self._client.query_error)
        self._client.collections.append(collection)
        return collection


class FakeMongoClient:
    """Records connect/close calls the way the async pymongo client is used."""

    def __init__(self, uri, data, query_error=None, connect_error=None):
        self.uri = uri
        self.data = data
        self.query_error = query_error
        self.connect_error = connect_error
        self.connect_calls = 0
        self.close_calls = 0
        self.selected = []
        self.collections = []

    async def aconnect(self):
        self.connect_calls += 1
        if self.connect_error is not None:
            raise self.connect_error

    async def close(self):
        self.close_calls += 1

    def __getitem__(self, database_name):
        return FakeDatabase(self, database_name)


class FakeMongo:
    """Factory installed as `database.client_factory`; keeps every client it built."""

    def __init__(self):
        self.data = {}
        self.query_error = None
        self.connect_error = None
        self.clients = []

    def seed(self, database_name, collection_name, documents):
        self.data.setdefault(database_name, {})[collection_name] = list(documents)

    def __call__(self, uri):
        client = FakeMongoClient(
            uri,
            self.data,
            query_error=self.query_error,
            connect_error=self.connect_error,
        )
        self.clients.append(client)
        return client


@pytest.fixture
def fake_mongo(monkeypatch):
    fake = FakeMongo()
    monkeypatch.setattr(database, "client_factory", fake)
    return fake


@pytest.fixture
def configured(monkeypatch):
    """Install known secrets and a connection string for the duration of a test."""
    monkeypatch.setattr(config, "API_KEY", API_KEY)
    monkeypatch.setattr(config, "ACCESS_KEY", ACCESS_KEY)
    monkeypatch.setattr(config, "MONGODB_URI", MONGODB_URI)
    return config


@pytest.fixture
def client(configured, fake_mongo):
    from fastapi.testclient import TestClient

    from collection_downloader.server import app

    with TestClient(app) as test_client:
        yield test_client
