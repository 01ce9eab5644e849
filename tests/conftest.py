from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from run import create_app


class FakeCollection:
    def __init__(self, store):
        self.store = store

    async def insert_one(self, document):
        if self.store.fail_on_insert:
            raise RuntimeError("write failed")
        inserted_id = ObjectId()
        self.store.documents.append({"_id": inserted_id, **document})
        return SimpleNamespace(inserted_id=inserted_id)


class FakeCaseStore:
    """Stands in for CaseStore and counts the connections it hands out."""

    def __init__(self, fail_on_connect=False, fail_on_insert=False):
        self.fail_on_connect = fail_on_connect
        self.fail_on_insert = fail_on_insert
        self.documents = []
        self.open_connections = 0
        self.sessions_opened = 0

    @asynccontextmanager
    async def session(self):
        self.open_connections += 1
        self.sessions_opened += 1
        try:
            if self.fail_on_connect:
                raise ServerSelectionTimeoutError("store unreachable")
            yield FakeCollection(self)
        finally:
            self.open_connections -= 1


@pytest.fixture
def store():
    return FakeCaseStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))
