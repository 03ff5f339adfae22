import copy
import os
import uuid

import pytest

os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "provisioning_test")


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


def _project(doc: dict, projection) -> dict:
    result = copy.deepcopy(doc)
    if projection and projection.get("_id") == 0:
        result.pop("_id", None)
    return result


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction == -1)
        return self

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class FakeCollection:
    """In-memory stand-in for the subset of the motor collection API the services use"""

    def __init__(self):
        self.docs = []

    async def find_one(self, query, projection=None):
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    def find(self, query=None, projection=None):
        return FakeCursor([_project(d, projection) for d in self.docs if _matches(d, query or {})])

    async def insert_one(self, doc):
        doc["_id"] = uuid.uuid4().hex
        self.docs.append(copy.deepcopy(doc))

    async def update_one(self, query, update, upsert=False):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(copy.deepcopy(update.get("$set", {})))
                return
        if upsert:
            new_doc = dict(query)
            new_doc.update(copy.deepcopy(update.get("$set", {})))
            new_doc["_id"] = uuid.uuid4().hex
            self.docs.append(new_doc)

    async def count_documents(self, query):
        return sum(1 for doc in self.docs if _matches(doc, query))


class FailingCollection(FakeCollection):
    """Every read fails, as if the database were unreachable"""

    async def find_one(self, query, projection=None):
        raise ConnectionError("database unavailable")

    async def count_documents(self, query):
        raise ConnectionError("database unavailable")


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def failing_collection():
    return FailingCollection()


@pytest.fixture
def fake_db(monkeypatch):
    """Replace the shared motor database with an in-memory one"""
    from core import database

    db = FakeDatabase()
    monkeypatch.setattr(database, "db", db)
    return db
