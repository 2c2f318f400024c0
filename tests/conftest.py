import copy
import operator
import uuid

import pytest
from fastapi.testclient import TestClient

from pujasari.core.database import DocumentSnapshot, DocumentStore, StoreError
from pujasari.main import create_app

OPERATORS = {
    "==": operator.eq,
    ">=": operator.ge,
    "<=": operator.le,
}

class InMemoryStore(DocumentStore):
    """Dict backed document store used in place of MongoDB"""

    def __init__(self):
        self.collections = {}

    def _collection(self, name):
        return self.collections.setdefault(name, {})

    @staticmethod
    def _matches(data, filters):
        for f in filters:
            if f.field not in data:
                return False
            if not OPERATORS[f.op](data[f.field], f.value):
                return False
        return True

    async def query(self, collection, filters=()):
        filters = list(filters)
        return [
            DocumentSnapshot(id=doc_id, data=copy.deepcopy(data))
            for doc_id, data in self._collection(collection).items()
            if self._matches(data, filters)
        ]

    async def add(self, collection, data):
        doc_id = uuid.uuid4().hex
        self._collection(collection)[doc_id] = copy.deepcopy(data)
        return doc_id

    async def get(self, collection, doc_id):
        data = self._collection(collection).get(doc_id)
        return DocumentSnapshot(id=doc_id, data=copy.deepcopy(data))

    async def update(self, collection, doc_id, data):
        docs = self._collection(collection)
        if doc_id not in docs:
            return False
        docs[doc_id].update(copy.deepcopy(data))
        return True

    async def delete(self, collection, doc_id):
        return self._collection(collection).pop(doc_id, None) is not None

    async def ping(self):
        return True

class FailingStore(DocumentStore):
    """Store whose every operation fails, like an unreachable database"""

    async def query(self, collection, filters=()):
        raise StoreError("connection refused")

    async def add(self, collection, data):
        raise StoreError("connection refused")

    async def get(self, collection, doc_id):
        raise StoreError("connection refused")

    async def update(self, collection, doc_id, data):
        raise StoreError("connection refused")

    async def delete(self, collection, doc_id):
        raise StoreError("connection refused")

    async def ping(self):
        return False

class BrokenStore(DocumentStore):
    """Store that fails with errors the API does not anticipate"""

    async def query(self, collection, filters=()):
        raise RuntimeError("driver bug")

    async def add(self, collection, data):
        raise RuntimeError("driver bug")

    async def get(self, collection, doc_id):
        raise RuntimeError("driver bug")

    async def update(self, collection, doc_id, data):
        raise RuntimeError("driver bug")

    async def delete(self, collection, doc_id):
        raise RuntimeError("driver bug")

    async def ping(self):
        return True

@pytest.fixture
def store():
    return InMemoryStore()

@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client

@pytest.fixture
def failing_client():
    with TestClient(create_app(store=FailingStore())) as test_client:
        yield test_client

@pytest.fixture
def broken_client():
    with TestClient(create_app(store=BrokenStore()), raise_server_exceptions=False) as test_client:
        yield test_client

def assert_not_found(response):
    assert response.status_code == 404
    body = response.json()
    assert body["statusCode"] == 404
    assert body["error"] == "Not Found"
    assert isinstance(body["message"], str)

def assert_bad_request(response):
    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert body["error"] == "Bad Request"
    assert isinstance(body["message"], str)
