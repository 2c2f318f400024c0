"""
Document store access: store interface, MongoDB backend and collection references
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional

from bson import ObjectId
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from pujasari.core.config import Settings

logger = logging.getLogger(__name__)

FILTER_OPERATORS = {
    "==": "$eq",
    ">=": "$gte",
    "<=": "$lte",
}

class StoreError(Exception):
    """Raised when a document store operation fails"""

@dataclass(frozen=True)
class Filter:
    """A single predicate on a document field, ANDed with the others of a query"""
    field: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in FILTER_OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.op}")

@dataclass
class DocumentSnapshot:
    """Result of reading one document; ``data`` is None when it does not exist"""
    id: str
    data: Optional[Dict[str, Any]] = None

    @property
    def exists(self) -> bool:
        return self.data is not None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into ``{id, ...fields}``"""
        return {"id": self.id, **(self.data or {})}

class DocumentStore(ABC):
    """Interface every document store backend implements"""

    @abstractmethod
    async def query(self, collection: str, filters: Iterable[Filter] = ()) -> List[DocumentSnapshot]:
        ...

    @abstractmethod
    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        ...

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> DocumentSnapshot:
        ...

    @abstractmethod
    async def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        """Merge ``data`` into an existing document; False when it does not exist"""
        ...

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> bool:
        """Hard delete; False when the document does not exist"""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        pass

class CollectionReference:
    """Handle to a whole collection, used by list and create operations"""

    def __init__(self, store: DocumentStore, name: str):
        self.store = store
        self.name = name

    async def get(self, *filters: Filter) -> List[DocumentSnapshot]:
        return await self.store.query(self.name, filters)

    async def add(self, data: Dict[str, Any]) -> str:
        return await self.store.add(self.name, data)

class DocumentReference:
    """Handle to a single document; the id is only resolved when an operation runs"""

    def __init__(self, store: DocumentStore, collection: str, doc_id: str):
        self.store = store
        self.collection = collection
        self.id = doc_id

    async def get(self) -> DocumentSnapshot:
        return await self.store.get(self.collection, self.id)

    async def update(self, data: Dict[str, Any]) -> bool:
        return await self.store.update(self.collection, self.id, data)

    async def delete(self) -> bool:
        return await self.store.delete(self.collection, self.id)

class CollectionRefs(NamedTuple):
    col_ref: CollectionReference
    doc_ref: Callable[[str], DocumentReference]

def create_collection_refs(store: DocumentStore, collection_name: str) -> CollectionRefs:
    """Build the collection handle and the document handle factory for one collection"""
    return CollectionRefs(
        col_ref=CollectionReference(store, collection_name),
        doc_ref=lambda doc_id: DocumentReference(store, collection_name, doc_id),
    )

def build_query(filters: Iterable[Filter]) -> Dict[str, Any]:
    """Translate predicates into a MongoDB query document"""
    query: Dict[str, Dict[str, Any]] = {}
    for f in filters:
        query.setdefault(f.field, {})[FILTER_OPERATORS[f.op]] = f.value
    return query

@contextmanager
def _store_errors(action: str):
    try:
        yield
    except PyMongoError as e:
        raise StoreError(f"Failed to {action}: {e}") from e

class MongoStore(DocumentStore):
    """MongoDB backed document store"""

    def __init__(self, client: AsyncMongoClient, database_name: str):
        self.client = client
        self.db = client[database_name]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        client = AsyncMongoClient(
            settings.DATABASE_URL,
            serverSelectionTimeoutMS=settings.DATABASE_TIMEOUT_MS,
        )
        return cls(client, settings.DATABASE_NAME)

    @staticmethod
    def _object_id(doc_id: str) -> Optional[ObjectId]:
        if not ObjectId.is_valid(doc_id):
            return None
        return ObjectId(doc_id)

    @staticmethod
    def _snapshot(doc: Dict[str, Any]) -> DocumentSnapshot:
        doc = dict(doc)
        doc_id = str(doc.pop("_id"))
        return DocumentSnapshot(id=doc_id, data=doc)

    async def query(self, collection: str, filters: Iterable[Filter] = ()) -> List[DocumentSnapshot]:
        with _store_errors(f"query {collection}"):
            cursor = self.db[collection].find(build_query(filters))
            docs = await cursor.to_list(length=None)
        return [self._snapshot(doc) for doc in docs]

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        with _store_errors(f"insert into {collection}"):
            result = await self.db[collection].insert_one(dict(data))
        return str(result.inserted_id)

    async def get(self, collection: str, doc_id: str) -> DocumentSnapshot:
        oid = self._object_id(doc_id)
        if oid is None:
            return DocumentSnapshot(id=doc_id)
        with _store_errors(f"read {collection}/{doc_id}"):
            doc = await self.db[collection].find_one({"_id": oid})
        if doc is None:
            return DocumentSnapshot(id=doc_id)
        return self._snapshot(doc)

    async def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        oid = self._object_id(doc_id)
        if oid is None:
            return False
        with _store_errors(f"update {collection}/{doc_id}"):
            # $set rejects an empty document
            if not data:
                found = await self.db[collection].find_one({"_id": oid}, projection={"_id": 1})
                return found is not None
            result = await self.db[collection].update_one({"_id": oid}, {"$set": data})
        return result.matched_count == 1

    async def delete(self, collection: str, doc_id: str) -> bool:
        oid = self._object_id(doc_id)
        if oid is None:
            return False
        with _store_errors(f"delete {collection}/{doc_id}"):
            result = await self.db[collection].delete_one({"_id": oid})
        return result.deleted_count == 1

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    async def close(self) -> None:
        await self.client.close()

def get_store(request: Request) -> DocumentStore:
    """Get the document store attached to the running application"""
    return request.app.state.store
