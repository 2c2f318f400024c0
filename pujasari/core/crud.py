"""
Generic CRUD operations shared by every resource router
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel, ValidationError

from pujasari.core.database import CollectionRefs, Filter, StoreError
from pujasari.core.errors import internal_error, not_found

logger = logging.getLogger(__name__)

class CrudService:
    """List/get/create/update/delete on one collection"""

    def __init__(self, refs: CollectionRefs, label: str, model: Optional[Type[BaseModel]] = None):
        self.refs = refs
        self.label = label
        self.model = model

    async def list(self, filters: Iterable[Filter] = ()) -> List[Dict[str, Any]]:
        """Fetch every document matching all ``filters``"""
        try:
            snapshots = await self.refs.col_ref.get(*filters)
        except StoreError as e:
            logger.error(f"Failed to fetch {self.label} list: {e}")
            raise internal_error(f"Failed to fetch {self.label} list")

        documents = []
        for snapshot in snapshots:
            document = snapshot.to_dict()
            if self.model is not None:
                try:
                    self.model.model_validate(document)
                except ValidationError as e:
                    logger.warning(f"Skipping malformed {self.label} {snapshot.id}: {e.error_count()} invalid field(s)")
                    continue
            documents.append(document)

        logger.info(f"Fetched {len(documents)} {self.label}")
        return documents

    async def get(self, doc_id: str) -> Dict[str, Any]:
        try:
            snapshot = await self.refs.doc_ref(doc_id).get()
        except StoreError as e:
            logger.error(f"Failed to fetch {self.label} {doc_id}: {e}")
            raise internal_error(f"Failed to fetch {self.label} {doc_id}")

        if not snapshot.exists:
            logger.info(f"{self.label} {doc_id} not found")
            raise not_found(f"{self.label} {doc_id} not found")

        logger.info(f"Fetched {self.label} {doc_id}")
        return snapshot.to_dict()

    async def create(self, data: Dict[str, Any]) -> str:
        try:
            doc_id = await self.refs.col_ref.add(data)
        except StoreError as e:
            logger.error(f"Failed to create {self.label}: {e}")
            raise internal_error(f"Failed to create {self.label}")

        logger.info(f"Created {self.label} {doc_id}")
        return doc_id

    async def update(self, doc_id: str, data: Dict[str, Any]) -> None:
        """Merge ``data`` into the document, leaving other fields untouched"""
        try:
            updated = await self.refs.doc_ref(doc_id).update(data)
        except StoreError as e:
            logger.error(f"Failed to update {self.label} {doc_id}: {e}")
            raise internal_error(f"Failed to update {self.label} {doc_id}")

        if not updated:
            logger.info(f"{self.label} {doc_id} not found")
            raise not_found(f"{self.label} {doc_id} not found")

        logger.info(f"Updated {self.label} {doc_id}")

    async def delete(self, doc_id: str) -> None:
        try:
            deleted = await self.refs.doc_ref(doc_id).delete()
        except StoreError as e:
            logger.error(f"Failed to delete {self.label} {doc_id}: {e}")
            raise internal_error(f"Failed to delete {self.label} {doc_id}")

        if not deleted:
            logger.info(f"{self.label} {doc_id} not found")
            raise not_found(f"{self.label} {doc_id} not found")

        logger.info(f"Deleted {self.label} {doc_id}")
