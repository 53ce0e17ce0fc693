"""Key-value collection store on SQLAlchemy

Each collection is one row holding the JSON document of the whole collection.
"""

import json
import logging
from datetime import datetime
from typing import Generic, List, Optional, Type, TypeVar
from sqlmodel import SQLModel, Field, Column
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import DateTime, String, Text
from config import ApplicationConfig
from src.domain.base import BaseModel, utc_now

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class CollectionRecord(SQLModel, table=True):
    """One stored collection (or singleton) serialized as JSON"""

    __tablename__ = "collection_records"

    key: str = Field(
        sa_column=Column(String(100), primary_key=True),
        description="Collection key, e.g. '@cardvault/customers'"
    )

    payload: str = Field(
        sa_column=Column(Text, nullable=False),
        description="JSON document of the whole collection"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=False), nullable=False),
        description="Last write timestamp"
    )


def collection_key(name: str, prefix: Optional[str] = None) -> str:
    return f"{prefix or ApplicationConfig.STORAGE_KEY_PREFIX}/{name}"


class SqlAlchemyCollectionStore:
    """
    Get/put of raw collection documents

    put() only flushes; the unit of work decides when the write is committed.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str) -> Optional[str]:
        record = await self.session.get(CollectionRecord, key)
        return record.payload if record else None

    async def put(self, key: str, payload: str) -> None:
        record = await self.session.get(CollectionRecord, key)
        if record is None:
            record = CollectionRecord(key=key, payload=payload)
        else:
            record.payload = payload
            record.updated_at = utc_now()
        self.session.add(record)
        await self.session.flush()


class SqlAlchemyCollectionRepository(Generic[EntityT]):
    """
    Whole-collection repository for one entity type

    Reads never raise: a missing row, a storage error or a document that no
    longer validates all yield an empty list. Writes propagate errors.
    """

    entity_type: Type[EntityT]
    collection_name: str

    def __init__(self, session: AsyncSession, key_prefix: Optional[str] = None):
        self.session = session
        self.store = SqlAlchemyCollectionStore(session)
        self.key = collection_key(self.collection_name, key_prefix)

    async def get_all(self) -> List[EntityT]:
        try:
            payload = await self.store.get(self.key)
            if payload is None:
                return []
            return [self.entity_type.model_validate(item) for item in json.loads(payload)]
        except Exception as e:
            logger.warning(f"Could not read collection {self.key}, returning empty: {e}")
            return []

    async def save_all(self, items: List[EntityT]) -> None:
        payload = json.dumps([item.model_dump(mode="json") for item in items])
        await self.store.put(self.key, payload)
