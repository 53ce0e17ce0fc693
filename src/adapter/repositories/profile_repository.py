"""SQLAlchemy implementation of ProfileRepository"""

import json
import logging
from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.collection_store import SqlAlchemyCollectionStore, collection_key
from src.app.repositories.profile_repository import ProfileRepository
from src.domain.user_profile import UserProfile

logger = logging.getLogger(__name__)


class SqlAlchemyProfileRepository(ProfileRepository):
    """Stores the profile as a single JSON object under the 'profile' key"""

    def __init__(self, session: AsyncSession, key_prefix: Optional[str] = None):
        self.session = session
        self.store = SqlAlchemyCollectionStore(session)
        self.key = collection_key("profile", key_prefix)

    def _default(self) -> UserProfile:
        return UserProfile(currency=ApplicationConfig.DEFAULT_CURRENCY)

    async def get(self) -> UserProfile:
        try:
            payload = await self.store.get(self.key)
            if payload is None:
                return self._default()
            return UserProfile.model_validate(json.loads(payload))
        except Exception as e:
            logger.warning(f"Could not read profile {self.key}, using default: {e}")
            return self._default()

    async def save(self, profile: UserProfile) -> None:
        await self.store.put(self.key, json.dumps(profile.model_dump(mode="json")))
