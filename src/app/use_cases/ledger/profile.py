"""Profile Use Cases

Read and replace the singleton user profile.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.profile_repository import ProfileRepository
from src.domain.user_profile import UserProfile

logger = logging.getLogger(__name__)


class GetProfile:
    def __init__(self, profile_repo: ProfileRepository):
        self.profile_repo = profile_repo

    async def execute(self) -> Result[UserProfile]:
        return Return.ok(await self.profile_repo.get())


class SaveProfile:
    def __init__(self, uow: UnitOfWork, profile_repo: ProfileRepository):
        self.uow = uow
        self.profile_repo = profile_repo

    async def execute(self, profile: UserProfile) -> Result[UserProfile]:
        try:
            await self.profile_repo.save(profile)
            await self.uow.commit()
            return Return.ok(profile)
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save profile: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to save profile",
                    reason=str(e),
                )
            )
