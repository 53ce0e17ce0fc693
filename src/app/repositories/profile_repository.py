"""User Profile Repository Interface"""

from abc import ABC, abstractmethod
from src.domain.user_profile import UserProfile


class ProfileRepository(ABC):
    """Repository interface for the singleton user profile"""

    @abstractmethod
    async def get(self) -> UserProfile:
        """
        Retrieve the profile

        Returns:
            Stored profile, or the default profile when missing or unreadable
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        pass
