from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from peerfinder.models.profile import Profile


class ProfileRepository(ABC):
    """
    Interface of the data collaborator that owns profiles.
    """

    @abstractmethod
    def subscribe_profiles(self) -> AsyncIterator[list[Profile]]:
        """
        Stream of full profile snapshots, in repository order.
        The stream is unbounded; consumers stop it by cancelling.
        """

    @abstractmethod
    async def create_profile(self, profile: Profile) -> str | None:
        """Store a new profile and return its identifier, or None on failure."""

    @abstractmethod
    async def get_profile_by_id(self, profile_id: str) -> Profile | None:
        pass

    @abstractmethod
    async def update_profile_categories(self, profile_id: str, category_names: list[str]) -> bool:
        """Replace the categories of a profile. Returns False on failure."""

    async def close(self) -> None:
        return None
