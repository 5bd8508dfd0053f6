import asyncio
import uuid
from collections.abc import AsyncIterator, Iterable

from loguru import logger

from peerfinder.core.security import redact_id
from peerfinder.models.profile import Category, Profile
from peerfinder.services.repository.base import ProfileRepository


class InMemoryProfileRepository(ProfileRepository):
    """Process-local repository that pushes a snapshot to every subscriber on each write."""

    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._profiles: dict[str, Profile] = {}
        self._subscribers: set[asyncio.Queue] = set()
        for profile in profiles:
            identifier = profile.id or self._new_id()
            self._profiles[identifier] = profile.with_id(identifier)

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    def snapshot(self) -> list[Profile]:
        return list(self._profiles.values())

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for queue in self._subscribers:
            queue.put_nowait(snapshot)

    async def subscribe_profiles(self) -> AsyncIterator[list[Profile]]:
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.add(queue)
        logger.debug(f"Profile subscriber added ({len(self._subscribers)} active)")
        try:
            yield self.snapshot()
            while True:
                yield await queue.get()
        finally:
            self._subscribers.discard(queue)
            logger.debug(f"Profile subscriber removed ({len(self._subscribers)} active)")

    async def create_profile(self, profile: Profile) -> str | None:
        identifier = self._new_id()
        self._profiles[identifier] = profile.with_id(identifier)
        logger.info(f"Created profile {redact_id(identifier)}")
        self._publish()
        return identifier

    async def get_profile_by_id(self, profile_id: str) -> Profile | None:
        return self._profiles.get(profile_id)

    async def update_profile_categories(self, profile_id: str, category_names: list[str]) -> bool:
        profile = self._profiles.get(profile_id)
        if profile is None:
            logger.warning(f"Cannot update categories of unknown profile {redact_id(profile_id)}")
            return False

        categories = [Category.from_name(name) for name in category_names]
        if None in categories:
            logger.warning(f"Rejected unknown category names for {redact_id(profile_id)}: {category_names}")
            return False

        self._profiles[profile_id] = profile.with_categories(categories)
        self._publish()
        return True
