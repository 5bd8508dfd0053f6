import asyncio
from collections.abc import AsyncIterator

import httpx
from loguru import logger
from pydantic import ValidationError

from peerfinder.core.base_client import BaseClient
from peerfinder.core.config import settings
from peerfinder.core.security import redact_id
from peerfinder.core.version import __version__
from peerfinder.models.profile import Profile
from peerfinder.services.repository.base import ProfileRepository


class HttpProfileRepository(BaseClient, ProfileRepository):
    """
    REST adapter for a remote profile store.

    The remote side has no push channel, so subscribers are fed by polling
    `GET /profiles` and only receive a snapshot when it differs from the last one.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        max_retries: int = 3,
        poll_interval: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {
            "User-Agent": f"PeerFinder/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(
            base_url=base_url, timeout=timeout, max_retries=max_retries, headers=headers, transport=transport
        )
        if poll_interval is None:
            poll_interval = settings.PROFILES_POLL_INTERVAL_SECONDS
        self.poll_interval = poll_interval

    async def fetch_profiles(self) -> list[Profile]:
        """Fetch the full profile list, skipping records that fail validation."""
        data = await self.get("/profiles")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of profiles, got {type(data).__name__}")

        profiles = []
        for item in data:
            try:
                profiles.append(Profile.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid profile record: {e}")
        return profiles

    async def subscribe_profiles(self) -> AsyncIterator[list[Profile]]:
        last: list[Profile] | None = None
        while True:
            try:
                profiles = await self.fetch_profiles()
            except (httpx.HTTPError, ValueError) as e:
                # Subscribers keep their last snapshot until a poll succeeds
                logger.warning(f"Profile poll failed, retrying in {self.poll_interval}s: {e}")
            else:
                if profiles != last:
                    last = profiles
                    yield profiles
            await asyncio.sleep(self.poll_interval)

    async def create_profile(self, profile: Profile) -> str | None:
        payload = profile.model_dump(mode="json", exclude={"id"})
        try:
            data = await self.post("/profiles", json=payload)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to create profile: {e}")
            return None

        identifier = data.get("id") if isinstance(data, dict) else None
        if not identifier:
            logger.error(f"Profile store returned no identifier: {data}")
            return None
        return str(identifier)

    async def get_profile_by_id(self, profile_id: str) -> Profile | None:
        try:
            data = await self.get(f"/profiles/{profile_id}")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.debug(f"Profile {redact_id(profile_id)} not found")
            else:
                logger.error(f"Failed to fetch profile {redact_id(profile_id)}: {e}")
            return None
        except (httpx.RequestError, ValueError) as e:
            logger.error(f"Failed to fetch profile {redact_id(profile_id)}: {e}")
            return None

        try:
            return Profile.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid profile payload for {redact_id(profile_id)}: {e}")
            return None

    async def update_profile_categories(self, profile_id: str, category_names: list[str]) -> bool:
        try:
            await self.patch(f"/profiles/{profile_id}", json={"categories": list(category_names)})
        except httpx.HTTPError as e:
            logger.error(f"Failed to update categories of {redact_id(profile_id)}: {e}")
            return False
        return True
