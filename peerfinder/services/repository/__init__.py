from loguru import logger

from peerfinder.core.config import settings
from peerfinder.services.repository.base import ProfileRepository
from peerfinder.services.repository.http import HttpProfileRepository
from peerfinder.services.repository.memory import InMemoryProfileRepository


def build_repository() -> ProfileRepository:
    """Pick the repository implementation from settings."""
    if settings.REPOSITORY_URL:
        logger.info(f"Using HTTP profile repository at {settings.REPOSITORY_URL}")
        return HttpProfileRepository(
            base_url=settings.REPOSITORY_URL,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            max_retries=settings.REQUEST_MAX_RETRIES,
        )
    logger.warning("REPOSITORY_URL is not set. Profiles are kept in memory and lost on restart.")
    return InMemoryProfileRepository()


__all__ = [
    "ProfileRepository",
    "HttpProfileRepository",
    "InMemoryProfileRepository",
    "build_repository",
]
