import asyncio
import contextlib
from collections.abc import Callable, Iterable

from loguru import logger

from peerfinder.core.constants import CATEGORY_LABEL_SEPARATOR, CATEGORY_MARKER
from peerfinder.core.security import redact_id
from peerfinder.models.profile import Category, FilterCriteria, Profile
from peerfinder.services.filtering import compute_visible
from peerfinder.services.repository.base import ProfileRepository

ProfilesListener = Callable[[list[Profile]], None]


class ProfileListController:
    """
    Session state behind the profile list screen.

    Holds the latest profile snapshot, the current user's primary categories
    and the filter criteria. Every mutation recomputes `visible_profiles`
    immediately and notifies listeners once. All mutations are expected to
    run on a single event loop.
    """

    def __init__(self, repository: ProfileRepository, user_id: str | None = None) -> None:
        self._repository = repository
        self.user_id = user_id

        self._profiles: list[Profile] = []
        self._primary_categories: list[str] = []
        self._search_text = ""
        self._selected_categories: frozenset[str] = frozenset()
        self._visible: list[Profile] = []

        self._listeners: list[ProfilesListener] = []
        self._subscription: asyncio.Task | None = None

    # State

    @property
    def profiles(self) -> list[Profile]:
        return list(self._profiles)

    @property
    def primary_categories(self) -> list[str]:
        return list(self._primary_categories)

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def selected_categories(self) -> frozenset[str]:
        return self._selected_categories

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(search_text=self._search_text, selected_categories=self._selected_categories)

    @property
    def visible_profiles(self) -> list[Profile]:
        return list(self._visible)

    @property
    def primary_categories_label(self) -> str:
        """Primary categories as rendered in the list header, e.g. "#Design, #Data"."""
        return CATEGORY_LABEL_SEPARATOR.join(
            f"{CATEGORY_MARKER}{name.replace(CATEGORY_MARKER, '').strip()}" for name in self._primary_categories
        )

    def add_listener(self, listener: ProfilesListener) -> Callable[[], None]:
        """Register a listener for visible profile updates. Returns a callable that removes it."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _recompute(self) -> None:
        self._visible = compute_visible(self._profiles, self._primary_categories, self.criteria)
        logger.debug(
            f"Recomputed visible profiles: {len(self._visible)}/{len(self._profiles)} "
            f"(search={self._search_text!r}, categories={sorted(self._selected_categories)})"
        )
        visible = self.visible_profiles
        for listener in list(self._listeners):
            try:
                listener(visible)
            except Exception as e:
                logger.exception(f"Profiles listener failed: {e}")

    # Local mutations

    def set_search_text(self, text: str) -> None:
        self._search_text = text
        self._recompute()

    def toggle_category(self, category_name: str) -> None:
        if category_name in self._selected_categories:
            self._selected_categories = self._selected_categories - {category_name}
        else:
            self._selected_categories = self._selected_categories | {category_name}
        self._recompute()

    def clear_filters(self) -> None:
        self._search_text = ""
        self._selected_categories = frozenset()
        self._recompute()

    def on_profiles_changed(self, profiles: Iterable[Profile]) -> None:
        self._profiles = list(profiles)
        logger.debug(f"Profiles snapshot received: {len(self._profiles)} profiles")
        self._recompute()

    # Subscription

    def start(self) -> None:
        """Start mirroring the repository's profile stream."""
        if self._subscription is not None and not self._subscription.done():
            return
        self._subscription = asyncio.create_task(self._consume_profiles())

    async def _consume_profiles(self) -> None:
        try:
            async for profiles in self._repository.subscribe_profiles():
                self.on_profiles_changed(profiles)
        except Exception as e:
            # Keep the last known snapshot
            logger.exception(f"Error loading profiles: {e}")

    async def close(self) -> None:
        """Stop the subscription and drop all listeners."""
        if self._subscription is not None:
            self._subscription.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._subscription
            self._subscription = None
        self._listeners.clear()

    # Delegated operations

    async def create_profile(
        self, profile: Profile, on_complete: Callable[[str | None], None] | None = None
    ) -> str | None:
        identifier = await self._repository.create_profile(profile)
        if identifier is not None:
            self.user_id = identifier
            logger.info(f"Current user profile created: {redact_id(identifier)}")
        else:
            logger.warning("Profile creation failed")
        if on_complete:
            on_complete(identifier)
        return identifier

    async def update_profile_categories(
        self, categories: Iterable[Category | str], on_complete: Callable[[bool], None] | None = None
    ) -> bool:
        if self.user_id is None:
            logger.warning("Cannot update categories before the current user's profile is known")
            success = False
        else:
            names = [c.value if isinstance(c, Category) else c for c in categories]
            success = await self._repository.update_profile_categories(self.user_id, names)
            if not success:
                logger.warning(f"Category update failed for {redact_id(self.user_id)}")
        if on_complete:
            on_complete(success)
        return success

    async def load_primary_categories(self, on_complete: Callable[[bool], None] | None = None) -> bool:
        success = False
        if self.user_id is None:
            logger.debug("No current user yet, primary categories not loaded")
        else:
            profile = await self._repository.get_profile_by_id(self.user_id)
            if profile is None:
                logger.warning(f"Current user profile {redact_id(self.user_id)} not found")
            else:
                self._primary_categories = [category.display_name for category in profile.categories]
                self._recompute()
                success = True
        if on_complete:
            on_complete(success)
        return success
