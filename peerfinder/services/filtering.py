from collections.abc import Iterable, Sequence

from peerfinder.models.profile import FilterCriteria, Profile


def has_image(profile: Profile) -> bool:
    # Whitespace-only URLs cannot be rendered either
    return bool(profile.image_url and profile.image_url.strip())


def matches_search(profile: Profile, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    return needle in profile.first_name.lower() or needle in profile.last_name.lower()


def matches_categories(profile: Profile, selected_categories: Iterable[str]) -> bool:
    """Match on internal category names. An empty selection matches everything."""
    selected = set(selected_categories)
    if not selected:
        return True
    return bool(profile.category_names & selected)


def matches_primary(profile: Profile, primary_categories: Iterable[str]) -> bool:
    """Match on category display names against the current user's own categories."""
    return bool(profile.category_display_names & set(primary_categories))


def compute_visible(
    profiles: Sequence[Profile],
    primary_categories: Iterable[str],
    criteria: FilterCriteria,
) -> list[Profile]:
    """
    Compute the profiles to show for the given criteria.

    With no search text and no selected categories the result falls back to
    profiles sharing a category with the current user's primary categories.
    Otherwise every active predicate must hold. Profiles without an image are
    always dropped and input order is kept.
    """
    if criteria.is_empty:
        primary = set(primary_categories)
        return [p for p in profiles if has_image(p) and matches_primary(p, primary)]

    return [
        p
        for p in profiles
        if matches_categories(p, criteria.selected_categories)
        and matches_search(p, criteria.search_text)
        and has_image(p)
    ]
