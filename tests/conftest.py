"""
Pytest configuration and shared fixtures for the profile filtering tests.
"""

import pytest

from peerfinder.models.profile import Category, Profile
from peerfinder.services.controller import ProfileListController
from peerfinder.services.repository.memory import InMemoryProfileRepository


def make_profile(
    first_name: str = "Ana",
    last_name: str = "Silva",
    image_url: str = "https://img.example/ana.jpg",
    categories: tuple[Category, ...] = (Category.TECHNOLOGY,),
    **overrides,
) -> Profile:
    """Create a profile with sensible defaults."""
    overrides.setdefault("role", "Engineer")
    return Profile(
        first_name=first_name,
        last_name=last_name,
        image_url=image_url,
        categories=categories,
        **overrides,
    )


@pytest.fixture
def ana() -> Profile:
    return make_profile("Ana", "Silva", "x", (Category.TECHNOLOGY,), id="ana")


@pytest.fixture
def bea() -> Profile:
    return make_profile("Bea", "Lima", "", (Category.TECHNOLOGY,), id="bea")


@pytest.fixture
def team() -> list[Profile]:
    """A mixed list covering every branch of the filter."""
    return [
        make_profile("Ana", "Silva", "a.jpg", (Category.TECHNOLOGY, Category.DATA), id="p1"),
        make_profile("Bruno", "Anand", "b.jpg", (Category.DESIGN,), id="p2"),
        make_profile("Carla", "Souza", "", (Category.DESIGN, Category.TECHNOLOGY), id="p3"),
        make_profile("Diana", "Costa", "d.jpg", (Category.FINANCE,), id="p4"),
        make_profile("Eduardo", "Reis", "   ", (Category.DATA,), id="p5"),
        make_profile("Fernanda", "Lopes", "f.jpg", (), id="p6"),
    ]


@pytest.fixture
def repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def controller(repository: InMemoryProfileRepository) -> ProfileListController:
    return ProfileListController(repository)


@pytest.fixture
def profile_factory():
    return make_profile
