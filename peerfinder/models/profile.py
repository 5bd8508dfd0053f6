from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from peerfinder.core.constants import CATEGORY_MARKER


class Category(str, Enum):
    """
    Closed category vocabulary.

    The member value is the internal name, used for selection, matching and
    serialization. `display_name` is what gets rendered.
    """

    TECHNOLOGY = "TECHNOLOGY"
    DESIGN = "DESIGN"
    MARKETING = "MARKETING"
    FINANCE = "FINANCE"
    HEALTH = "HEALTH"
    EDUCATION = "EDUCATION"
    SALES = "SALES"
    LEGAL = "LEGAL"
    ENGINEERING = "ENGINEERING"
    DATA = "DATA"

    @property
    def display_name(self) -> str:
        return f"{CATEGORY_MARKER}{_DISPLAY_LABELS[self]}"

    @classmethod
    def from_name(cls, name: str) -> "Category | None":
        """Look up a category by internal name, returning None for unknown names."""
        try:
            return cls(name)
        except ValueError:
            return None


_DISPLAY_LABELS: dict[Category, str] = {
    Category.TECHNOLOGY: "Technology",
    Category.DESIGN: "Design",
    Category.MARKETING: "Marketing",
    Category.FINANCE: "Finance",
    Category.HEALTH: "Health",
    Category.EDUCATION: "Education",
    Category.SALES: "Sales",
    Category.LEGAL: "Legal",
    Category.ENGINEERING: "Engineering",
    Category.DATA: "Data",
}


class Profile(BaseModel):
    """
    A user profile as delivered by the profile repository.

    Profiles are frozen; the only permitted change is replacing the whole
    category list through `with_categories`.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Opaque identifier assigned by the repository")
    first_name: str
    last_name: str
    role: str = ""
    image_url: str = ""
    categories: tuple[Category, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def category_names(self) -> set[str]:
        return {category.value for category in self.categories}

    @property
    def category_display_names(self) -> set[str]:
        return {category.display_name for category in self.categories}

    def with_categories(self, categories) -> "Profile":
        return self.model_copy(update={"categories": tuple(categories)})

    def with_id(self, identifier: str) -> "Profile":
        return self.model_copy(update={"id": identifier})


class FilterCriteria(BaseModel):
    """Transient search text and selected category internal names."""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    selected_categories: frozenset[str] = Field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.search_text and not self.selected_categories
