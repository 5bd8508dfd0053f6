from pydantic import BaseModel, Field

from peerfinder.models.profile import Category, Profile


class CategoryView(BaseModel):
    name: str
    display_name: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryView":
        return cls(name=category.value, display_name=category.display_name)


class ProfileView(BaseModel):
    id: str | None
    first_name: str
    last_name: str
    role: str
    image_url: str
    categories: list[CategoryView]

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileView":
        return cls(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            role=profile.role,
            image_url=profile.image_url,
            categories=[CategoryView.from_category(c) for c in profile.categories],
        )


class ProfileListResponse(BaseModel):
    profiles: list[ProfileView]
    search_text: str
    selected_categories: list[str]
    primary_categories: list[str]
    primary_categories_label: str


class SearchRequest(BaseModel):
    text: str = Field(default="", description="Free-text name search")


class CreateProfileRequest(BaseModel):
    first_name: str
    last_name: str
    role: str = ""
    image_url: str = ""
    categories: list[Category] = Field(default_factory=list)

    def to_profile(self) -> Profile:
        return Profile(
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            image_url=self.image_url,
            categories=tuple(self.categories),
        )


class CreateProfileResponse(BaseModel):
    id: str


class UpdateCategoriesRequest(BaseModel):
    categories: list[Category]
