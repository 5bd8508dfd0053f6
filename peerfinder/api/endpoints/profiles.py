from fastapi import APIRouter, Depends

from peerfinder.api.deps import get_controller
from peerfinder.api.schemas import CategoryView, ProfileListResponse, ProfileView
from peerfinder.models.profile import Category
from peerfinder.services.controller import ProfileListController

router = APIRouter(tags=["profiles"])


def build_list_response(controller: ProfileListController) -> ProfileListResponse:
    return ProfileListResponse(
        profiles=[ProfileView.from_profile(p) for p in controller.visible_profiles],
        search_text=controller.search_text,
        selected_categories=sorted(controller.selected_categories),
        primary_categories=controller.primary_categories,
        primary_categories_label=controller.primary_categories_label,
    )


@router.get("/profiles", response_model=ProfileListResponse)
async def list_profiles(controller: ProfileListController = Depends(get_controller)) -> ProfileListResponse:
    """Profiles visible under the session's current filters."""
    return build_list_response(controller)


@router.get("/categories", response_model=list[CategoryView])
async def list_categories() -> list[CategoryView]:
    return [CategoryView.from_category(category) for category in Category]
