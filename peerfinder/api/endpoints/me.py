from fastapi import APIRouter, Depends, HTTPException

from peerfinder.api.deps import get_controller
from peerfinder.api.endpoints.profiles import build_list_response
from peerfinder.api.schemas import (
    CreateProfileRequest,
    CreateProfileResponse,
    ProfileListResponse,
    UpdateCategoriesRequest,
)
from peerfinder.services.controller import ProfileListController

router = APIRouter(prefix="/me", tags=["me"])


@router.post("", response_model=CreateProfileResponse, status_code=201)
async def create_my_profile(
    payload: CreateProfileRequest, controller: ProfileListController = Depends(get_controller)
) -> CreateProfileResponse:
    identifier = await controller.create_profile(payload.to_profile())
    if identifier is None:
        raise HTTPException(status_code=400, detail="Failed to create profile.")
    return CreateProfileResponse(id=identifier)


@router.put("/categories")
async def update_my_categories(
    payload: UpdateCategoriesRequest, controller: ProfileListController = Depends(get_controller)
) -> dict[str, str]:
    if controller.user_id is None:
        raise HTTPException(status_code=409, detail="Create a profile before choosing categories.")
    if not await controller.update_profile_categories(payload.categories):
        raise HTTPException(status_code=502, detail="Failed to update categories.")
    return {"status": "success"}


@router.post("/primary-categories/refresh", response_model=ProfileListResponse)
async def refresh_primary_categories(
    controller: ProfileListController = Depends(get_controller),
) -> ProfileListResponse:
    if not await controller.load_primary_categories():
        raise HTTPException(status_code=404, detail="Current user profile is not available.")
    return build_list_response(controller)
