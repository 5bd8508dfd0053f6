from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from peerfinder.api.deps import get_controller
from peerfinder.api.endpoints.profiles import build_list_response
from peerfinder.api.schemas import ProfileListResponse, SearchRequest
from peerfinder.models.profile import Category
from peerfinder.services.controller import ProfileListController

router = APIRouter(prefix="/filters", tags=["filters"])


@router.put("/search", response_model=ProfileListResponse)
async def set_search(
    payload: SearchRequest, controller: ProfileListController = Depends(get_controller)
) -> ProfileListResponse:
    controller.set_search_text(payload.text)
    return build_list_response(controller)


@router.post("/categories/{name}/toggle", response_model=ProfileListResponse)
async def toggle_category(
    name: str, controller: ProfileListController = Depends(get_controller)
) -> ProfileListResponse:
    if Category.from_name(name) is None:
        logger.debug(f"Toggle requested for unknown category {name!r}")
        raise HTTPException(status_code=404, detail=f"Unknown category: {name}")
    controller.toggle_category(name)
    return build_list_response(controller)


@router.delete("", response_model=ProfileListResponse)
async def clear_filters(controller: ProfileListController = Depends(get_controller)) -> ProfileListResponse:
    controller.clear_filters()
    return build_list_response(controller)
