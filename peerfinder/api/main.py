from fastapi import APIRouter

from peerfinder.core.config import settings

from .endpoints.filters import router as filters_router
from .endpoints.health import router as health_router
from .endpoints.me import router as me_router
from .endpoints.profiles import router as profiles_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API is running"}


api_router.include_router(health_router)
api_router.include_router(profiles_router)
api_router.include_router(filters_router)
api_router.include_router(me_router)
