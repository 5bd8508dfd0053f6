from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from peerfinder.api.main import api_router
from peerfinder.services.controller import ProfileListController
from peerfinder.services.repository import build_repository

from .config import settings
from .version import __version__


def create_app(controller: ProfileListController | None = None) -> FastAPI:
    """
    Build the API around one controller session.

    When no controller is given, one is created on startup with the repository
    selected by settings, and torn down on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        repository = None
        if getattr(app.state, "controller", None) is None:
            repository = build_repository()
            app.state.controller = ProfileListController(repository)
        app.state.controller.start()
        logger.info("Profile session started")
        yield
        try:
            await app.state.controller.close()
            if repository is not None:
                await repository.close()
            logger.info("Profile session closed")
        except Exception as exc:
            logger.warning(f"Failed to close profile session: {exc}")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Browse and filter user profiles by name and category",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if settings.APP_ENV != "development" else "/docs",
        redoc_url=None if settings.APP_ENV != "development" else "/redoc",
    )
    app.state.controller = controller

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


app = create_app()
