from fastapi import HTTPException, Request

from peerfinder.services.controller import ProfileListController


def get_controller(request: Request) -> ProfileListController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Profile session is not ready")
    return controller
