# backend/app/routers/version.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..core.config import Settings
from .methods import ROUTE_METHODS


def build_router(cfg: Settings) -> APIRouter:
    """
    Router for GET /version. Lets a pipeline confirm which build
    is running in each environment (dev, qa, prod).
    """
    router = APIRouter(tags=["version"])
    body = f"version {cfg.version}\n"

    @router.api_route("", methods=ROUTE_METHODS, response_class=PlainTextResponse, summary="Running version")
    def version():
        return body

    return router
