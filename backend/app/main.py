from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .core.config import Settings, settings

# Routers
from .routers.health import router as health_router
from .routers.methods import ROUTE_METHODS
from .routers.version import build_router as build_version_router


def create_app(cfg: Settings = settings) -> FastAPI:
    # no /docs, /redoc or /openapi.json and no trailing-slash redirects:
    # every unlisted path is a 404
    api = FastAPI(title=cfg.service_name, version=cfg.version,
                  docs_url=None, redoc_url=None, openapi_url=None,
                  redirect_slashes=False)

    # ---------------------------------------------------------
    # Routers
    # ---------------------------------------------------------

    # Health: liveness probe polled by the orchestrator
    api.include_router(health_router, prefix="/health", tags=["health"])

    # Version: optional, on by default
    if cfg.expose_version:
        api.include_router(build_version_router(cfg), prefix="/version", tags=["version"])

    greeting = f"hello from {cfg.service_name}\n"

    @api.api_route("/", methods=ROUTE_METHODS, response_class=PlainTextResponse)
    def root():
        return greeting

    return api


# This is what pytest imports: from backend.app.main import app
app = create_app()
