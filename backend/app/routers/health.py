from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .methods import ROUTE_METHODS

router = APIRouter(tags=["health"])

@router.api_route("", methods=ROUTE_METHODS, response_class=PlainTextResponse, summary="Liveness probe")
def health():
    return "ok\n"
