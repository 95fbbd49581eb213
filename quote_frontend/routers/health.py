from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from quote_frontend.core.config import Settings
from quote_frontend.dependencies import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/version", response_class=PlainTextResponse)
async def version(settings: Settings = Depends(get_app_settings)):
    return f"{settings.app_version}\n"


# Liveness probe: the process is up
@router.get("/health/live", response_class=PlainTextResponse)
async def live():
    return "up\n"


# Readiness probe: the process can serve requests
@router.get("/health/ready", response_class=PlainTextResponse)
async def ready():
    return "yes\n"
