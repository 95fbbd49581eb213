from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from quote_frontend.core.config import Settings
from quote_frontend.dependencies import get_app_settings, get_backend, get_templates
from quote_frontend.services.backend import InterestBackend
from quote_frontend.services.quote import QuoteService, parse_amount

router = APIRouter(tags=["ui"])


async def read_form_field(request: Request, name: str) -> Optional[str]:
    """First value of `name`, posted body before query string.

    A body that cannot be parsed counts as no body.
    """
    if request.method == "POST":
        try:
            form = await request.form()
        except (MultiPartException, StarletteHTTPException):
            form = None
        if form is not None:
            value = form.get(name)
            if isinstance(value, str):
                return value
    return request.query_params.get(name)


@router.api_route("/", methods=["GET", "HEAD", "POST"], response_class=HTMLResponse)
async def home(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    backend: InterestBackend = Depends(get_backend),
    templates: Jinja2Templates = Depends(get_templates),
):
    variant = settings.variant
    # Backend calls block; keep them off the event loop
    backend_version = await run_in_threadpool(backend.find_backend_version)

    amount = parse_amount(await read_form_field(request, variant.form_field))
    result = await run_in_threadpool(QuoteService(backend).quote_for, amount)

    context: Dict[str, Any] = {
        "app_version": settings.app_version,
        "backend_version": backend_version,
        "backend_host": settings.backend_host,
        "backend_port": settings.backend_port,
        "variant": variant,
        "amount": amount,
        "result": result,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/diagram.svg")
async def diagram(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    backend: InterestBackend = Depends(get_backend),
    templates: Jinja2Templates = Depends(get_templates),
) -> Response:
    backend_version = await run_in_threadpool(backend.find_backend_version)
    context = {
        "FV": settings.app_version,
        "BV": backend_version,
        "variant": settings.variant,
    }
    return templates.TemplateResponse(
        request,
        "diagram.svg",
        context,
        media_type="image/svg+xml",
        headers={"Accept-Ranges": "bytes"},
    )
