import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, ui
from .services.backend import HttpInterestBackend, InterestBackend


def create_app(
    settings_override: Settings | None = None,
    backend_override: InterestBackend | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    backend_override: replaces the HTTP interest backend (tests, local demos).
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug, frontend=settings.variant.name)

    app = FastAPI(
        title=f"{settings.variant.title} frontend",
        debug=settings.debug,
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Built once; read-only for the lifetime of the process
    app.state.settings = settings
    app.state.backend = backend_override or HttpInterestBackend.from_settings(settings)
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(ui.router)

    # Everything else falls through to static files
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    logging.getLogger("frontend").info(
        "%s frontend %s configured for backend %s",
        settings.variant.title,
        settings.app_version,
        settings.backend_base_url,
    )
    return app


app = create_app()
