"""Request-scoped accessors for the objects built once in create_app.

Routers depend on these instead of module globals so tests can swap any of
them through `app.dependency_overrides`.
"""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from quote_frontend.core.config import Settings
from quote_frontend.services.backend import InterestBackend


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_backend(request: Request) -> InterestBackend:
    return request.app.state.backend


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
