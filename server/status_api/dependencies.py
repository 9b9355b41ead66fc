"""Request-scoped accessors for objects owned by the app."""

from fastapi import Request

from .config import Settings
from .services.status import StatusService


def get_status_service(request: Request) -> StatusService:
    return request.app.state.status_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
