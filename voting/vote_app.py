"""Vote service: two-option form, vote submission and liveness."""

from fastapi import FastAPI

from voting.api.vote import router
from voting.core.config import Settings, get_settings
from voting.main import create_service_app


def create_app(settings: Settings | None = None, migrate_on_startup: bool = True) -> FastAPI:
    return create_service_app("vote", router, settings or get_settings(), migrate_on_startup)
