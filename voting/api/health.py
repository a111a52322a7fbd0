"""Liveness endpoints shared by both services."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from voting.api.deps import get_db
from voting.core.config import ServiceName
from voting.schemas.health import HealthResponse, LegacyHealthResponse
from voting.services.health import check_database


def build_health_router(service: ServiceName) -> APIRouter:
    """Return /healthz and /health routes reporting as the given service."""
    router = APIRouter()

    @router.get("/healthz", response_model=HealthResponse)
    def healthz(db: Session = Depends(get_db)):
        """Report healthy only when a round-trip to the store succeeds."""
        if check_database(db):
            return HealthResponse(status="healthy", service=service, database="connected")
        body = HealthResponse(status="unhealthy", service=service, database="disconnected")
        return JSONResponse(status_code=503, content=body.model_dump())

    @router.get("/health", response_model=LegacyHealthResponse)
    def health() -> LegacyHealthResponse:
        return LegacyHealthResponse(status="ok", service=service)

    return router
