"""Pydantic schemas for liveness endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    service: str
    database: str


class LegacyHealthResponse(BaseModel):
    status: str
    service: str
