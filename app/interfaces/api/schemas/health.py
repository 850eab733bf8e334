"""Schemas for service status endpoints."""

from pydantic import BaseModel


class HealthRead(BaseModel):
    status: str
    service: str


__all__ = ["HealthRead"]
