"""Pydantic schemas for activity endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .participant import ParticipantRead


class ActivityPayload(BaseModel):
    """Fields accepted when creating or updating an activity.

    Every field is optional at the schema level; the use cases decide which
    ones are required so that failures are reported as ``InvalidInput``.
    """

    activity_type: str | None = Field(
        default=None, max_length=100, description="Activity classifier, e.g. post or event"
    )
    description: str | None = Field(default=None, description="Free text description")
    date: str | None = Field(
        default=None, max_length=255, description="Date in YYYY-MM-DD format"
    )
    time: str | None = Field(
        default=None, max_length=255, description="Time in HH:MM format"
    )
    duration: str | None = Field(
        default=None, max_length=255, description="Duration in minutes"
    )

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class ActivityCreate(ActivityPayload):
    pass


class ActivityUpdate(ActivityPayload):
    pass


class ActivityRead(BaseModel):
    id: str
    activity_type: str
    description: str
    date: str
    time: str
    duration: str
    participants: list[ParticipantRead] = Field(default_factory=list)
    created_at: int = Field(..., description="Creation time in nanoseconds since the epoch")
    updated_at: int | None = Field(
        default=None, description="Last modification time in nanoseconds since the epoch"
    )

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


__all__ = ["ActivityCreate", "ActivityPayload", "ActivityRead", "ActivityUpdate"]
