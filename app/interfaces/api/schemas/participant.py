"""Participant schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParticipantCreate(BaseModel):
    # Optional here so an empty or missing name is reported as InvalidInput.
    name: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class ParticipantUpdate(BaseModel):
    name: str = Field(..., max_length=255)

    model_config = ConfigDict(extra="forbid")


class ParticipantRead(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


__all__ = ["ParticipantCreate", "ParticipantRead", "ParticipantUpdate"]
