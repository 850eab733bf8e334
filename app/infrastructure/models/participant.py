"""SQLAlchemy model for the participant table."""

from sqlalchemy import Column, String

from app.infrastructure.database import Base


class ParticipantModel(Base):
    """Database representation of a participant."""

    __tablename__ = "participant"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)


__all__ = ["ParticipantModel"]
