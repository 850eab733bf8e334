"""SQLAlchemy model for activities."""

from sqlalchemy import BigInteger, Column, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from app.infrastructure.database import Base

_participants_json_type = JSONB().with_variant(JSON(), "sqlite")


class ActivityModel(Base):
    """Database representation of an activity and its embedded participants."""

    __tablename__ = "activity"

    id = Column(String(36), primary_key=True)
    activity_type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(String(255), nullable=False)
    time = Column(String(255), nullable=False)
    duration = Column(String(255), nullable=False)
    participants = Column(_participants_json_type, nullable=False, default=list)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=True)


__all__ = ["ActivityModel"]
