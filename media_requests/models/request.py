"""MediaRequest ORM model."""
import uuid
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from media_requests.database import Base


class MediaType(str, enum.Enum):
    movie = "movie"
    tv = "tv"
    season = "season"
    episode = "episode"


class RequestStatus(str, enum.Enum):
    new = "new"
    pending = "pending"
    complete = "complete"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MediaRequest(Base):
    __tablename__ = "requests"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    tmdb_id = Column(Integer, nullable=False)
    title = Column(String(500), nullable=False)
    type = Column(SAEnum(MediaType), nullable=False)
    status = Column(SAEnum(RequestStatus), nullable=False, default=RequestStatus.new)
    requester_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    poster_path = Column(String(255), nullable=True)
    request_date = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    completed_date = Column(DateTime(timezone=True), nullable=True)
    comment = Column(Text, nullable=True)
    admin_comment = Column(Text, nullable=True)

    # TV granularity; unset for movie requests
    show_id = Column(Integer, nullable=True)
    show_title = Column(String(500), nullable=True)
    season_number = Column(Integer, nullable=True)
    episode_number = Column(Integer, nullable=True)
    episode_title = Column(String(500), nullable=True)

    requester = relationship("User", back_populates="requests")

    @property
    def requester_name(self):
        return self.requester.name if self.requester else None
