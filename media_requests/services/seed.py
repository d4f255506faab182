"""Sample users and requests for a fresh database."""
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from media_requests.models.request import MediaRequest, MediaType, RequestStatus
from media_requests.models.user import User

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"id": "1", "name": "John Doe"},
    {"id": "2", "name": "Jane Smith"},
    {"id": "3", "name": "Mike Johnson"},
    {"id": "4", "name": "Sarah Wilson"},
]

SAMPLE_REQUESTS = [
    {
        "id": "1", "tmdb_id": 1, "title": "The Shawshank Redemption", "type": MediaType.movie,
        "status": RequestStatus.new, "requester_id": "1",
        "poster_path": "/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg", "comment": "Great classic movie!",
    },
    {
        "id": "2", "tmdb_id": 2, "title": "Breaking Bad", "type": MediaType.tv,
        "status": RequestStatus.complete, "requester_id": "2",
        "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg", "admin_comment": "Added to Plex server",
    },
    {
        "id": "3", "tmdb_id": 3, "title": "The Dark Knight", "type": MediaType.movie,
        "status": RequestStatus.pending, "requester_id": "3",
        "poster_path": "/qJ2tW6WMUDux911r6m7haRef0WH.jpg", "comment": "Best Batman movie ever!",
    },
    {
        "id": "4", "tmdb_id": 4, "title": "Game of Thrones", "type": MediaType.tv,
        "status": RequestStatus.complete, "requester_id": "4",
        "poster_path": "/u3bZgnGQ9T01sWNhyveQz0wH0Hl.jpg", "admin_comment": "All seasons added",
    },
]


def seed_sample_data(db: Session) -> bool:
    """Insert the sample rows unless users already exist. Returns True if seeded."""
    if db.query(User).first() is not None:
        return False

    now = datetime.now(timezone.utc)
    db.add_all(User(**user) for user in SAMPLE_USERS)
    for row in SAMPLE_REQUESTS:
        completed = now if row["status"] == RequestStatus.complete else None
        db.add(MediaRequest(**row, request_date=now, completed_date=completed))
    db.commit()
    logger.info("Seeded %d users and %d requests", len(SAMPLE_USERS), len(SAMPLE_REQUESTS))
    return True
