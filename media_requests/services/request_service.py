"""Media request persistence.

Responsibilities:
- Requester lookup-or-create by exact name
- Single-row create / status / comment / delete statements
- Completion timestamp tracking on status changes
- Bulk replace for import
Any SQLAlchemy failure is rolled back and surfaced as a generic 500.
"""
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from media_requests.models.request import MediaRequest, RequestStatus
from media_requests.models.user import User
from media_requests.schemas.request import RequestCreate, RequestImport

logger = logging.getLogger(__name__)


@contextmanager
def _db_errors(db: Session, message: str) -> Iterator[None]:
    """Roll back and raise a 500 with ``message`` on any database error."""
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception(message)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _get_or_404(db: Session, request_id: str) -> MediaRequest:
    request = db.query(MediaRequest).filter(MediaRequest.id == request_id).first()
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    return request


def get_or_create_user(db: Session, name: str) -> User:
    """Return the user called ``name``, adding one to the session if needed."""
    user = db.query(User).filter(User.name == name).first()
    if user is None:
        user = User(name=name)
        db.add(user)
        db.flush()
        logger.info("Created user %s (%s)", user.id, name)
    return user


def list_requests(db: Session) -> list[MediaRequest]:
    """All requests with their requester loaded, newest first."""
    with _db_errors(db, "Failed to fetch requests"):
        return (
            db.query(MediaRequest)
            .options(joinedload(MediaRequest.requester))
            .order_by(MediaRequest.request_date.desc())
            .all()
        )


def create_request(db: Session, payload: RequestCreate) -> MediaRequest:
    with _db_errors(db, "Failed to create request"):
        user = get_or_create_user(db, payload.requester_name)
        request = MediaRequest(
            **payload.model_dump(exclude={"requester_name"}),
            status=RequestStatus.new,
            requester_id=user.id,
        )
        db.add(request)
        db.commit()
        db.refresh(request)
    logger.info("Request %s created: %s (%s) for %s",
                request.id, request.title, request.type.value, user.name)
    return request


def update_status(db: Session, request_id: str, new_status: RequestStatus) -> MediaRequest:
    """Set any status; completion time is stamped on ``complete`` and cleared otherwise."""
    with _db_errors(db, "Failed to update request status"):
        request = _get_or_404(db, request_id)
        request.status = new_status
        request.completed_date = (
            datetime.now(timezone.utc) if new_status == RequestStatus.complete else None
        )
        db.commit()
        db.refresh(request)
    logger.info("Request %s status -> %s", request_id, new_status.value)
    return request


def update_comment(db: Session, request_id: str, comment: Optional[str], is_admin: bool) -> MediaRequest:
    with _db_errors(db, "Failed to add comment"):
        request = _get_or_404(db, request_id)
        if is_admin:
            request.admin_comment = comment
        else:
            request.comment = comment
        db.commit()
        db.refresh(request)
    logger.info("Request %s %s comment updated", request_id, "admin" if is_admin else "requester")
    return request


def delete_request(db: Session, request_id: str) -> None:
    with _db_errors(db, "Failed to delete request"):
        request = _get_or_404(db, request_id)
        db.delete(request)
        db.commit()
    logger.info("Request %s deleted", request_id)


def replace_all(db: Session, records: list[RequestImport]) -> int:
    """Replace every stored request with ``records`` in one transaction."""
    with _db_errors(db, "Failed to import requests"):
        db.query(MediaRequest).delete()
        users: dict[str, User] = {}
        for record in records:
            if record.requester_name not in users:
                users[record.requester_name] = get_or_create_user(db, record.requester_name)
            fields = record.model_dump(exclude={"requester_name"}, exclude_none=True)
            db.add(MediaRequest(**fields, requester_id=users[record.requester_name].id))
        db.commit()
    logger.info("Imported %d requests", len(records))
    return len(records)
