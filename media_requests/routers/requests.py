"""Media request API routes; persistence is delegated to request_service."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from media_requests.config import settings
from media_requests.database import get_db
from media_requests.models.request import MediaType
from media_requests.schemas.request import (
    CommentUpdate,
    ExistingRequestOut,
    ImportResult,
    MessageOut,
    RequestCreate,
    RequestImport,
    RequestOut,
    RequestPage,
    StatusUpdate,
)
from media_requests.services import request_service, request_view

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[RequestOut])
def list_requests(db: Session = Depends(get_db)):
    """All requests, newest first, with requester names."""
    return request_service.list_requests(db)


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def create_request(payload: RequestCreate, db: Session = Depends(get_db)):
    """Create a request; the requester is created on first use."""
    request = request_service.create_request(db, payload)
    return MessageOut(message="Request created successfully", id=request.id)


@router.get("/view", response_model=RequestPage)
def view_requests(
    requester: Optional[str] = Query(None, description="Case-insensitive requester name fragment"),
    status_filter: str = Query("all", alias="status", pattern="^(all|new|pending|complete)$"),
    page: int = Query(1, ge=1),
    db: Session = Depends(get_db),
):
    """One page of the filtered list; old completed requests are hidden."""
    view = request_view.build_list_view(
        request_service.list_requests(db),
        requester=requester,
        status=status_filter,
        page=page,
        per_page=settings.REQUESTS_PER_PAGE,
        visibility_days=settings.COMPLETED_VISIBILITY_DAYS,
    )
    return RequestPage.model_validate(view, from_attributes=True)


@router.get("/existing", response_model=ExistingRequestOut)
def existing_request(
    tmdb_id: int = Query(..., alias="tmdbId"),
    media_type: MediaType = Query(..., alias="type"),
    show_id: Optional[int] = Query(None, alias="showId"),
    season_number: Optional[int] = Query(None, alias="seasonNumber"),
    episode_number: Optional[int] = Query(None, alias="episodeNumber"),
    db: Session = Depends(get_db),
):
    """Look up a request for the same item, season or episode."""
    requests = request_service.list_requests(db)
    match = request_view.find_existing_request(
        requests, tmdb_id, media_type, show_id, season_number, episode_number,
    )
    return ExistingRequestOut(
        request=RequestOut.model_validate(match) if match else None,
        has_open_request=request_view.has_open_request(
            requests, tmdb_id, media_type, show_id, season_number, episode_number,
        ),
    )


@router.get("/export", response_model=list[RequestOut])
def export_requests(db: Session = Depends(get_db)):
    """Every request, including hidden ones, for backup."""
    return request_service.list_requests(db)


@router.post("/import", response_model=ImportResult)
def import_requests(payload: list[RequestImport], db: Session = Depends(get_db)):
    """Replace all stored requests with an exported list."""
    count = request_service.replace_all(db, payload)
    return ImportResult(message=f"Successfully imported {count} requests", imported=count)


@router.patch("/{request_id}/status", response_model=MessageOut, response_model_exclude_none=True)
def update_request_status(request_id: str, payload: StatusUpdate, db: Session = Depends(get_db)):
    """Set any status; ``complete`` stamps the completion time."""
    request_service.update_status(db, request_id, payload.status)
    return MessageOut(message="Request status updated successfully")


@router.patch("/{request_id}/comment", response_model=MessageOut, response_model_exclude_none=True)
def update_request_comment(request_id: str, payload: CommentUpdate, db: Session = Depends(get_db)):
    """Write the requester comment, or the admin comment when ``isAdmin`` is set."""
    request_service.update_comment(db, request_id, payload.comment, payload.is_admin)
    return MessageOut(message="Comment added successfully")


@router.delete("/{request_id}", response_model=MessageOut, response_model_exclude_none=True)
def delete_request(request_id: str, db: Session = Depends(get_db)):
    request_service.delete_request(db, request_id)
    return MessageOut(message="Request deleted successfully")
