"""TMDB proxy routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from media_requests.services.tmdb_client import (
    CatalogError,
    CatalogNotConfiguredError,
    TMDBClient,
    get_tmdb_client,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _catalog_failure(error: CatalogError, message: str) -> HTTPException:
    if isinstance(error, CatalogNotConfiguredError):
        message = "TMDB API key not configured"
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.get("/search")
async def search(
    query: str = Query("", description="Title to search for"),
    page: int = Query(1, ge=1),
    tmdb: TMDBClient = Depends(get_tmdb_client),
):
    """Search movies and TV shows; people and other result kinds are dropped."""
    if not query.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Query parameter is required")
    try:
        return await tmdb.search(query, page)
    except CatalogError as e:
        raise _catalog_failure(e, "Failed to search TMDB")


@router.get("/tv/{show_id}")
async def tv_details(show_id: int = Path(...), tmdb: TMDBClient = Depends(get_tmdb_client)):
    """TV show details including its season list."""
    try:
        return await tmdb.tv_details(show_id)
    except CatalogError as e:
        raise _catalog_failure(e, "Failed to fetch TV show details")


@router.get("/tv/{show_id}/season/{season_number}")
async def season_details(
    show_id: int = Path(...),
    season_number: int = Path(..., ge=0),
    tmdb: TMDBClient = Depends(get_tmdb_client),
):
    """Episodes of a single season."""
    try:
        return await tmdb.season_details(show_id, season_number)
    except CatalogError as e:
        raise _catalog_failure(e, "Failed to fetch season details")
