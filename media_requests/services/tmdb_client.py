"""TMDB catalog pass-through client.

Ref: https://developers.themoviedb.org/3 (v3). Every call is a single GET;
failures are reported as ``CatalogError`` for the router to map to a 500.
"""
import logging
from typing import Any, AsyncIterator, Optional

import httpx

from media_requests.config import settings

logger = logging.getLogger(__name__)

SEARCHABLE_MEDIA_TYPES = ("movie", "tv")


class CatalogError(Exception):
    """The catalog could not be reached or returned an unusable response."""


class CatalogNotConfiguredError(CatalogError):
    """No API key is configured."""


class TMDBClient:
    def __init__(self, http_client: httpx.AsyncClient, api_key: Optional[str] = None):
        self.api_key = settings.TMDB_API_KEY if api_key is None else api_key
        self.api_headers = {"Accept": "application/json"}
        self.http_client = http_client

    async def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        if not self.api_key:
            raise CatalogNotConfiguredError("TMDB API key not configured")

        # api_key is kept out of the logged params
        logger.info("[TMDB] - GET %s %s", endpoint, params or {})
        query = {"api_key": self.api_key, **(params or {})}
        try:
            response = await self.http_client.get(endpoint, params=query, headers=self.api_headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error("[TMDB] - %s returned status %s", endpoint, e.response.status_code)
            raise CatalogError(f"TMDB returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error("[TMDB] - Error while calling %s: %s", endpoint, type(e).__name__)
            raise CatalogError("TMDB unreachable") from e
        except ValueError as e:
            logger.error("[TMDB] - Error while parsing response of %s", endpoint)
            raise CatalogError("TMDB returned invalid JSON") from e

    async def search(self, query: str, page: int = 1) -> dict[str, Any]:
        """Multi search restricted to movie and TV results."""
        data = await self._get("/search/multi", {
            "query": query,
            "page": page,
            "include_adult": "false",
        })
        results = data.get("results") or []
        return {
            **data,
            "results": [r for r in results if r.get("media_type") in SEARCHABLE_MEDIA_TYPES],
        }

    async def tv_details(self, show_id: int) -> dict[str, Any]:
        return await self._get(f"/tv/{show_id}", {"append_to_response": "seasons"})

    async def season_details(self, show_id: int, season_number: int) -> dict[str, Any]:
        return await self._get(f"/tv/{show_id}/season/{season_number}")


async def get_tmdb_client() -> AsyncIterator[TMDBClient]:
    """FastAPI dependency: a client bound to a per-request HTTPX session."""
    async with httpx.AsyncClient(
        base_url=settings.TMDB_BASE_URL,
        timeout=httpx.Timeout(settings.TMDB_TIMEOUT),
    ) as http_client:
        yield TMDBClient(http_client)
