"""Request list view and duplicate-request matching.

Both operate on in-memory sequences of request records (ORM rows or
``RequestOut`` schemas); anything exposing the request attributes works.

List view:
- completed requests older than the visibility window are hidden
- requester filter is a case-insensitive substring match
- status filter is ``"all"`` or one ``RequestStatus``
- newest request first, then sliced into fixed-size pages
"""
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Optional, Sequence

from media_requests.models.request import MediaType, RequestStatus
from media_requests.schemas.request import as_utc as _utc

DEFAULT_VISIBILITY_DAYS = 60
DEFAULT_PER_PAGE = 25
MAX_PAGE_BUTTONS = 5

OPEN_STATUSES = (RequestStatus.new, RequestStatus.pending)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def is_visible(request: Any, now: datetime, visibility_days: int = DEFAULT_VISIBILITY_DAYS) -> bool:
    """False for complete requests whose completion is older than the window."""
    if _enum_value(request.status) != RequestStatus.complete.value:
        return True
    completed = _utc(request.completed_date)
    if completed is None:
        return True
    return completed >= now - timedelta(days=visibility_days)


def filter_requests(
    requests: Iterable[Any],
    requester: Optional[str] = None,
    status: Optional[str] = None,
    now: Optional[datetime] = None,
    visibility_days: int = DEFAULT_VISIBILITY_DAYS,
) -> list:
    """Apply the visibility window and filters, newest request first."""
    now = _utc(now) or datetime.now(timezone.utc)
    needle = (requester or "").strip().lower()
    wanted = None if status in (None, "", "all") else _enum_value(status)

    result = []
    for request in requests:
        if not is_visible(request, now, visibility_days):
            continue
        if needle and needle not in (request.requester_name or "").lower():
            continue
        if wanted is not None and _enum_value(request.status) != wanted:
            continue
        result.append(request)

    epoch = datetime.min.replace(tzinfo=timezone.utc)
    result.sort(key=lambda r: _utc(r.request_date) or epoch, reverse=True)
    return result


def page_numbers(current: int, total_pages: int, max_buttons: int = MAX_PAGE_BUTTONS) -> list[int]:
    """Page buttons to show: a window of at most ``max_buttons`` around ``current``."""
    if total_pages <= max_buttons:
        return list(range(1, total_pages + 1))
    half = max_buttons // 2
    if current <= half + 1:
        first = 1
    elif current >= total_pages - half:
        first = total_pages - max_buttons + 1
    else:
        first = current - half
    return list(range(first, first + max_buttons))


def count_by_status(requests: Iterable[Any]) -> dict[str, int]:
    counts = {status.value: 0 for status in RequestStatus}
    for request in requests:
        key = _enum_value(request.status)
        if key in counts:
            counts[key] += 1
    return counts


def unique_requesters(requests: Iterable[Any]) -> list[str]:
    return sorted({r.requester_name for r in requests if r.requester_name})


def build_list_view(
    requests: Sequence[Any],
    requester: Optional[str] = None,
    status: Optional[str] = None,
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
    now: Optional[datetime] = None,
    visibility_days: int = DEFAULT_VISIBILITY_DAYS,
) -> dict[str, Any]:
    """Filter, sort and paginate ``requests`` into one page shaped like ``RequestPage``."""
    if per_page < 1:
        raise ValueError("per_page must be positive")
    page = max(page, 1)

    filtered = filter_requests(requests, requester, status, now, visibility_days)
    total = len(filtered)
    total_pages = math.ceil(total / per_page)
    start = (page - 1) * per_page
    end = start + per_page
    items = filtered[start:end]

    return {
        "items": items,
        "page": page,
        "per_page": per_page,
        "total": total,
        "total_pages": total_pages,
        "start_index": start + 1 if items else 0,
        "end_index": min(end, total) if items else 0,
        "page_numbers": page_numbers(page, total_pages),
        "counts": count_by_status(filtered),
        "requesters": unique_requesters(requests),
    }


def find_existing_request(
    requests: Iterable[Any],
    tmdb_id: int,
    media_type: Any,
    show_id: Optional[int] = None,
    season_number: Optional[int] = None,
    episode_number: Optional[int] = None,
):
    """First request for the same catalog item at the same granularity, or None."""
    media_type = _enum_value(media_type)
    for request in requests:
        if request.tmdb_id != tmdb_id:
            continue
        kind = _enum_value(request.type)
        if media_type in (MediaType.movie.value, MediaType.tv.value):
            if kind == media_type:
                return request
        elif media_type == MediaType.season.value:
            if (kind == media_type
                    and request.show_id == show_id
                    and request.season_number == season_number):
                return request
        elif media_type == MediaType.episode.value:
            if (kind == media_type
                    and request.show_id == show_id
                    and request.season_number == season_number
                    and request.episode_number == episode_number):
                return request
    return None


def has_open_request(
    requests: Iterable[Any],
    tmdb_id: int,
    media_type: Any,
    show_id: Optional[int] = None,
    season_number: Optional[int] = None,
    episode_number: Optional[int] = None,
) -> bool:
    """True when a matching request is still ``new`` or ``pending``."""
    existing = find_existing_request(requests, tmdb_id, media_type, show_id, season_number, episode_number)
    return existing is not None and _enum_value(existing.status) in {s.value for s in OPEN_STATUSES}
