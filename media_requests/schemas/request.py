"""Pydantic schemas for media requests.

Wire names are camelCase to match the browser client; snake_case is accepted
on input as well.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

from media_requests.models.request import MediaType, RequestStatus

CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive values are UTC; aware values are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def strip_requester_name(value: str) -> str:
    """Requester names are matched exactly, so surrounding whitespace is dropped."""
    value = value.strip()
    if not value:
        raise ValueError("requesterName must not be blank")
    return value


class RequestCreate(BaseModel):
    tmdb_id: int
    title: str
    type: MediaType
    requester_name: str
    poster_path: Optional[str] = None
    comment: Optional[str] = None
    show_id: Optional[int] = None
    show_title: Optional[str] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    episode_title: Optional[str] = None

    model_config = CAMEL

    @field_validator("requester_name")
    @classmethod
    def requester_not_blank(cls, value: str) -> str:
        return strip_requester_name(value)


class RequestOut(BaseModel):
    id: str
    tmdb_id: int
    title: str
    type: MediaType
    status: RequestStatus
    requester_name: Optional[str] = None
    poster_path: Optional[str] = None
    request_date: datetime
    completed_date: Optional[datetime] = None
    comment: Optional[str] = None
    admin_comment: Optional[str] = None
    show_id: Optional[int] = None
    show_title: Optional[str] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    episode_title: Optional[str] = None

    model_config = {**CAMEL, "from_attributes": True}

    @field_validator("request_date", "completed_date")
    @classmethod
    def dates_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class RequestImport(BaseModel):
    """One record of an exported request list."""
    id: Optional[str] = None
    tmdb_id: int
    title: str
    type: MediaType
    status: RequestStatus = RequestStatus.new
    requester_name: str
    poster_path: Optional[str] = None
    request_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    comment: Optional[str] = None
    admin_comment: Optional[str] = None
    show_id: Optional[int] = None
    show_title: Optional[str] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    episode_title: Optional[str] = None

    model_config = CAMEL

    @field_validator("requester_name")
    @classmethod
    def requester_not_blank(cls, value: str) -> str:
        return strip_requester_name(value)

    @field_validator("request_date", "completed_date")
    @classmethod
    def dates_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class StatusUpdate(BaseModel):
    status: RequestStatus


class CommentUpdate(BaseModel):
    comment: Optional[str] = None
    is_admin: bool = False

    model_config = CAMEL


class MessageOut(BaseModel):
    message: str
    id: Optional[str] = None


class ImportResult(BaseModel):
    message: str
    imported: int


class ExistingRequestOut(BaseModel):
    request: Optional[RequestOut] = None
    has_open_request: bool

    model_config = CAMEL


class StatusCounts(BaseModel):
    new: int = 0
    pending: int = 0
    complete: int = 0


class RequestPage(BaseModel):
    """One page of the filtered request list."""
    items: list[RequestOut]
    page: int
    per_page: int
    total: int
    total_pages: int
    start_index: int
    end_index: int
    page_numbers: list[int]
    counts: StatusCounts
    requesters: list[str]

    model_config = CAMEL
