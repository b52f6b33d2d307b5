"""
Models for meetup data.

``Meetup`` is the record as it is stored; ``MeetupRead`` is the view
returned to clients.  The two carry the same three fields, so
``MeetupRead.from_record`` is a lossless projection.  ``MeetupCreate``
and ``MeetupUpdate`` describe request bodies, ``FilterOptions`` the
query string of the list endpoint, and the ``*Response`` models the
JSON envelope wrapped around every answer.
"""

import sqlite3
from dataclasses import dataclass, replace
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 1


@dataclass(frozen=True)
class Meetup:
    """A stored meetup row."""

    meetup_id: int
    title: str
    body_text: str

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Meetup":
        return cls(
            meetup_id=row["meetup_id"],
            title=row["title"],
            body_text=row["body_text"],
        )


class FilterOptions(BaseModel):
    """Query parameters accepted by the list endpoint.

    ``offset`` is a 1‑based page number rather than a row count: page
    ``n`` skips ``(n - 1) * limit`` rows.
    """

    limit: Optional[int] = Field(None, example=DEFAULT_LIMIT)
    offset: Optional[int] = Field(None, example=DEFAULT_OFFSET)

    def resolve(self) -> tuple[int, int]:
        """Return ``(limit, rows_to_skip)`` with defaults applied."""
        limit = DEFAULT_LIMIT if self.limit is None else self.limit
        offset = DEFAULT_OFFSET if self.offset is None else self.offset
        return limit, (offset - 1) * limit


class MeetupCreate(BaseModel):
    """Schema for creating a meetup."""

    title: str = Field(..., example="Rust Meetup")
    body_text: str = Field(..., example="Monthly gathering")


class MeetupUpdate(BaseModel):
    """Schema for updating a meetup.

    Both fields are optional; a missing or null field keeps its
    current value.
    """

    title: Optional[str] = None
    body_text: Optional[str] = None

    def apply_to(self, meetup: Meetup) -> Meetup:
        """Return a copy of ``meetup`` with the provided fields replaced.

        Mirrors the ``COALESCE`` merge that ``MeetupService.update_meetup``
        performs in SQL, for callers that hold a record outside the
        service.  The service itself does not call this.
        """
        changes = {k: v for k, v in self.model_dump().items() if v is not None}
        return replace(meetup, **changes)


class MeetupRead(BaseModel):
    """Schema for reading a meetup from the API."""

    meetup_id: int
    title: str
    body_text: str

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_record(cls, meetup: Meetup) -> "MeetupRead":
        return cls.model_validate(meetup)


class MeetupResponse(BaseModel):
    status: Literal["success"] = "success"
    count: int = 1
    data: MeetupRead


class MeetupListResponse(BaseModel):
    status: Literal["success"] = "success"
    count: int
    data: List[MeetupRead]

    @classmethod
    def from_records(cls, meetups: List[Meetup]) -> "MeetupListResponse":
        data = [MeetupRead.from_record(m) for m in meetups]
        return cls(count=len(data), data=data)


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
