"""
Meetup endpoints.

These routes provide CRUD operations for meetups.  Handlers only
translate between HTTP and ``MeetupService``: service errors propagate
to the exception handlers in ``api/errors.py``, which produce the 404
and 500 responses.
"""

from fastapi import APIRouter, Depends, status

from meetup_api.app.schemas.meetup import (
    FilterOptions,
    MeetupCreate,
    MeetupListResponse,
    MeetupRead,
    MeetupResponse,
    MeetupUpdate,
)
from meetup_api.app.services.meetup_service import MeetupService
from meetup_api.app.api.deps import get_meetup_service

router = APIRouter()


@router.get("", response_model=MeetupListResponse)
async def list_meetups(
    filters: FilterOptions = Depends(),
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupListResponse:
    """List meetups ordered by ID.

    - **limit**: page size, 10 if omitted.
    - **offset**: 1‑based page number, 1 if omitted.
    """
    meetups = await service.list_meetups(limit=filters.limit, offset=filters.offset)
    return MeetupListResponse.from_records(meetups)


@router.get("/{meetup_id}", response_model=MeetupResponse)
async def get_meetup(
    meetup_id: int,
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupResponse:
    """Retrieve a single meetup by its ID."""
    meetup = await service.get_meetup(meetup_id)
    return MeetupResponse(data=MeetupRead.from_record(meetup))


@router.post("", response_model=MeetupResponse, status_code=status.HTTP_201_CREATED)
async def create_meetup(
    meetup_in: MeetupCreate,
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupResponse:
    """Create a new meetup.  Both ``title`` and ``body_text`` are required."""
    meetup = await service.create_meetup(meetup_in)
    return MeetupResponse(data=MeetupRead.from_record(meetup))


@router.put("/{meetup_id}", response_model=MeetupResponse)
async def update_meetup(
    meetup_id: int,
    updates: MeetupUpdate,
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupResponse:
    """Update an existing meetup.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    meetup = await service.update_meetup(meetup_id, updates)
    return MeetupResponse(data=MeetupRead.from_record(meetup))


@router.delete("/{meetup_id}", response_model=MeetupResponse)
async def delete_meetup(
    meetup_id: int,
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupResponse:
    """Delete a meetup and return the record that was removed."""
    meetup = await service.delete_meetup(meetup_id)
    return MeetupResponse(data=MeetupRead.from_record(meetup))
