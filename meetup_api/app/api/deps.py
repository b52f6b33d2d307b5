"""
FastAPI dependencies shared by the endpoint modules.

The ``Database`` and ``Settings`` are attached to ``app.state`` by
``create_app``; these helpers hand them to the handlers so that no
endpoint reaches for module‑level state.
"""

from fastapi import Depends, Request

from meetup_api.app.core.config import Settings
from meetup_api.app.core.db import Database
from meetup_api.app.services.meetup_service import MeetupService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_meetup_service(db: Database = Depends(get_database)) -> MeetupService:
    return MeetupService(db)
