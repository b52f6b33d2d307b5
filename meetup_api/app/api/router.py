"""
Top‑level API router.

This router aggregates the resource routers under a unified prefix.
The application mounts it at ``/api``; the informational pages are
mounted separately at the site root.
"""

from fastapi import APIRouter

from .endpoints import meetups

router = APIRouter()

router.include_router(meetups.router, prefix="/meetups", tags=["meetups"])
