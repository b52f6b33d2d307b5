"""
Business logic for meetups.

``MeetupService`` is the only code that issues SQL against the
``meetups`` table.  It is bound to the shared ``Database`` handed in
by the API layer.  The public methods are coroutines; the blocking
``sqlite3`` calls run in the worker thread pool so request handling
never stalls the event loop.

Every method returns ``Meetup`` records or raises one of the errors
from ``core.errors``.  Store errors are wrapped, never retried.
"""

import logging
import sqlite3
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from meetup_api.app.core.db import Database
from meetup_api.app.core.errors import (
    CreationFailure,
    DeletionFailure,
    MeetupNotFound,
    RetrievalFailure,
    UpdateFailure,
)
from meetup_api.app.schemas.meetup import FilterOptions, Meetup, MeetupCreate, MeetupUpdate

logger = logging.getLogger(__name__)

COLUMNS = "meetup_id, title, body_text"

# sqlite3 raises OverflowError, not sqlite3.Error, for integers beyond 64 bits.
STORE_ERRORS = (sqlite3.Error, OverflowError)


class MeetupService:
    """Service for managing meetups stored in SQLite."""

    def __init__(self, db: Database):
        self.db = db

    async def list_meetups(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Meetup]:
        """Return one page of meetups ordered by ``meetup_id``.

        ``limit`` defaults to 10 and ``offset`` is the 1‑based page
        number (default 1).  There is no upper bound on ``limit``.
        """
        limit, skip = FilterOptions(limit=limit, offset=offset).resolve()
        return await run_in_threadpool(self._list, limit, skip)

    def _list(self, limit: int, skip: int) -> List[Meetup]:
        # SQLite reads a negative LIMIT as "no limit"; reject it instead.
        if limit < 0:
            raise RetrievalFailure("LIMIT must not be negative", many=True)
        if skip < 0:
            raise RetrievalFailure("OFFSET must not be negative", many=True)
        try:
            with self.db.connection() as conn:
                rows = conn.execute(
                    f"SELECT {COLUMNS} FROM meetups ORDER BY meetup_id LIMIT ? OFFSET ?",
                    (limit, skip),
                ).fetchall()
        except STORE_ERRORS as e:
            logger.error("Listing meetups failed: %s", e)
            raise RetrievalFailure(str(e), many=True) from e
        return [Meetup.from_row(row) for row in rows]

    async def get_meetup(self, meetup_id: int) -> Meetup:
        """Retrieve a single meetup by ID.

        Raises ``MeetupNotFound`` if no row matches.
        """
        return await run_in_threadpool(self._get, meetup_id)

    def _get(self, meetup_id: int) -> Meetup:
        try:
            with self.db.connection() as conn:
                row = conn.execute(
                    f"SELECT {COLUMNS} FROM meetups WHERE meetup_id = ?",
                    (meetup_id,),
                ).fetchone()
        except STORE_ERRORS as e:
            logger.error("Fetching meetup %s failed: %s", meetup_id, e)
            raise RetrievalFailure(str(e)) from e
        if row is None:
            raise MeetupNotFound(meetup_id)
        return Meetup.from_row(row)

    async def create_meetup(self, data: MeetupCreate) -> Meetup:
        """Insert a meetup and return it with its store‑assigned ID."""
        return await run_in_threadpool(self._create, data)

    def _create(self, data: MeetupCreate) -> Meetup:
        try:
            with self.db.connection() as conn:
                row = _returning(
                    conn,
                    f"INSERT INTO meetups (title, body_text) VALUES (?, ?) RETURNING {COLUMNS}",
                    (data.title, data.body_text),
                )
        except STORE_ERRORS as e:
            logger.error("Creating meetup '%s' failed: %s", data.title, e)
            raise CreationFailure(str(e)) from e
        meetup = Meetup.from_row(row)
        logger.info("Created meetup %s", meetup.meetup_id)
        return meetup

    async def update_meetup(self, meetup_id: int, patch: MeetupUpdate) -> Meetup:
        """Apply a partial update and return the resulting meetup.

        Fields left unset (or null) in ``patch`` keep their stored
        value.  The merge happens inside one ``UPDATE`` statement, so a
        concurrent writer cannot interleave between reading and
        writing the row.  Raises ``MeetupNotFound`` if no row matches.
        """
        return await run_in_threadpool(self._update, meetup_id, patch)

    def _update(self, meetup_id: int, patch: MeetupUpdate) -> Meetup:
        try:
            with self.db.connection() as conn:
                row = _returning(
                    conn,
                    f"""
                    UPDATE meetups
                    SET title = COALESCE(?, title),
                        body_text = COALESCE(?, body_text)
                    WHERE meetup_id = ?
                    RETURNING {COLUMNS}
                    """,
                    (patch.title, patch.body_text, meetup_id),
                )
        except STORE_ERRORS as e:
            logger.error("Updating meetup %s failed: %s", meetup_id, e)
            raise UpdateFailure(str(e)) from e
        if row is None:
            raise MeetupNotFound(meetup_id)
        logger.info("Updated meetup %s", meetup_id)
        return Meetup.from_row(row)

    async def delete_meetup(self, meetup_id: int) -> Meetup:
        """Delete a meetup and return what it contained.

        Raises ``MeetupNotFound`` if no row matches.
        """
        return await run_in_threadpool(self._delete, meetup_id)

    def _delete(self, meetup_id: int) -> Meetup:
        try:
            with self.db.connection() as conn:
                row = _returning(
                    conn,
                    f"DELETE FROM meetups WHERE meetup_id = ? RETURNING {COLUMNS}",
                    (meetup_id,),
                )
        except STORE_ERRORS as e:
            logger.error("Deleting meetup %s failed: %s", meetup_id, e)
            raise DeletionFailure(str(e)) from e
        if row is None:
            raise MeetupNotFound(meetup_id)
        logger.info("Deleted meetup %s", meetup_id)
        return Meetup.from_row(row)


def _returning(conn: sqlite3.Connection, sql: str, params: tuple) -> Optional[sqlite3.Row]:
    """Run a ``... RETURNING`` statement and return its single row.

    The cursor is drained so the statement is finished before the
    surrounding transaction commits.
    """
    rows = conn.execute(sql, params).fetchall()
    return rows[0] if rows else None
