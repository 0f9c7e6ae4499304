# snippetbox/repositories/snippet_repository.py
# Database-backed snippet store built on SQLAlchemy Core

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from pydantic import ValidationError
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from snippetbox.clock import Clock, utc_now
from snippetbox.config import get_settings
from snippetbox.constants import LATEST_SNIPPETS_LIMIT
from snippetbox.db.base import get_session_factory
from snippetbox.errors import SnippetNotFoundError, StoreError
from snippetbox.models.snippet import Snippet, as_utc
from snippetbox.models.snippets_table import snippets

logger = logging.getLogger(__name__)

# Failures translated into StoreError at the store boundary
_STORE_FAILURES = (SQLAlchemyError, ValidationError, OSError, OverflowError, ValueError, KeyError)

_SELECT_SNIPPET = select(
    snippets.c.id,
    snippets.c.title,
    snippets.c.content,
    snippets.c.created,
    snippets.c.expires,
)


class SnippetRepository:
    """Persist and read snippets; expired rows are invisible to reads."""

    def __init__(
        self,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        clock: Clock = utc_now,
        latest_limit: int = LATEST_SNIPPETS_LIMIT,
    ):
        if latest_limit < 1:
            raise ValueError("latest_limit must be >= 1")
        self._session_factory = session_factory or get_session_factory()
        self._clock = clock
        self._latest_limit = latest_limit

    def _now(self) -> datetime:
        return as_utc(self._clock())

    async def insert(self, title: str, content: str, expires_days: int) -> int:
        """Insert a snippet expiring expires_days from now and return its id."""
        created = self._now()
        try:
            # huge expires_days overflows the datetime range
            expires = created + timedelta(days=expires_days)
            stmt = insert(snippets).values(
                title=title,
                content=content,
                created=created,
                expires=expires,
            ).returning(snippets.c.id)
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                new_id = result.scalar_one()
                await session.commit()
        except _STORE_FAILURES as e:
            logger.error(f"Snippet insert failed: {type(e).__name__}: {e}", exc_info=True)
            raise StoreError("Failed to insert snippet", operation="insert") from e
        logger.debug("snippet inserted", extra={"snippet_id": new_id})
        return int(new_id)

    async def get(self, snippet_id: int) -> Snippet:
        """Return the live snippet with this id; raise SnippetNotFoundError otherwise."""
        stmt = _SELECT_SNIPPET.where(
            snippets.c.expires > self._now(),
            snippets.c.id == snippet_id,
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                row = result.mappings().first()
                snippet = Snippet.from_row(row) if row is not None else None
        except _STORE_FAILURES as e:
            logger.error(f"Snippet get failed: {type(e).__name__}: {e}", exc_info=True)
            raise StoreError("Failed to fetch snippet", operation="get") from e
        if snippet is None:
            raise SnippetNotFoundError(snippet_id)
        return snippet

    async def latest(self) -> list[Snippet]:
        """Return up to latest_limit live snippets ordered by ascending id.

        The result is streamed and closed on every exit path; any failure
        discards the rows read so far.
        """
        stmt = (
            _SELECT_SNIPPET
            .where(snippets.c.expires > self._now())
            .order_by(snippets.c.id.asc())
            .limit(self._latest_limit)
        )
        try:
            async with self._session_factory() as session:
                result = await session.stream(stmt)
                try:
                    items = [Snippet.from_row(row) async for row in result.mappings()]
                finally:
                    await result.close()
        except _STORE_FAILURES as e:
            logger.error(f"Snippet listing failed: {type(e).__name__}: {e}", exc_info=True)
            raise StoreError("Failed to list latest snippets", operation="latest") from e
        return items


def get_repository() -> SnippetRepository:
    """Database-backed store wired to the process-wide engine and settings."""
    return SnippetRepository(latest_limit=get_settings().LATEST_LIMIT)
