"""In-memory implementation of SnippetStore."""

from __future__ import annotations

from datetime import timedelta

from snippetbox.clock import Clock, utc_now
from snippetbox.constants import LATEST_SNIPPETS_LIMIT
from snippetbox.errors import SnippetNotFoundError, StoreError
from snippetbox.models.snippet import Snippet, as_utc


class InMemorySnippetRepository:
    """Simple in-memory snippet store for tests of code that consumes a SnippetStore."""

    def __init__(self, clock: Clock = utc_now, latest_limit: int = LATEST_SNIPPETS_LIMIT) -> None:
        """Initialize repository."""
        if latest_limit < 1:
            raise ValueError("latest_limit must be >= 1")
        self._clock = clock
        self._latest_limit = latest_limit
        self._snippets: dict[int, Snippet] = {}
        self._next_id = 1

    def _now(self):
        return as_utc(self._clock())

    async def insert(self, title: str, content: str, expires_days: int) -> int:
        """Store a snippet and return its id."""
        created = self._now()
        try:
            expires = created + timedelta(days=expires_days)
        except OverflowError as e:
            raise StoreError("Failed to insert snippet", operation="insert") from e
        snippet = Snippet(
            id=self._next_id,
            title=title,
            content=content,
            created=created,
            expires=expires,
        )
        self._snippets[snippet.id] = snippet
        self._next_id += 1
        return snippet.id

    async def get(self, snippet_id: int) -> Snippet:
        """Get a live snippet by id."""
        snippet = self._snippets.get(snippet_id)
        if snippet is None or not snippet.is_live(self._now()):
            raise SnippetNotFoundError(snippet_id)
        return snippet

    async def latest(self) -> list[Snippet]:
        """Get live snippets, oldest id first."""
        now = self._now()
        live = [s for _, s in sorted(self._snippets.items()) if s.is_live(now)]
        return live[: self._latest_limit]
