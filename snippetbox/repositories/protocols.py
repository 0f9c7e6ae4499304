# snippetbox/repositories/protocols.py
# Contract shared by the database-backed store and its in-memory fake

from __future__ import annotations

from typing import Protocol, runtime_checkable

from snippetbox.models.snippet import Snippet


@runtime_checkable
class SnippetStore(Protocol):
    """Capability set consumed by the handler layer."""

    async def insert(self, title: str, content: str, expires_days: int) -> int:
        """Persist a snippet expiring in expires_days days and return its id."""
        ...

    async def get(self, snippet_id: int) -> Snippet:
        """Return the live snippet with this id or raise SnippetNotFoundError."""
        ...

    async def latest(self) -> list[Snippet]:
        """Return live snippets in ascending id order, at most one page."""
        ...
