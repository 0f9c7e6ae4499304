"""Snippet store implementations."""

from snippetbox.repositories.protocols import SnippetStore
from snippetbox.repositories.snippet_repository import SnippetRepository, get_repository
from snippetbox.repositories.in_memory_snippet_repository import InMemorySnippetRepository

__all__ = ["SnippetStore", "SnippetRepository", "InMemorySnippetRepository", "get_repository"]
