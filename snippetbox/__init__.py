"""snippetbox: data access for expiring text snippets."""

__version__ = "1.0.0"
