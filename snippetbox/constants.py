# snippetbox/constants.py
# Shared names and limits for the snippets store

SNIPPETS_TABLE: str = "snippets"

# Maximum number of rows returned by the "latest" listing
LATEST_SNIPPETS_LIMIT: int = 10
