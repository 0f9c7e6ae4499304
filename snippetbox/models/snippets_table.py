# snippetbox/models/snippets_table.py
# Table for stored text snippets with an expiry timestamp

from sqlalchemy import Table, Column, Integer, Text, TIMESTAMP, Index

from snippetbox.constants import SNIPPETS_TABLE
from snippetbox.db.base import metadata


snippets = Table(
    SNIPPETS_TABLE,
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('title', Text, nullable=False),
    Column('content', Text, nullable=False),
    Column('created', TIMESTAMP(timezone=True), nullable=False),
    Column('expires', TIMESTAMP(timezone=True), nullable=False),
    # Reads always filter on expiry
    Index('ix_snippets_expires', 'expires'),
)
