from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Snippet(BaseModel):
    """One stored text item. Timestamps are timezone-aware UTC."""

    id: int
    title: str
    content: str
    created: datetime
    expires: datetime

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_validator("created", "expires")
    @classmethod
    def normalise_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    def is_live(self, now: datetime) -> bool:
        return self.expires > as_utc(now)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Snippet":
        """Build a Snippet from a result row, looking columns up by name."""
        return cls.model_validate(dict(row))


def as_utc(value: datetime) -> datetime:
    """Return value in UTC; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
