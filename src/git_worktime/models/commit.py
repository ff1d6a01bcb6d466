"""Commit model for parsed git log entries."""

from datetime import date, datetime

from pydantic import BaseModel


class Commit(BaseModel):
    """Represents a single commit read from git log."""

    hash: str
    timestamp: datetime
    message: str = ""
    raw_date: str

    @property
    def short_hash(self) -> str:
        return self.hash[:8]

    @property
    def day(self) -> date:
        """Calendar date of the commit on its own clock."""
        return self.timestamp.date()
