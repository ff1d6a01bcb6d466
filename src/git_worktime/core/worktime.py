"""Work-hours configuration and the work-time predicate."""

from datetime import datetime
from typing import FrozenSet

from pydantic import BaseModel, Field, model_validator

DEFAULT_START_HOUR = 9
DEFAULT_END_HOUR = 18

# datetime.weekday() numbering, Monday == 0
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WORK_DAYS = frozenset(range(5))


class WorkHours(BaseModel):
    """Work-hours window: weekdays in work_days, hours in [start, end)."""

    start: int = Field(default=DEFAULT_START_HOUR, ge=0, le=23)
    end: int = Field(default=DEFAULT_END_HOUR, ge=1, le=24)
    work_days: FrozenSet[int] = WORK_DAYS

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_window(self) -> "WorkHours":
        if self.start >= self.end:
            raise ValueError(
                f"start hour ({self.start}) must be before end hour ({self.end})"
            )
        if not self.work_days <= set(range(7)):
            raise ValueError("work days must be weekday numbers 0-6")
        return self

    def is_work_day(self, weekday: int) -> bool:
        return weekday in self.work_days

    def is_work_hour(self, hour: int) -> bool:
        return self.start <= hour < self.end

    def describe(self) -> str:
        """Human readable echo of the configuration, e.g. 'Mon-Fri 9:00-18:00'."""
        days = sorted(self.work_days)
        if days and days == list(range(days[0], days[-1] + 1)):
            day_text = f"{WEEKDAY_NAMES[days[0]][:3]}-{WEEKDAY_NAMES[days[-1]][:3]}"
        else:
            day_text = ",".join(WEEKDAY_NAMES[d][:3] for d in days)
        return f"{day_text} {self.start}:00-{self.end}:00"


DEFAULT_WORK_HOURS = WorkHours()


def is_work_time(
    timestamp: datetime, work_hours: WorkHours = DEFAULT_WORK_HOURS
) -> bool:
    """Return True if timestamp falls on a work day inside work hours.

    The timestamp is read on its own clock: an aware datetime is judged by
    its wall time in its own offset, not converted first.
    """
    return work_hours.is_work_day(timestamp.weekday()) and work_hours.is_work_hour(
        timestamp.hour
    )


def weekday_name(timestamp: datetime) -> str:
    return WEEKDAY_NAMES[timestamp.weekday()]
