"""Aggregate statistics over parsed commits."""

import logging
from datetime import date
from typing import List, Set

from pydantic import BaseModel, Field

from git_worktime.core.worktime import DEFAULT_WORK_HOURS, WorkHours, is_work_time
from git_worktime.models.commit import Commit

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


def percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100


class CommitAnalysis(BaseModel):
    """Commits partitioned by work time, with hour and weekday histograms."""

    work_hours: WorkHours
    work_time: List[Commit] = Field(default_factory=list)
    non_work_time: List[Commit] = Field(default_factory=list)
    non_work_time_days: Set[date] = Field(default_factory=set)
    hourly: List[int] = Field(default_factory=lambda: [0] * 24)
    weekday: List[int] = Field(default_factory=lambda: [0] * 7)

    @property
    def total(self) -> int:
        return len(self.work_time) + len(self.non_work_time)

    @property
    def non_work_time_percentage(self) -> float:
        return percentage(len(self.non_work_time), self.total)

    def share(self, count: int) -> float:
        """Percentage of all analyzed commits represented by count."""
        return percentage(count, self.total)


def analyze_commits(
    commits: List[Commit], work_hours: WorkHours = DEFAULT_WORK_HOURS
) -> CommitAnalysis:
    """Classify commits and build the hourly and weekday distributions."""
    analysis = CommitAnalysis(work_hours=work_hours)

    for processed, commit in enumerate(commits, start=1):
        if processed % PROGRESS_EVERY == 0:
            logger.debug(
                "Analysis progress: %d/%d (%d%%)",
                processed,
                len(commits),
                round(processed / len(commits) * 100),
            )

        if is_work_time(commit.timestamp, work_hours):
            analysis.work_time.append(commit)
        else:
            analysis.non_work_time.append(commit)
            analysis.non_work_time_days.add(commit.day)

        analysis.hourly[commit.timestamp.hour] += 1
        analysis.weekday[commit.timestamp.weekday()] += 1

    return analysis
