"""Report model written to the JSON output file."""

from typing import List

from pydantic import BaseModel


class NonWorkTimeCommit(BaseModel):
    """A commit made outside work hours, as listed in the report."""

    hash: str
    timestamp: str
    weekday: str
    message: str


class Report(BaseModel):
    """Summary of a commit analysis run."""

    generated_at: str
    scope: str
    total_commits: int
    work_time_commits: int
    non_work_time_commits: int
    non_work_time_days: int
    non_work_time_percentage: str
    work_time_config: str
    non_work_time_details: List[NonWorkTimeCommit] = []
