"""JSON report generation."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from git_worktime.core.analyzer import CommitAnalysis
from git_worktime.core.worktime import weekday_name
from git_worktime.models.report import NonWorkTimeCommit, Report

logger = logging.getLogger(__name__)

DEFAULT_REPORT_PATH = "commit-analysis-report.json"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_report(
    analysis: CommitAnalysis, generated_at: Optional[datetime] = None
) -> Report:
    """Build the report model from an analysis."""
    generated_at = generated_at or datetime.now()
    return Report(
        generated_at=generated_at.isoformat(timespec="seconds"),
        scope=f"last {analysis.total} commits",
        total_commits=analysis.total,
        work_time_commits=len(analysis.work_time),
        non_work_time_commits=len(analysis.non_work_time),
        non_work_time_days=len(analysis.non_work_time_days),
        non_work_time_percentage=f"{analysis.non_work_time_percentage:.2f}%",
        work_time_config=analysis.work_hours.describe(),
        non_work_time_details=[
            NonWorkTimeCommit(
                hash=commit.short_hash,
                timestamp=commit.timestamp.strftime(TIMESTAMP_FORMAT),
                weekday=weekday_name(commit.timestamp),
                message=commit.message,
            )
            for commit in analysis.non_work_time
        ],
    )


def write_report(report: Report, path: Path) -> bool:
    """Write the report as JSON. Returns False if the file can't be written."""
    path = Path(path)
    try:
        path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    except (OSError, ValueError) as e:
        logger.error("Failed to save report to %s: %s", path, e)
        return False
    logger.info("Report saved to %s", path)
    return True
