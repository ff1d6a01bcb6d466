"""Data models for Git Worktime."""

from .commit import Commit
from .report import NonWorkTimeCommit, Report

__all__ = ["Commit", "NonWorkTimeCommit", "Report"]
