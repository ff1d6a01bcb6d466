"""Commit retrieval from a git repository."""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import git
from git import Repo

from git_worktime.models.commit import Commit

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 1000
DEFAULT_TIMEOUT = 30
LOG_FORMAT = "%H|%ai|%s"
FIELD_SEPARATOR = "|"

# git prints %ai as "2024-01-06 10:00:00 +0800"
GIT_ISO_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

PROGRESS_EVERY = 200


def parse_git_date(date_str: str) -> datetime:
    """Parse a git author date, raising ValueError if it is not a date."""
    text = date_str.strip()
    try:
        return datetime.strptime(text, GIT_ISO_DATE_FORMAT)
    except ValueError:
        return datetime.fromisoformat(text)


def parse_log_output(output: str, local_time: bool = False) -> List[Commit]:
    """Parse `hash|date|message` lines into commits.

    Malformed lines and unparseable dates are skipped with a warning.
    """
    lines = output.strip().splitlines()
    logger.debug("Parsing %d raw log lines", len(lines))

    commits: List[Commit] = []
    for index, line in enumerate(lines):
        if index and index % PROGRESS_EVERY == 0:
            logger.debug(
                "Parse progress: %d/%d (%d%%)",
                index,
                len(lines),
                round(index / len(lines) * 100),
            )

        parts = line.split(FIELD_SEPARATOR)
        if len(parts) < 2:
            logger.warning("Skipping malformed log line: %s...", line[:50])
            continue

        commit_hash, date_str, *message_parts = parts
        try:
            timestamp = parse_git_date(date_str)
        except ValueError:
            logger.warning("Skipping commit with unparseable date: %s", date_str)
            continue

        if local_time:
            timestamp = timestamp.astimezone()

        commits.append(
            Commit(
                hash=commit_hash,
                timestamp=timestamp,
                message=FIELD_SEPARATOR.join(message_parts),
                raw_date=date_str,
            )
        )

    return commits


class CommitLog:
    """Reads formatted commit history from a git repository."""

    def __init__(self, path: Path = Path("."), timeout: int = DEFAULT_TIMEOUT):
        self.path = Path(path)
        self.timeout = timeout
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Get the repository, searching parent directories."""
        if self._repo is None:
            self._repo = Repo(self.path, search_parent_directories=True)
        return self._repo

    def exists(self) -> bool:
        """Check if the path is inside a git repository."""
        try:
            self.repo
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            return False
        return True

    def read_log(self, limit: int = DEFAULT_LIMIT) -> str:
        """Run git log and return its output as text.

        Bytes that are not valid UTF-8 become U+FFFD. Raises git.exc.GitError
        subclasses on failure or timeout.
        """
        output = self.repo.git.log(
            f"--max-count={limit}",
            f"--pretty=format:{LOG_FORMAT}",
            kill_after_timeout=self.timeout,
            stdout_as_string=False,
        )
        return output.decode("utf-8", "replace")

    def fetch(
        self, limit: int = DEFAULT_LIMIT, local_time: bool = False
    ) -> List[Commit]:
        """Fetch and parse up to `limit` commits, newest first.

        Returns an empty list when the history cannot be read.
        """
        logger.info("Checking git repository at %s", self.path)
        if not self.exists():
            logger.error("Not a git repository: %s", self.path.resolve())
            return []

        logger.info("Reading the last %d commits", limit)
        try:
            output = self.read_log(limit)
        except git.exc.GitCommandError as e:
            logger.error("git log failed: %s", (e.stderr or str(e)).strip())
            return []
        except git.exc.GitError as e:
            logger.error("Could not run git: %s", e)
            return []

        if not output.strip():
            logger.warning("No commits found")
            return []

        commits = parse_log_output(output, local_time=local_time)
        logger.info("Parsed %d commits", len(commits))
        return commits
