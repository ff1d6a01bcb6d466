"""Shared fixtures: real git repositories with commits at fixed times."""

import os
import tempfile
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from git import Repo

CST = timezone(timedelta(hours=8))

# 2024-01-01 is a Monday
SAMPLE_COMMITS = [
    (datetime(2024, 1, 1, 10, 0, tzinfo=CST), "Add login form"),
    (datetime(2024, 1, 1, 20, 30, tzinfo=CST), "Fix session timeout"),
    (datetime(2024, 1, 2, 8, 59, tzinfo=CST), "Early hotfix"),
    (datetime(2024, 1, 2, 17, 59, tzinfo=CST), "Update docs | add examples"),
    (datetime(2024, 1, 6, 11, 0, tzinfo=CST), "Weekend refactor"),
]


def commit_at(repo: Repo, when: datetime, message: str) -> str:
    """Create a commit whose author and committer dates are `when`."""
    project_path = Path(repo.working_tree_dir)
    notes = project_path / "notes.txt"
    with notes.open("a") as f:
        f.write(f"{when.isoformat()} {message}\n")
    repo.index.add(["notes.txt"])
    commit = repo.index.commit(message, author_date=when, commit_date=when)
    return commit.hexsha


@pytest.fixture
def temp_git_project():
    """Create a temporary git project with the sample commits."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_path = Path(temp_dir)
        repo = Repo.init(project_path)

        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")

        for when, message in SAMPLE_COMMITS:
            commit_at(repo, when, message)

        yield project_path


@pytest.fixture
def empty_git_project():
    """Create a git repository with no commits."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_path = Path(temp_dir)
        Repo.init(project_path)
        yield project_path


@pytest.fixture
def plain_directory():
    """Create a directory that is not inside a git repository."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def sample_commits():
    """(timestamp, message) pairs committed by temp_git_project, oldest first."""
    return SAMPLE_COMMITS


def commit_raw_message(repo: Repo, when: datetime, message: bytes) -> str:
    """Create a commit on HEAD whose message is stored as the given bytes."""
    message_file = Path(repo.git_dir) / "RAW_COMMIT_MSG"
    message_file.write_bytes(message)
    git_date = when.strftime("%Y-%m-%d %H:%M:%S %z")
    sha = repo.git.commit_tree(
        repo.head.commit.tree.hexsha,
        "-p",
        repo.head.commit.hexsha,
        "-F",
        str(message_file),
        env={"GIT_AUTHOR_DATE": git_date, "GIT_COMMITTER_DATE": git_date},
    )
    repo.git.update_ref("HEAD", sha)
    return sha


@pytest.fixture
def raw_message_commit():
    """Factory for commits whose message bytes are written as given."""
    return commit_raw_message


@pytest.fixture
def utc_local_timezone():
    """Run the test with the process timezone set to UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    saved = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if saved is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = saved
    time.tzset()
