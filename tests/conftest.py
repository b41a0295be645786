"""Shared fixtures for commitgraph tests."""

from datetime import datetime, timedelta, timezone

import pytest

from commitgraph.graph.types import Author, CommitRecord

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def commit(
    sha: str,
    hour: float,
    branch: list[str] | None = None,
    parents: list[str] | None = None,
    author: str = "Ada Lovelace",
    email: str = "ada@example.com",
) -> CommitRecord:
    """Build a commit dated ``hour`` hours after the base date."""
    return CommitRecord(
        sha=sha,
        parents=tuple(parents or ()),
        branch=tuple(branch if branch is not None else ["main"]),
        author=Author(name=author, email=email),
        date=BASE_DATE + timedelta(hours=hour),
        message=f"Commit {sha}",
    )


@pytest.fixture
def make_commit():
    return commit
