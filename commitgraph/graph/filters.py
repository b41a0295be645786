"""Input validation, filtering and chronological ordering of commits."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from commitgraph.graph.types import CommitRecord, InvalidCommitError

logger = logging.getLogger(__name__)


def commit_timestamp(commit: CommitRecord) -> float:
    """POSIX timestamp of a commit date. Naive datetimes are read as UTC."""
    date = commit.date
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.timestamp()


def validate_commits(commits: Iterable[CommitRecord]) -> None:
    """Reject input the graph builder cannot order or index.

    Raises:
        InvalidCommitError: on an empty or duplicate sha, or a date that is
            not a datetime.
    """
    seen: set[str] = set()
    for commit in commits:
        if not commit.sha:
            raise InvalidCommitError("Commit has an empty sha")
        if commit.sha in seen:
            raise InvalidCommitError(f"Duplicate commit sha: {commit.sha}")
        if not isinstance(commit.date, datetime):
            raise InvalidCommitError(
                f"Commit {commit.sha} has a {type(commit.date).__name__} date, expected datetime"
            )
        seen.add(commit.sha)


def matches_branch(commit: CommitRecord, branch_filter: str) -> bool:
    return any(branch_filter in name for name in commit.branch)


def matches_author(commit: CommitRecord, author_filter: str) -> bool:
    needle = author_filter.lower()
    return needle in commit.author.name.lower() or needle in commit.author.email.lower()


def sort_newest_first(commits: Iterable[CommitRecord]) -> list[CommitRecord]:
    """New list sorted by date descending; equal dates keep their input order."""
    return sorted(commits, key=lambda c: -commit_timestamp(c))


def filter_commits(
    commits: Sequence[CommitRecord],
    branch_filter: str | None = None,
    author_filter: str | None = None,
) -> list[CommitRecord]:
    """Apply the optional branch/author substring filters and sort newest first.

    The branch filter matches any branch affiliation (case-sensitive); the
    author filter matches name or email case-insensitively. Empty filters
    are treated as absent. The input sequence is never modified.
    """
    result: Iterable[CommitRecord] = commits
    if branch_filter:
        result = [c for c in result if matches_branch(c, branch_filter)]
    if author_filter:
        result = [c for c in result if matches_author(c, author_filter)]

    ordered = sort_newest_first(result)
    logger.debug(
        "Filtered %d of %d commits (branch=%r, author=%r)",
        len(ordered),
        len(commits),
        branch_filter,
        author_filter,
    )
    return ordered
