"""Column (lane) assignment per primary branch."""

from collections.abc import Iterable

from commitgraph.constants import UNKNOWN_BRANCH
from commitgraph.graph.types import CommitRecord


def primary_branch(commit: CommitRecord) -> str:
    """First branch affiliation, or the ``unknown`` bucket when there is none."""
    return commit.branch[0] if commit.branch else UNKNOWN_BRANCH


class ColumnAssigner:
    """Hands out dense column numbers in first-seen order.

    Branches seen earlier in the newest-first sequence get lower columns, so
    recently active branches end up on the left.
    """

    def __init__(self) -> None:
        self.assignments: dict[str, int] = {}

    def assign(self, branch_name: str) -> int:
        """Column for a branch, allocating the next one on first sight."""
        column = self.assignments.get(branch_name)
        if column is None:
            column = len(self.assignments)
            self.assignments[branch_name] = column
        return column


def assign_columns(commits: Iterable[CommitRecord]) -> dict[str, int]:
    """Map each distinct primary branch to its column."""
    assigner = ColumnAssigner()
    for commit in commits:
        assigner.assign(primary_branch(commit))
    return assigner.assignments
