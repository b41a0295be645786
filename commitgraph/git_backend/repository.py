"""
Commit records from a local git repository using pygit2
"""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pygit2

from commitgraph.constants import DEFAULT_COMMIT_LIMIT
from commitgraph.graph.branches import branch_sort_key
from commitgraph.graph.types import Author, CommitRecord

logger = logging.getLogger(__name__)


class CommitSource:
    """Materializes CommitRecords from a repository's local branches"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Open a repository, searching upwards from the cwd if no path is given"""
        if repo_path is None:
            repo_path = self._find_repo()

        try:
            self.repo = pygit2.Repository(repo_path)
        except (pygit2.GitError, KeyError) as e:
            # libgit2's "not found" surfaces as KeyError
            raise ValueError(f"Not a git repository: {repo_path}") from e

    def _find_repo(self) -> str:
        """Find git repository in current directory or parents"""
        current = Path.cwd()
        while current != current.parent:
            if (current / ".git").exists():
                return str(current)
            current = current.parent
        raise ValueError("Not in a git repository")

    def local_branches(self) -> list[str]:
        """Local branch names, trunk first, then by display priority and name"""
        return sorted(self.repo.branches.local, key=branch_sort_key)

    def load_commits(self, limit: int = DEFAULT_COMMIT_LIMIT) -> list[CommitRecord]:
        """Walk every local branch, newest first, up to ``limit`` commits each.

        A commit reachable from several branches lists all of them; the
        branch walked first (see ``local_branches``) becomes its primary
        branch. Parents beyond the limit stay referenced but are not loaded,
        which is what the virtual parent resolver repairs.
        """
        commits: dict[str, pygit2.Commit] = {}
        affiliations: dict[str, list[str]] = {}

        for branch_name in self.local_branches():
            branch = self.repo.branches.local[branch_name]
            tip = branch.peel(pygit2.Commit)

            for i, c in enumerate(self.repo.walk(tip.id, pygit2.enums.SortMode.TIME)):
                if i >= limit:
                    break
                oid = str(c.id)
                if oid not in commits:
                    commits[oid] = c
                    affiliations[oid] = []
                affiliations[oid].append(branch_name)

        logger.debug("Loaded %d commits from %s", len(commits), self.repo.path)
        return [_to_record(c, affiliations[oid]) for oid, c in commits.items()]


def _to_record(commit: pygit2.Commit, branches: list[str]) -> CommitRecord:
    tz = timezone(timedelta(minutes=commit.commit_time_offset))
    return CommitRecord(
        sha=str(commit.id),
        parents=tuple(str(p) for p in commit.parent_ids),
        branch=tuple(branches),
        author=Author(name=commit.author.name, email=commit.author.email),
        date=datetime.fromtimestamp(commit.commit_time, tz=tz),
        message=commit.message.strip(),
    )
