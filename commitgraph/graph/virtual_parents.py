"""Virtual parent resolution for commits whose history is cut off.

A commit fetched without its parents (shallow fetch, filters, a per-branch
limit) would otherwise float unconnected. Two repairs are applied:

1. Within a branch, a commit with no resolvable parent is linked to the next
   older commit carrying the same branch.
2. A branch whose oldest visible commit is still unconnected is attached to
   its source branch (see ``source_branch_of``) at the nearest commit at or
   before it in time: the fork point.

Every link points to a commit that is no newer and sits on a later row than
its child, so following virtual parents always terminates.
"""

import logging
from collections.abc import Mapping, Sequence

from commitgraph.graph.branches import SOURCE_BRANCH_ALIASES, classify_branch, source_branch_of
from commitgraph.graph.filters import commit_timestamp, sort_newest_first
from commitgraph.graph.types import CommitRecord, GraphNode

logger = logging.getLogger(__name__)


def has_resolvable_parent(commit: CommitRecord, commit_map: Mapping[str, GraphNode]) -> bool:
    """True if any real parent of the commit is part of the visible graph."""
    return any(parent_sha in commit_map for parent_sha in commit.parents)


def group_by_branch(commits: Sequence[CommitRecord]) -> dict[str, list[CommitRecord]]:
    """Group commits by every branch affiliation, each group newest first.

    A commit affiliated with several branches lands in each of their groups.
    """
    groups: dict[str, list[CommitRecord]] = {}
    for commit in commits:
        for branch_name in commit.branch:
            groups.setdefault(branch_name, []).append(commit)

    return {name: sort_newest_first(group) for name, group in groups.items()}


def _link_within_branches(
    groups: Mapping[str, list[CommitRecord]],
    commit_map: Mapping[str, GraphNode],
    virtual_parents: dict[str, str],
) -> None:
    for branch_name, group in groups.items():
        for newer, older in zip(group, group[1:]):
            if has_resolvable_parent(newer, commit_map):
                continue
            virtual_parents[newer.sha] = older.sha
            logger.debug("Linked %s -> %s within %s", newer.sha[:7], older.sha[:7], branch_name)


def _source_commits(
    groups: Mapping[str, list[CommitRecord]], source_name: str
) -> list[CommitRecord]:
    source = groups.get(source_name)
    if not source:
        alias = SOURCE_BRANCH_ALIASES.get(source_name)
        if alias is not None:
            source = groups.get(alias)
    return source or []


def find_fork_point(
    oldest: CommitRecord,
    source_commits: Sequence[CommitRecord],
    commit_map: Mapping[str, GraphNode],
) -> CommitRecord | None:
    """Nearest source-branch commit at or before ``oldest``.

    ``source_commits`` is newest first, so the first qualifying commit is
    the closest one. Candidates must sit below ``oldest`` in row order; for
    equal dates this keeps the stable input order as the tie-breaker.
    """
    oldest_time = commit_timestamp(oldest)
    oldest_node = commit_map.get(oldest.sha)
    oldest_row = oldest_node.row if oldest_node is not None else -1

    for candidate in source_commits:
        if candidate.sha == oldest.sha:
            continue
        if commit_timestamp(candidate) > oldest_time:
            continue
        candidate_node = commit_map.get(candidate.sha)
        if candidate_node is not None and candidate_node.row <= oldest_row:
            continue
        return candidate
    return None


def _link_fork_points(
    groups: Mapping[str, list[CommitRecord]],
    commit_map: Mapping[str, GraphNode],
    virtual_parents: dict[str, str],
) -> None:
    for branch_name, group in groups.items():
        if not group:
            continue

        source_name = source_branch_of(classify_branch(branch_name))
        if source_name is None:
            continue

        oldest = group[-1]
        if has_resolvable_parent(oldest, commit_map) or oldest.sha in virtual_parents:
            continue

        source = _source_commits(groups, source_name)
        if not source:
            logger.debug("No %s commits in view for %s, root left unconnected", source_name, branch_name)
            continue

        fork_point = find_fork_point(oldest, source, commit_map)
        if fork_point is None or fork_point.sha not in commit_map:
            logger.debug("No fork point for %s before %s", branch_name, oldest.sha[:7])
            continue

        virtual_parents[oldest.sha] = fork_point.sha
        logger.debug(
            "Forked %s at %s (%s -> %s)",
            branch_name,
            source_name,
            oldest.sha[:7],
            fork_point.sha[:7],
        )


def resolve_virtual_parents(
    commits: Sequence[CommitRecord], commit_map: Mapping[str, GraphNode]
) -> dict[str, str]:
    """Synthesize parent links for commits with no parent in view.

    Args:
        commits: Filtered commits, newest first.
        commit_map: sha -> node for every visible commit.

    Returns:
        Mapping of child sha -> synthesized parent sha. Commits that cannot be
        linked are simply absent.
    """
    groups = group_by_branch(commits)
    virtual_parents: dict[str, str] = {}

    _link_within_branches(groups, commit_map, virtual_parents)
    _link_fork_points(groups, commit_map, virtual_parents)

    logger.debug("Resolved %d virtual parents over %d branches", len(virtual_parents), len(groups))
    return virtual_parents
