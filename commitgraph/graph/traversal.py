"""Lookups used for path and branch highlighting."""

from collections import deque
from collections.abc import Iterable, Mapping

from commitgraph.constants import DEFAULT_ANCESTOR_MAX_DEPTH
from commitgraph.graph.edges import parents_to_render
from commitgraph.graph.types import GraphNode


def find_ancestors(
    sha: str,
    commit_map: Mapping[str, GraphNode],
    virtual_parents: Mapping[str, str],
    max_depth: int = DEFAULT_ANCESTOR_MAX_DEPTH,
) -> set[str]:
    """All commits reachable from ``sha`` along rendered edges.

    Follows the same parent selection as the edge list, so virtual parents
    count only where no real parent is in view. Stops ``max_depth`` hops
    out. The starting commit itself is not included.
    """
    ancestors: set[str] = set()
    visited: set[str] = set()
    queue: deque[tuple[str, int]] = deque([(sha, 0)])

    while queue:
        current, depth = queue.popleft()
        if depth >= max_depth or current in visited:
            continue
        visited.add(current)

        node = commit_map.get(current)
        if node is None:
            continue

        parent_shas, _ = parents_to_render(node, commit_map, virtual_parents)
        for parent_sha in parent_shas:
            ancestors.add(parent_sha)
            queue.append((parent_sha, depth + 1))

    return ancestors


def commits_in_branch(branch_name: str, nodes: Iterable[GraphNode]) -> set[str]:
    """Shas of every node affiliated with the branch, primary or not."""
    return {node.commit.sha for node in nodes if branch_name in node.commit.branch}


def branch_lines(
    sha: str, commit_map: Mapping[str, GraphNode], nodes: Iterable[GraphNode]
) -> set[str]:
    """Commits sharing the primary branch of ``sha``."""
    node = commit_map.get(sha)
    if node is None or not node.commit.branch:
        return set()
    return commits_in_branch(node.commit.branch[0], nodes)
