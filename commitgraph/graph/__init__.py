"""Commit graph construction components."""

from commitgraph.graph.branches import classify_branch, priority_of, source_branch_of
from commitgraph.graph.colors import branch_color
from commitgraph.graph.layout import build_commit_graph
from commitgraph.graph.traversal import branch_lines, commits_in_branch, find_ancestors
from commitgraph.graph.types import (
    DEFAULT_LAYOUT,
    Author,
    BranchMeta,
    BranchType,
    CommitGraph,
    CommitRecord,
    GraphEdge,
    GraphNode,
    InvalidCommitError,
    LayoutConfig,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "Author",
    "BranchMeta",
    "BranchType",
    "CommitGraph",
    "CommitRecord",
    "GraphEdge",
    "GraphNode",
    "InvalidCommitError",
    "LayoutConfig",
    "branch_color",
    "branch_lines",
    "build_commit_graph",
    "classify_branch",
    "commits_in_branch",
    "find_ancestors",
    "priority_of",
    "source_branch_of",
]
