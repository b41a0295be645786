"""Commit history graph construction: layout, branch colors and virtual parents."""

from commitgraph.graph import (
    Author,
    BranchMeta,
    BranchType,
    CommitGraph,
    CommitRecord,
    GraphEdge,
    GraphNode,
    InvalidCommitError,
    LayoutConfig,
    build_commit_graph,
)

__all__ = [
    "Author",
    "BranchMeta",
    "BranchType",
    "CommitGraph",
    "CommitRecord",
    "GraphEdge",
    "GraphNode",
    "InvalidCommitError",
    "LayoutConfig",
    "build_commit_graph",
]
