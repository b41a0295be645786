"""Graph assembly: nodes, edges and the branch legend for one set of inputs."""

import logging
from collections.abc import Mapping, Sequence

from commitgraph.graph.branches import branch_sort_key, classify_branch, priority_of
from commitgraph.graph.colors import branch_color
from commitgraph.graph.columns import assign_columns, primary_branch
from commitgraph.graph.edges import build_edges
from commitgraph.graph.filters import filter_commits, validate_commits
from commitgraph.graph.types import (
    DEFAULT_LAYOUT,
    BranchMeta,
    CommitGraph,
    CommitRecord,
    GraphNode,
    LayoutConfig,
)
from commitgraph.graph.virtual_parents import resolve_virtual_parents

logger = logging.getLogger(__name__)


def build_nodes(
    commits: Sequence[CommitRecord],
    columns: Mapping[str, int],
    dark_mode: bool = False,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> list[GraphNode]:
    """One node per commit, positioned by primary-branch column and row."""
    colors: dict[str, str] = {}
    nodes: list[GraphNode] = []

    for row, commit in enumerate(commits):
        branch_name = primary_branch(commit)
        column = columns[branch_name]
        if branch_name not in colors:
            colors[branch_name] = branch_color(branch_name, dark_mode)

        nodes.append(
            GraphNode(
                commit=commit,
                x=layout.x_for(column),
                y=layout.y_for(row),
                column=column,
                color=colors[branch_name],
                row=row,
            )
        )
    return nodes


def build_branch_list(columns: Mapping[str, int], dark_mode: bool = False) -> list[BranchMeta]:
    """Legend entries, main first, then develop, release, hotfix, bugfix, feature, other."""
    branch_list = []
    for name, column in columns.items():
        branch_type = classify_branch(name)
        branch_list.append(
            BranchMeta(
                name=name,
                column=column,
                type=branch_type,
                color=branch_color(name, dark_mode),
                priority=priority_of(branch_type),
            )
        )

    branch_list.sort(key=lambda meta: branch_sort_key(meta.name))
    return branch_list


def build_commit_graph(
    commits: Sequence[CommitRecord],
    branch_filter: str | None = None,
    author_filter: str | None = None,
    dark_mode: bool = False,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> CommitGraph:
    """Run the whole pipeline.

    Pure function of its arguments: the same inputs always produce an equal
    graph, so callers can cache on them. Commits are validated first.

    Raises:
        InvalidCommitError: if the input has duplicate shas or non-datetime dates.
    """
    validate_commits(commits)

    ordered = filter_commits(commits, branch_filter, author_filter)
    columns = assign_columns(ordered)
    nodes = build_nodes(ordered, columns, dark_mode, layout)
    commit_map = {node.commit.sha: node for node in nodes}
    virtual_parents = resolve_virtual_parents(ordered, commit_map)
    edges = build_edges(nodes, commit_map, virtual_parents, layout.column_width)
    branch_list = build_branch_list(columns, dark_mode)

    logger.debug(
        "Built graph: %d nodes, %d edges, %d branches, %d virtual parents",
        len(nodes),
        len(edges),
        len(branch_list),
        len(virtual_parents),
    )
    return CommitGraph(
        nodes=nodes,
        commit_map=commit_map,
        edges=edges,
        branch_list=branch_list,
        virtual_parents=virtual_parents,
        column_assignments=columns,
    )
