"""Edge selection between commits: real parents first, virtual as fallback."""

from collections.abc import Iterable, Mapping

from commitgraph.graph.types import DEFAULT_LAYOUT, GraphEdge, GraphNode


def parents_to_render(
    node: GraphNode,
    commit_map: Mapping[str, GraphNode],
    virtual_parents: Mapping[str, str],
) -> tuple[list[str], bool]:
    """Parent shas to draw for a node, and whether they are synthesized.

    Real parents that are in view always win; the virtual parent is only
    consulted when none of them resolves.
    """
    real = [sha for sha in node.commit.parents if sha in commit_map]
    if real:
        return real, False

    virtual = virtual_parents.get(node.commit.sha)
    if virtual is not None and virtual in commit_map:
        return [virtual], True
    return [], False


def is_cross_branch(node: GraphNode, parent: GraphNode, branch_spacing: float) -> bool:
    """True when the edge has to jump lanes (drawn angled instead of straight)."""
    return abs(node.x - parent.x) > branch_spacing / 2


def build_edges(
    nodes: Iterable[GraphNode],
    commit_map: Mapping[str, GraphNode],
    virtual_parents: Mapping[str, str],
    branch_spacing: float = DEFAULT_LAYOUT.column_width,
) -> list[GraphEdge]:
    """Materialize the child -> parent edge list in node order.

    ``is_merge`` comes from the commit's own parent list, not from how many
    edges end up drawn.
    """
    edges: list[GraphEdge] = []
    for node in nodes:
        parent_shas, is_virtual = parents_to_render(node, commit_map, virtual_parents)
        for parent_sha in parent_shas:
            parent = commit_map[parent_sha]
            edges.append(
                GraphEdge(
                    source_sha=node.commit.sha,
                    target_sha=parent_sha,
                    is_merge=node.commit.is_merge,
                    is_virtual=is_virtual,
                    is_cross_branch=is_cross_branch(node, parent, branch_spacing),
                )
            )
    return edges
