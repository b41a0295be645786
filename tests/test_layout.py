"""Tests for graph assembly: nodes, coordinates and the branch legend."""

import pytest

from commitgraph.graph.layout import build_branch_list, build_commit_graph
from commitgraph.graph.types import BranchType, InvalidCommitError, LayoutConfig


class TestNodes:
    """Coordinates, columns and colors"""

    def test_linear_main_history(self, make_commit):
        commits = [
            make_commit("c1", 1),
            make_commit("c3", 3, parents=["c2"]),
            make_commit("c2", 2, parents=["c1"]),
        ]
        graph = build_commit_graph(commits)

        assert [n.sha for n in graph.nodes] == ["c3", "c2", "c1"]
        assert [n.column for n in graph.nodes] == [0, 0, 0]
        assert [n.row for n in graph.nodes] == [0, 1, 2]
        assert len(graph.edges) == 2
        assert graph.virtual_parents == {}

    def test_default_coordinates(self, make_commit):
        commits = [
            make_commit("f", 2, branch=["feature/x"]),
            make_commit("m", 1, branch=["main"]),
        ]
        graph = build_commit_graph(commits)
        feature, main = graph.nodes
        assert (feature.x, feature.y) == (30, 20)
        assert (main.x, main.y) == (55, 60)

    def test_custom_layout(self, make_commit):
        layout = LayoutConfig(column_width=100, column_offset=0, row_height=10, row_offset=5)
        commits = [make_commit("b", 2, branch=["dev"]), make_commit("a", 1, branch=["main"])]
        graph = build_commit_graph(commits, layout=layout)
        assert [(n.x, n.y) for n in graph.nodes] == [(0, 5), (100, 15)]

    def test_node_color_is_primary_branch_color(self, make_commit):
        commits = [make_commit("a", 1, branch=["main", "feature/x"])]
        assert build_commit_graph(commits, dark_mode=True).nodes[0].color == "#3b82f6"
        assert build_commit_graph(commits).nodes[0].color == "#2563eb"

    def test_node_references_source_commit(self, make_commit):
        record = make_commit("a", 1)
        graph = build_commit_graph([record])
        assert graph.nodes[0].commit is record
        assert graph.commit_map["a"] is graph.nodes[0]

    def test_unknown_bucket(self, make_commit):
        commits = [make_commit("a", 2, branch=["main"]), make_commit("b", 1, branch=[])]
        graph = build_commit_graph(commits)
        assert graph.commit_map["b"].column == 1
        assert [m.name for m in graph.branch_list] == ["main", "unknown"]
        assert graph.branch_list[1].type == BranchType.OTHER

    def test_filters_apply_before_layout(self, make_commit):
        commits = [
            make_commit("a", 3, branch=["main"], author="Grace"),
            make_commit("b", 2, branch=["feature/x"], author="Alan"),
            make_commit("c", 1, branch=["main"], author="Grace"),
        ]
        graph = build_commit_graph(commits, author_filter="grace")
        assert [n.sha for n in graph.nodes] == ["a", "c"]
        assert [n.row for n in graph.nodes] == [0, 1]
        assert graph.column_assignments == {"main": 0}


class TestBranchList:
    """Legend ordering"""

    def test_sorted_by_priority_then_name(self):
        columns = {"feature/b": 0, "zeta": 1, "feature/a": 2, "develop": 3, "main": 4, "release/1": 5}
        names = [meta.name for meta in build_branch_list(columns)]
        assert names == ["main", "develop", "release/1", "feature/a", "feature/b", "zeta"]

    def test_entries_carry_metadata(self):
        (meta,) = build_branch_list({"Release/2.0": 3}, dark_mode=True)
        assert meta.column == 3
        assert meta.type == BranchType.RELEASE
        assert meta.priority == 2
        assert meta.color.startswith("#")

    def test_each_branch_once(self, make_commit):
        commits = [make_commit(str(i), -i, branch=["main"]) for i in range(5)]
        graph = build_commit_graph(commits)
        assert [m.name for m in graph.branch_list] == ["main"]

    def test_secondary_affiliations_not_listed(self, make_commit):
        commits = [make_commit("a", 1, branch=["main", "develop"])]
        assert [m.name for m in build_commit_graph(commits).branch_list] == ["main"]


class TestBuildCommitGraph:
    """Whole pipeline"""

    def test_empty_input(self):
        graph = build_commit_graph([])
        assert graph.nodes == []
        assert graph.edges == []
        assert graph.branch_list == []
        assert graph.virtual_parents == {}

    def test_deterministic(self, make_commit):
        commits = [
            make_commit("F2", 3, branch=["feature/x"], parents=["gone"]),
            make_commit("F1", 2, branch=["feature/x"], parents=["gone"]),
            make_commit("D1", 1, branch=["develop"]),
            make_commit("M1", 0, branch=["main"]),
        ]
        first = build_commit_graph(commits, "", "", True)
        second = build_commit_graph(commits, "", "", True)
        assert first.nodes == second.nodes
        assert first.branch_list == second.branch_list
        assert first.virtual_parents == second.virtual_parents
        assert first.to_dict() == second.to_dict()

    def test_invalid_input_raises(self, make_commit):
        with pytest.raises(InvalidCommitError):
            build_commit_graph([make_commit("a", 1), make_commit("a", 2)])

    def test_to_dict_shape(self, make_commit):
        commits = [make_commit("b", 2, parents=["a"]), make_commit("a", 1)]
        data = build_commit_graph(commits).to_dict()
        assert data["nodes"][0] == {"sha": "b", "x": 30, "y": 20, "column": 0, "row": 0, "color": "#2563eb"}
        assert data["edges"] == [
            {"sourceSha": "b", "targetSha": "a", "isMerge": False, "isVirtual": False, "isCrossBranch": False}
        ]
        assert data["branches"] == [
            {"name": "main", "column": 0, "type": "main", "color": "#2563eb", "priority": 0}
        ]
        assert data["virtualParents"] == {}
