"""Tests for loading commit records from a local repository."""

import pygit2
import pytest

from commitgraph.git_backend.repository import CommitSource
from commitgraph.graph.layout import build_commit_graph

BASE_TIME = 1_700_000_000


class RepoBuilder:
    """Creates commits with fixed timestamps in a throwaway repository."""

    def __init__(self, path) -> None:
        self.repo = pygit2.init_repository(str(path))
        self.tree = self.repo.TreeBuilder().write()

    def commit(self, message: str, minutes: int, parents: list[pygit2.Oid] | None = None) -> pygit2.Oid:
        sig = pygit2.Signature("Ada Lovelace", "ada@example.com", BASE_TIME + minutes * 60, 0)
        return self.repo.create_commit(None, sig, sig, message, self.tree, parents or [])

    def branch(self, name: str, oid: pygit2.Oid) -> None:
        self.repo.branches.local.create(name, self.repo[oid])


@pytest.fixture
def builder(tmp_path):
    return RepoBuilder(tmp_path / "repo")


class TestCommitSource:
    """pygit2-backed loading"""

    def test_not_a_repository(self, tmp_path):
        with pytest.raises(ValueError):
            CommitSource(str(tmp_path))

    def test_branch_affiliations(self, builder):
        m1 = builder.commit("m1", 0)
        m2 = builder.commit("m2", 1, [m1])
        f1 = builder.commit("f1", 2, [m1])
        builder.branch("main", m2)
        builder.branch("feature/x", f1)

        commits = {c.sha: c for c in CommitSource(builder.repo.workdir).load_commits()}

        assert set(commits) == {str(m1), str(m2), str(f1)}
        assert commits[str(m1)].branch == ("main", "feature/x")
        assert commits[str(m2)].branch == ("main",)
        assert commits[str(f1)].branch == ("feature/x",)
        assert commits[str(f1)].parents == (str(m1),)
        assert commits[str(f1)].message == "f1"
        assert commits[str(f1)].author.email == "ada@example.com"
        assert commits[str(f1)].date.timestamp() == BASE_TIME + 120

    def test_trunk_walked_first(self, builder):
        m1 = builder.commit("m1", 0)
        builder.branch("aaa", m1)
        builder.branch("main", m1)

        source = CommitSource(builder.repo.workdir)
        assert source.local_branches() == ["main", "aaa"]
        (record,) = source.load_commits()
        assert record.branch == ("main", "aaa")

    def test_limit_truncates_history(self, builder):
        c1 = builder.commit("c1", 0)
        c2 = builder.commit("c2", 1, [c1])
        c3 = builder.commit("c3", 2, [c2])
        builder.branch("main", c3)

        commits = CommitSource(builder.repo.workdir).load_commits(limit=2)
        assert [c.sha for c in commits] == [str(c3), str(c2)]
        assert commits[-1].parents == (str(c1),)

    def test_truncated_branch_is_reconnected(self, builder):
        m1 = builder.commit("m1", 0)
        m2 = builder.commit("m2", 1, [m1])
        f1 = builder.commit("f1", 2, [m1])
        f2 = builder.commit("f2", 3, [f1])
        builder.branch("main", m2)
        builder.branch("hotfix/x", f2)

        commits = CommitSource(builder.repo.workdir).load_commits(limit=1)
        graph = build_commit_graph(commits)

        assert [n.sha for n in graph.nodes] == [str(f2), str(m2)]
        assert graph.virtual_parents == {str(f2): str(m2)}
