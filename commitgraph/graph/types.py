"""Types for commit graph construction."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from commitgraph.constants import (
    DEFAULT_COLUMN_OFFSET,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_ROW_HEIGHT,
    DEFAULT_ROW_OFFSET,
)


class InvalidCommitError(ValueError):
    """A commit record violates the input preconditions of the graph builder."""


class BranchType(str, Enum):
    """Coarse classification of a branch name.

    Inherits from str so it's JSON-serializable automatically.
    """

    MAIN = "main"
    DEVELOP = "develop"
    FEATURE = "feature"
    HOTFIX = "hotfix"
    BUGFIX = "bugfix"
    RELEASE = "release"
    OTHER = "other"


def parse_date(value: Any) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) or epoch seconds into a datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidCommitError(f"Unparsable commit date: {value!r}") from e
    raise InvalidCommitError(f"Unsupported commit date type: {type(value).__name__}")


@dataclass(frozen=True)
class Author:
    """Commit author as reported by the commit source."""

    name: str
    email: str
    avatar_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Author":
        return cls(
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            avatar_url=data.get("avatar_url") or data.get("avatarUrl"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email, "avatar_url": self.avatar_url}


@dataclass(frozen=True)
class CommitRecord:
    """An immutable commit as supplied by the caller.

    ``branch`` lists every branch the commit is affiliated with; the first
    entry is the primary branch. ``parents`` may reference shas that are not
    part of the visible commit set.
    """

    sha: str
    parents: tuple[str, ...]
    branch: tuple[str, ...]
    author: Author
    date: datetime
    message: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence from callers, store tuples
        object.__setattr__(self, "parents", tuple(self.parents))
        object.__setattr__(self, "branch", tuple(self.branch))

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommitRecord":
        """Build a record from an API-shaped dict.

        Parents may be plain shas or objects carrying a ``sha`` key. A single
        branch name given as a string is treated as a one-element list.
        """
        if not isinstance(data, dict):
            raise InvalidCommitError(f"Commit must be an object, got {type(data).__name__}")
        if "sha" not in data:
            raise InvalidCommitError(f"Commit is missing 'sha': {data!r}")

        parents: list[str] = []
        for parent in data.get("parents") or []:
            if isinstance(parent, dict):
                if "sha" not in parent:
                    raise InvalidCommitError(f"Parent of {data['sha']} is missing 'sha'")
                parents.append(str(parent["sha"]))
            else:
                parents.append(str(parent))

        branches = data.get("branch") or []
        if isinstance(branches, str):
            branches = [branches]

        author_data = data.get("author") or {}
        if isinstance(author_data, str):
            author_data = {"name": author_data}

        if "date" not in data:
            raise InvalidCommitError(f"Commit {data['sha']} is missing 'date'")

        return cls(
            sha=str(data["sha"]),
            parents=tuple(parents),
            branch=tuple(str(b) for b in branches),
            author=Author.from_dict(author_data),
            date=parse_date(data["date"]),
            message=str(data.get("message") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sha": self.sha,
            "parents": list(self.parents),
            "branch": list(self.branch),
            "author": self.author.to_dict(),
            "date": self.date.isoformat(),
            "message": self.message,
        }


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel constants turning (column, row) into coordinates."""

    column_width: float = DEFAULT_COLUMN_WIDTH
    column_offset: float = DEFAULT_COLUMN_OFFSET
    row_height: float = DEFAULT_ROW_HEIGHT
    row_offset: float = DEFAULT_ROW_OFFSET

    def x_for(self, column: int) -> float:
        return column * self.column_width + self.column_offset

    def y_for(self, row: int) -> float:
        return row * self.row_height + self.row_offset


DEFAULT_LAYOUT = LayoutConfig()


@dataclass
class GraphNode:
    """A visible commit with its layout position."""

    commit: CommitRecord
    x: float
    y: float
    column: int
    color: str
    row: int

    @property
    def sha(self) -> str:
        return self.commit.sha

    def to_dict(self) -> dict[str, Any]:
        return {
            "sha": self.commit.sha,
            "x": self.x,
            "y": self.y,
            "column": self.column,
            "row": self.row,
            "color": self.color,
        }


@dataclass(frozen=True)
class GraphEdge:
    """A rendered child -> parent connection."""

    source_sha: str  # child
    target_sha: str  # parent
    is_merge: bool
    is_virtual: bool = False
    is_cross_branch: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "sourceSha": self.source_sha,
            "targetSha": self.target_sha,
            "isMerge": self.is_merge,
            "isVirtual": self.is_virtual,
            "isCrossBranch": self.is_cross_branch,
        }


@dataclass(frozen=True)
class BranchMeta:
    """Legend/sidebar entry for a branch."""

    name: str
    column: int
    type: BranchType
    color: str
    priority: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "column": self.column,
            "type": self.type.value,
            "color": self.color,
            "priority": self.priority,
        }


@dataclass
class CommitGraph:
    """Everything the rendering layer needs for one set of inputs."""

    nodes: list[GraphNode] = field(default_factory=list)
    commit_map: dict[str, GraphNode] = field(default_factory=dict)
    edges: list[GraphEdge] = field(default_factory=list)
    branch_list: list[BranchMeta] = field(default_factory=list)
    virtual_parents: dict[str, str] = field(default_factory=dict)
    column_assignments: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready projection for renderers."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "branches": [meta.to_dict() for meta in self.branch_list],
            "virtualParents": dict(self.virtual_parents),
        }
