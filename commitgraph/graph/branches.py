"""Branch taxonomy: type, display priority and source branch inference.

The rules encode a fixed trunk-based convention (one trunk, one integration
branch, categorized work branches). Arbitrary branching models are not
supported.
"""

from dataclasses import dataclass

from commitgraph.graph.types import BranchType


@dataclass(frozen=True)
class BranchStyle:
    """Per-type data shared by the graph builder and renderers."""

    color_role: str
    priority: int
    display_weight: int
    source_branch: str | None


BRANCH_STYLES: dict[BranchType, BranchStyle] = {
    BranchType.MAIN: BranchStyle("trunk", 0, 700, None),
    BranchType.DEVELOP: BranchStyle("integration", 1, 600, "main"),
    BranchType.RELEASE: BranchStyle("work", 2, 500, "develop"),
    BranchType.HOTFIX: BranchStyle("work", 3, 500, "main"),
    BranchType.BUGFIX: BranchStyle("work", 4, 400, "develop"),
    BranchType.FEATURE: BranchStyle("work", 5, 400, "develop"),
    BranchType.OTHER: BranchStyle("work", 6, 400, "main"),
}

# Exact names, checked before prefixes
_EXACT_NAMES: dict[str, BranchType] = {
    "main": BranchType.MAIN,
    "master": BranchType.MAIN,
    "develop": BranchType.DEVELOP,
    "development": BranchType.DEVELOP,
}

# Order matters: first match wins
_PREFIXES: list[tuple[str, BranchType]] = [
    ("feature/", BranchType.FEATURE),
    ("feat/", BranchType.FEATURE),
    ("hotfix/", BranchType.HOTFIX),
    ("bugfix/", BranchType.BUGFIX),
    ("fix/", BranchType.BUGFIX),
    ("release/", BranchType.RELEASE),
]

# Conventional aliases tried when a source branch has no commits in view.
# Only used for fork-point lookup.
SOURCE_BRANCH_ALIASES: dict[str, str] = {
    "main": "master",
    "develop": "development",
}


def classify_branch(name: str) -> BranchType:
    """Classify a branch name (case-insensitive)."""
    normalized = name.lower()

    exact = _EXACT_NAMES.get(normalized)
    if exact is not None:
        return exact

    for prefix, branch_type in _PREFIXES:
        if normalized.startswith(prefix):
            return branch_type

    return BranchType.OTHER


def source_branch_of(branch_type: BranchType) -> str | None:
    """Name of the branch a branch of this type is forked from, if any."""
    return BRANCH_STYLES[branch_type].source_branch


def priority_of(branch_type: BranchType) -> int:
    """Display rank, lower sorts first. Never used for layout columns."""
    return BRANCH_STYLES[branch_type].priority


def branch_sort_key(name: str) -> tuple[int, str]:
    """Legend order: priority, then name."""
    return (priority_of(classify_branch(name)), name)
