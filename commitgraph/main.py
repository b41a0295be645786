#!/usr/bin/env python3
"""
commitgraph - print the commit graph layout of a repository as JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from commitgraph.config.settings import Settings
from commitgraph.git_backend.repository import CommitSource
from commitgraph.graph.layout import build_commit_graph
from commitgraph.graph.traversal import find_ancestors
from commitgraph.graph.types import CommitRecord, InvalidCommitError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="commitgraph",
        description="commitgraph - lay out commit history as a drawable graph",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--repo",
        help="Git repository to read (default: search upwards from the current directory)",
    )
    source.add_argument(
        "--input",
        type=Path,
        help="JSON file holding a list of commit objects",
    )
    parser.add_argument("--branch", help="Only show commits on branches containing this text")
    parser.add_argument("--author", help="Only show commits whose author name or email contains this text")
    parser.add_argument("--dark", action="store_true", help="Use dark mode colors")
    parser.add_argument(
        "--ancestors",
        metavar="SHA",
        help="Also list the ancestors of this commit, up to graph.ancestor_max_depth hops",
    )
    parser.add_argument("--limit", type=int, help="Commits to read per branch (with --repo)")
    parser.add_argument("--settings", type=Path, help="Settings file to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline decisions")
    return parser.parse_args(argv)


def load_input(path: Path) -> list[CommitRecord]:
    """Read commit records from a JSON file"""
    with open(path) as f:
        data: Any = json.load(f)
    if not isinstance(data, list):
        raise InvalidCommitError(f"{path} must contain a JSON list of commits")
    return [CommitRecord.from_dict(item) for item in data]


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = Settings(args.settings)

    try:
        if args.input is not None:
            commits = load_input(args.input)
        else:
            limit = args.limit if args.limit is not None else settings.get_commit_limit()
            commits = CommitSource(args.repo).load_commits(limit=max(1, limit))

        graph = build_commit_graph(
            commits,
            branch_filter=args.branch,
            author_filter=args.author,
            dark_mode=args.dark or settings.get_dark_mode(),
            layout=settings.get_layout(),
        )
    except (OSError, ValueError) as e:
        # InvalidCommitError and "not a repository" are both ValueErrors
        print(f"commitgraph: {e}", file=sys.stderr)
        return 1

    output = graph.to_dict()
    if args.ancestors:
        if args.ancestors not in graph.commit_map:
            print(f"commitgraph: commit {args.ancestors} is not in the graph", file=sys.stderr)
            return 1
        ancestors = find_ancestors(
            args.ancestors,
            graph.commit_map,
            graph.virtual_parents,
            max_depth=settings.get_ancestor_max_depth(),
        )
        # Keep graph row order
        output["ancestors"] = [node.sha for node in graph.nodes if node.sha in ancestors]

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
