"""Git backend for loading commit history"""

from commitgraph.git_backend.repository import CommitSource

__all__ = ["CommitSource"]
