"""
Centralized constants for commitgraph.

Hardcoded strings and magic numbers shared across the pipeline, the
settings layer and the CLI live here so they are easy to find.
"""

# Bucket for commits that declare no branch affiliation
UNKNOWN_BRANCH = "unknown"

# Layout defaults (pixels)
DEFAULT_COLUMN_WIDTH = 25
DEFAULT_COLUMN_OFFSET = 30
DEFAULT_ROW_HEIGHT = 40
DEFAULT_ROW_OFFSET = 20

# Ancestor highlighting stops after this many hops
DEFAULT_ANCESTOR_MAX_DEPTH = 100

# Commits walked per branch by the local repository loader
DEFAULT_COMMIT_LIMIT = 200

# Settings
SETTINGS_DIR_NAME = "commitgraph"
SETTINGS_FILE_NAME = "settings.json"
DARK_MODE_ENV_VAR = "COMMITGRAPH_DARK_MODE"
