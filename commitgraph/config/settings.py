"""
Settings management for commitgraph
"""

import copy
import json
import os
from pathlib import Path
from typing import Any

from commitgraph.constants import (
    DARK_MODE_ENV_VAR,
    DEFAULT_ANCESTOR_MAX_DEPTH,
    DEFAULT_COLUMN_OFFSET,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_COMMIT_LIMIT,
    DEFAULT_ROW_HEIGHT,
    DEFAULT_ROW_OFFSET,
    SETTINGS_DIR_NAME,
    SETTINGS_FILE_NAME,
)
from commitgraph.graph.types import LayoutConfig

_TRUTHY = {"1", "true", "yes", "on"}


class Settings:
    """Manages graph settings"""

    DEFAULT_SETTINGS: dict[str, Any] = {
        "layout": {
            "column_width": DEFAULT_COLUMN_WIDTH,  # Horizontal gap between lanes
            "column_offset": DEFAULT_COLUMN_OFFSET,
            "row_height": DEFAULT_ROW_HEIGHT,  # Vertical gap between commits
            "row_offset": DEFAULT_ROW_OFFSET,
        },
        "graph": {
            "dark_mode": False,
            "ancestor_max_depth": DEFAULT_ANCESTOR_MAX_DEPTH,
        },
        "git": {"commit_limit": DEFAULT_COMMIT_LIMIT},  # Per branch
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / ".config" / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if self.config_path.exists():
            with open(self.config_path) as f:
                loaded = json.load(f)
                # Merge with defaults to handle new settings
                self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base_dict: dict[str, Any] = base[key]
                value_dict: dict[str, Any] = value
                self._merge_settings(base_dict, value_dict)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'layout.row_height')"""
        parts = path.split(".")
        value: Any = self.settings

        for part in parts:
            if isinstance(value, dict):
                value_dict: dict[str, Any] = value
                if part in value_dict:
                    value = value_dict[part]
                else:
                    return default
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_layout(self) -> LayoutConfig:
        """Get the coordinate constants for the graph layout.

        Spacings are clamped to at least 1 so lanes and rows never collapse.
        """
        return LayoutConfig(
            column_width=max(1.0, float(self.get("layout.column_width", DEFAULT_COLUMN_WIDTH))),
            column_offset=float(self.get("layout.column_offset", DEFAULT_COLUMN_OFFSET)),
            row_height=max(1.0, float(self.get("layout.row_height", DEFAULT_ROW_HEIGHT))),
            row_offset=float(self.get("layout.row_offset", DEFAULT_ROW_OFFSET)),
        )

    def get_dark_mode(self) -> bool:
        """Get the color mode, with the environment taking precedence over the file"""
        env_value = os.environ.get(DARK_MODE_ENV_VAR)
        if env_value is not None:
            return env_value.strip().lower() in _TRUTHY
        return bool(self.get("graph.dark_mode", False))

    def get_ancestor_max_depth(self) -> int:
        """Get how many hops ancestor highlighting follows."""
        depth: int = int(self.get("graph.ancestor_max_depth", DEFAULT_ANCESTOR_MAX_DEPTH))
        return max(1, depth)  # At least 1

    def get_commit_limit(self) -> int:
        """Get the number of commits the repository loader walks per branch."""
        limit: int = int(self.get("git.commit_limit", DEFAULT_COMMIT_LIMIT))
        return max(1, limit)  # At least 1
