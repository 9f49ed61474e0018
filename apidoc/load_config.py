"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "sources": {
        "master": (
            "https://raw.githubusercontent.com/Hypixel-API-Reborn/"
            "hypixel-api-reborn/docs/master.json"
        ),
    },
    "site": {
        "title": "Hypixel API • Reborn",
        "base_url": "https://hypixel-api-reborn.github.io",
        "docs_path": "#/docs/main",
        "icon_path": "static/favicon.png",
        "color": 0xFF8C00,
        "repo_host": "https://github.com",
    },
    "search": {
        "threshold": 0.5,
        "distance": 80,
        "max_pattern_length": 32,
        "keys": ["name", "id"],
        "limit": 10,
    },
    "description_limit": 1500,
    "fetch": {
        "timeout": 10.0,
    },
}


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge ``update`` into a copy of ``base``; nested mappings merge recursively."""
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            # Scalars and lists are replaced
            result[key] = value
    return result


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = _deep_merge(config, user_config)
    return config
