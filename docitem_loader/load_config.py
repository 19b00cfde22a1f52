"""Logic for loading and merging loader configuration files."""

from pathlib import Path
from typing import Any

import yaml

from docitem_loader.deep_merge import deep_merge

CACHE_KEY_MODES = ("reference", "file_name")

DEFAULT_CONFIG: dict[str, Any] = {
    "project_marker": "package.json",
    "modules_dir": "node_modules",
    "manifest_pattern": "dist/{package}.api.json",
    "schema_path": None,
    # "reference" stores packages under scope/package, "file_name" under the
    # manifest's base name
    "cache_key_mode": "reference",
    "tool_name": "ApiJsonGenerator",
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
