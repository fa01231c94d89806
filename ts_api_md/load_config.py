"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from ts_api_md.deep_merge import deep_merge

DEFAULT_CONFIG_FILE = "ts_api_md.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    # TypeScript declaration file to document
    "source": None,
    # Markdown document holding the class API markers
    "document": None,
    # Classes to write, in order
    "classes": [],
    # Also write every class that has a start marker in the document
    "discover_classes": False,
    "log_level": "INFO",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
