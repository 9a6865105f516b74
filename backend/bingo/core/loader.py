from pathlib import Path
from typing import Any, Dict

import json

import yaml


def load_any(path: Path) -> Any:
    with path.open(encoding="utf8") as f:
        return yaml.safe_load(f) if path.suffix in {".yml", ".yaml"} else json.load(f)


def load_settings(path: Path | str | None) -> Dict[str, Any]:
    """Read a settings file and keep only upper-case keys.

    Flask's ``config.from_mapping`` ignores lower-case keys anyway; filtering
    here keeps the result predictable for callers that log it.
    An empty YAML document yields ``{}``.
    """
    if not path:
        return {}
    path = Path(path)
    raw = load_any(path) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return {k: v for k, v in raw.items() if isinstance(k, str) and k.isupper()}
