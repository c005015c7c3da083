"""Lightweight loader for engine configuration toggles."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "engine.json"
_CONFIG_DATA: Optional[Dict[str, Any]] = None


def _load() -> Dict[str, Any]:
    try:
        with _CONFIG_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", _CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", _CONFIG_PATH)
        return {}
    return data


def _ensure_loaded() -> None:
    global _CONFIG_DATA
    if _CONFIG_DATA is None:
        _CONFIG_DATA = _load()


def reload() -> None:
    """Drop cached values so the next lookup re-reads the file."""
    global _CONFIG_DATA
    _CONFIG_DATA = None


def get(path: str, default: Any = None) -> Any:
    """Return a config value using dotted paths, or default when missing."""
    _ensure_loaded()
    if not path:
        return _CONFIG_DATA

    current: Any = _CONFIG_DATA
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current
