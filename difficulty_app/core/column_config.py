"""Load and expose column configuration from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import DIFFICULTY_COLUMNS, DISPLAY_ORDER_DIFFICULTY, DISPLAY_ORDER_DISTRIBUTION

logger = logging.getLogger(__name__)

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "difficulty": list(DISPLAY_ORDER_DIFFICULTY),
        "metrics": list(DIFFICULTY_COLUMNS),
        "distribution": list(DISPLAY_ORDER_DISTRIBUTION),
    }


def load_column_sets(base_path: str | Path | None = None, *, refresh: bool = False):
    global _CACHE
    if _CACHE is not None and not refresh:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    if not yaml_path.exists():
        _CACHE = _defaults()
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
        sets = data.get("sets", {})
        _CACHE = {name: list(sets.get(name) or cols) for name, cols in _defaults().items()}
        return _CACHE
    except Exception as exc:
        logger.warning("Invalid column config %s, using defaults: %s", yaml_path, exc)
        _CACHE = _defaults()
        return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return list(sets.get(set_name, []))
