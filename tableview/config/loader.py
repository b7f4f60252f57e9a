from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

from tableview.config.model import ViewConfig
from tableview.core.exceptions import ConfigError
from tableview.core.values import as_whole_number

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"page_size", "filter", "sort_key", "sort_order"}


def _validate_raw(raw: Dict[str, Any], source: Path) -> None:
    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown keys in {source}: {unknown}")

    page_size = as_whole_number(raw.get("page_size", 0))
    if page_size is None or page_size < 0:
        raise ConfigError(
            f"'page_size' must be a whole number >= 0 in {source}, got {raw.get('page_size')!r}"
        )

    term = raw.get("filter", "")
    if isinstance(term, bool) or not isinstance(term, (str, int, float)):
        raise ConfigError(f"'filter' must be a string or number in {source}, got {term!r}")

    sort_key = raw.get("sort_key")
    if sort_key is not None and not isinstance(sort_key, str):
        raise ConfigError(f"'sort_key' must be a string or null in {source}, got {sort_key!r}")

    if raw.get("sort_order", "asc") not in ("asc", "desc"):
        raise ConfigError(f"'sort_order' must be 'asc' or 'desc' in {source}")


def load_view_config(path: str | Path) -> ViewConfig:
    """
    Load a ViewConfig from a JSON file.

    Expected shape (every key optional):

        {
            "page_size": 25,
            "filter": "bergersen",
            "sort_key": "year",
            "sort_order": "desc"
        }

    :param path: Path to the JSON file.
    :return: A ViewConfig instance.
    :raises FileNotFoundError: if the file does not exist.
    :raises ConfigError: if the file is not a JSON object or has invalid values.
    """
    path = Path(path)
    logger.info("Loading view config", extra={"config_path": str(path)})

    if not path.is_file():
        raise FileNotFoundError(f"File not found at {path}")

    try:
        with path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a JSON object in {path}, got {type(raw).__name__}")

    _validate_raw(raw, path)

    cfg = ViewConfig.from_dict(raw)
    return replace(cfg, page_size=as_whole_number(cfg.page_size))
