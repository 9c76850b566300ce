"""Bootstrap utilities: load world tables and build data into runtime objects."""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict
from . import config
from .core.loader.world_loader import (
    WorldDataError,
    build_world_from_dict,
    build_build_data_from_dict,
    validate_world,
)
from .core.model.base import BuildData
from .core.registry import ContentRegistry

log = logging.getLogger(__name__)

AREAS_FILE = "areas.json"
KILL_WAYPOINTS_FILE = "kill_waypoints.json"
QUESTS_FILE = "quests.json"

_registry_cache: Dict[Path, ContentRegistry] = {}


def _read_json(path: Path, required: bool = True) -> Any:
    if not path.exists():
        if required:
            raise WorldDataError(f"Data file not found: {path}")
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise WorldDataError(f"Invalid JSON in {path}: {e}") from e


def load_registry(world_dir: str | Path | None = None, use_cache: bool = True) -> ContentRegistry:
    """Load the three world tables from ``world_dir`` (or the configured one).

    Registries are cached per directory; pass ``use_cache=False`` to re-read.
    """
    base = Path(world_dir) if world_dir is not None else config.get_world_dir()
    if use_cache and base in _registry_cache:
        return _registry_cache[base]

    world = build_world_from_dict(
        _read_json(base / AREAS_FILE),
        _read_json(base / KILL_WAYPOINTS_FILE, required=False),
        _read_json(base / QUESTS_FILE, required=False),
    )
    for issue in validate_world(world):
        log.warning("[WORLD WARNING] %s", issue)
    registry = ContentRegistry(world)
    log.debug("Loaded %d areas, %d quests from %s", len(world.areas), len(world.quests), base)
    _registry_cache[base] = registry
    return registry


def load_build_data(path: str | Path) -> BuildData:
    """Read a build file (``{"characterClass": ..., "requiredGems": [...]}``)."""
    return build_build_data_from_dict(_read_json(Path(path)))
