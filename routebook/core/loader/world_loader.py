"""World loading and validation utilities.

Separates construction logic from raw JSON (dict) into model dataclasses.
No I/O performed here; caller is responsible for reading JSON from disk.
"""
from __future__ import annotations
from collections import Counter
from typing import Any, Dict, List
import jsonschema
from ..model.base import (
    Area,
    RewardOffer,
    QuestDef,
    World,
    RequiredGem,
    BuildData,
)
from ..schema import (
    AREAS_SCHEMA,
    KILL_WAYPOINTS_SCHEMA,
    QUESTS_SCHEMA,
    BUILD_DATA_SCHEMA,
)

__all__ = [
    "WorldDataError",
    "build_world_from_dict",
    "build_build_data_from_dict",
    "validate_world",
]


class WorldDataError(Exception):
    """Raised when world tables or build data cannot be loaded."""
    pass


def _validate_schema(payload: Any, schema: Dict[str, Any], label: str) -> None:
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as e:
        path = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise WorldDataError(f"Invalid {label} at {path}: {e.message}") from e


def _gem_offer(raw: Dict[str, List[str]]) -> Dict[str, tuple]:
    return {gem_id: tuple(classes) for gem_id, classes in raw.items()}


def build_world_from_dict(
    areas: Dict[str, Any],
    kill_waypoints: Dict[str, Any] | None = None,
    quests: Dict[str, Any] | None = None,
) -> World:
    kill_waypoints = kill_waypoints or {}
    quests = quests or {}
    _validate_schema(areas, AREAS_SCHEMA, "areas")
    _validate_schema(kill_waypoints, KILL_WAYPOINTS_SCHEMA, "kill waypoints")
    _validate_schema(quests, QUESTS_SCHEMA, "quests")

    area_map: Dict[str, Area] = {}
    for key, a in areas.items():
        if key != a["id"]:
            raise WorldDataError(f"Area key '{key}' does not match its id '{a['id']}'")
        area_map[key] = Area(
            id=a["id"],
            act=a["act"],
            name=a["name"],
            connection_ids=tuple(a.get("connection_ids", [])),
            is_town_area=a.get("is_town_area", False),
            has_waypoint=a.get("has_waypoint", False),
            crafting_recipes=tuple(a.get("crafting_recipes", [])),
        )
    quest_map: Dict[str, QuestDef] = {}
    for key, q in quests.items():
        offers = tuple(
            RewardOffer(
                quest_npc=o["quest_npc"],
                quest=_gem_offer(o.get("quest", {})),
                vendor=_gem_offer(o.get("vendor", {})),
            )
            for o in q.get("reward_offers", [])
        )
        quest_map[key] = QuestDef(id=q["id"], name=q["name"], act=q["act"], reward_offers=offers)
    world = World(
        areas=area_map,
        kill_waypoints={boss: tuple(ids) for boss, ids in kill_waypoints.items()},
        quests=quest_map,
    )
    return world


def build_build_data_from_dict(data: Dict[str, Any]) -> BuildData:
    _validate_schema(data, BUILD_DATA_SCHEMA, "build data")
    return BuildData(
        character_class=data["characterClass"],
        required_gems=tuple(
            RequiredGem(id=g["id"], note=g.get("note", ""))
            for g in data.get("requiredGems", [])
        ),
    )


def validate_world(world: World) -> List[str]:
    issues: List[str] = []
    for area in world.areas.values():
        for target in area.connection_ids:
            if target not in world.areas:
                issues.append(f"Area '{area.id}' connects to missing area '{target}'")
    acts = {a.act for a in world.areas.values()}
    towns = Counter(a.act for a in world.areas.values() if a.is_town_area)
    for act in sorted(acts):
        if towns[act] == 0:
            issues.append(f"Act {act} has no town area")
        elif towns[act] > 1:
            issues.append(f"Act {act} has {towns[act]} town areas")
    for boss, area_ids in world.kill_waypoints.items():
        for area_id in area_ids:
            if area_id not in world.areas:
                issues.append(f"Kill '{boss}' unlocks missing area '{area_id}'")
            elif not world.areas[area_id].has_waypoint:
                issues.append(f"Kill '{boss}' unlocks '{area_id}' which has no waypoint")
    for quest in world.quests.values():
        if quest.act not in acts:
            issues.append(f"Quest '{quest.id}' belongs to unknown act {quest.act}")
    return issues
