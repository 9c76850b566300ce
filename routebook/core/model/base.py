"""Data model definitions for the world graph and build data.

This module only contains pure dataclasses without loading or validation logic.
They are intended to be immutable structural representations of world content.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

__all__ = [
    "Area",
    "RewardOffer",
    "QuestDef",
    "World",
    "RequiredGem",
    "BuildData",
]

@dataclass(frozen=True)
class Area:
    id: str
    act: int
    name: str
    connection_ids: Tuple[str, ...] = ()
    is_town_area: bool = False
    has_waypoint: bool = False
    crafting_recipes: Tuple[str, ...] = ()

    def is_connected_to(self, area_id: str) -> bool:
        return area_id in self.connection_ids

@dataclass(frozen=True)
class RewardOffer:
    quest_npc: str
    # gem id -> classes allowed to pick it (empty = every class)
    quest: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    vendor: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

@dataclass(frozen=True)
class QuestDef:
    id: str
    name: str
    act: int
    reward_offers: Tuple[RewardOffer, ...] = ()

@dataclass(frozen=True)
class World:
    areas: Dict[str, Area]
    kill_waypoints: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    quests: Dict[str, QuestDef] = field(default_factory=dict)

    def crafting_areas(self) -> List[Area]:
        return [a for a in self.areas.values() if a.crafting_recipes]

@dataclass(frozen=True)
class RequiredGem:
    id: str
    note: str = ""

@dataclass(frozen=True)
class BuildData:
    character_class: str
    required_gems: Tuple[RequiredGem, ...] = ()
