"""Runtime registry for loaded world content.

Acts as an in-memory index for quick lookup without having to traverse the
raw tables repeatedly. Built once by the bootstrap and treated as read-only.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from .model.base import World, Area, QuestDef

class ContentRegistry:
    def __init__(self, world: World):
        self.world = world
        self.area_index: Dict[str, Area] = dict(world.areas)
        self.quest_index: Dict[str, QuestDef] = dict(world.quests)
        self.town_index: Dict[int, str] = {}
        for area in world.areas.values():
            if area.is_town_area:
                self.town_index[area.act] = area.id

    def get_area(self, area_id: str) -> Optional[Area]:
        return self.area_index.get(area_id)

    def get_quest(self, quest_id: str) -> Optional[QuestDef]:
        return self.quest_index.get(quest_id)

    def waypoint_unlocks(self, boss_name: str) -> Tuple[str, ...]:
        return self.world.kill_waypoints.get(boss_name, ())

    def crafting_areas(self) -> List[Area]:
        return self.world.crafting_areas()

    def get_area_name(self, area_id: str) -> str:
        area = self.get_area(area_id)
        return area.name if area else area_id
