"""Run-scoped containers threaded through every evaluator.

``RouteLookup`` is built once and read only. ``RouteState`` is the single
mutable record of what the player knows; it is shared by every document in a
run and never reset between documents.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Set
from .model.base import BuildData
from .registry import ContentRegistry

@dataclass
class RouteLookup:
    registry: ContentRegistry
    towns: Dict[int, str] = field(default_factory=dict)
    build_data: Optional[BuildData] = None

@dataclass
class RouteState:
    current_area_id: str
    last_town_area_id: str
    implicit_waypoints: Set[str] = field(default_factory=set)
    explicit_waypoints: Set[str] = field(default_factory=set)
    used_waypoints: Set[str] = field(default_factory=set)
    crafting_areas: Set[str] = field(default_factory=set)
    portal_area_id: Optional[str] = None
    # Filled by the quest subsystem only
    acquired_gems: Set[str] = field(default_factory=set)

    def known_waypoints(self) -> Set[str]:
        return self.implicit_waypoints | self.explicit_waypoints

    def unused_waypoints(self) -> Set[str]:
        return self.explicit_waypoints - self.used_waypoints
