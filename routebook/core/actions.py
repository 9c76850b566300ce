"""Resolved actions and route steps.

Every verb resolves to one frozen dataclass carrying only what the renderer
needs. The ``type`` field is the discriminator and matches the verb.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple, Union
from ..quest.model import QuestAction, QuestTextAction, RewardStep

# verb followed by its pipe-delimited arguments
ParsedAction = List[str]

@dataclass(frozen=True)
class KillAction:
    value: str
    type: Literal["kill"] = "kill"

@dataclass(frozen=True)
class ArenaAction:
    value: str
    type: Literal["arena"] = "arena"

@dataclass(frozen=True)
class AreaAction:
    area_id: str
    type: Literal["area"] = "area"

@dataclass(frozen=True)
class EnterAction:
    area_id: str
    type: Literal["enter"] = "enter"

@dataclass(frozen=True)
class TownAction:
    type: Literal["town"] = "town"

@dataclass(frozen=True)
class WaypointAction:
    area_id: Optional[str] = None  # None = bare "use the waypoint" marker
    type: Literal["waypoint"] = "waypoint"

@dataclass(frozen=True)
class GetWaypointAction:
    type: Literal["get_waypoint"] = "get_waypoint"

@dataclass(frozen=True)
class SetPortalAction:
    type: Literal["set_portal"] = "set_portal"

@dataclass(frozen=True)
class UsePortalAction:
    type: Literal["use_portal"] = "use_portal"

@dataclass(frozen=True)
class GenericAction:
    value: str
    type: Literal["generic"] = "generic"

@dataclass(frozen=True)
class TrialAction:
    type: Literal["trial"] = "trial"

@dataclass(frozen=True)
class AscendAction:
    type: Literal["ascend"] = "ascend"

@dataclass(frozen=True)
class DirectionAction:
    dir_index: int  # 0..7, clockwise in 45 degree steps
    type: Literal["dir"] = "dir"

@dataclass(frozen=True)
class CraftingAction:
    crafting_recipes: Tuple[str, ...] = ()
    type: Literal["crafting"] = "crafting"

Action = Union[
    KillAction,
    ArenaAction,
    AreaAction,
    EnterAction,
    TownAction,
    WaypointAction,
    GetWaypointAction,
    SetPortalAction,
    UsePortalAction,
    QuestAction,
    QuestTextAction,
    GenericAction,
    TrialAction,
    AscendAction,
    DirectionAction,
    CraftingAction,
]

@dataclass
class ActionStep:
    """One route line: literal text interleaved with resolved actions."""
    parts: List[Union[str, Action]] = field(default_factory=list)
    type: Literal["action_step"] = "action_step"

    def has_content(self) -> bool:
        return any(not isinstance(p, str) or p.strip() for p in self.parts)

Step = Union[ActionStep, RewardStep]
Route = List[Step]

@dataclass
class EvaluateResult:
    action: Optional[Action] = None
    additional_steps: List[Step] = field(default_factory=list)
