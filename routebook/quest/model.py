"""Quest step data models.

Actions and steps produced by the quest evaluators. They are plain
dataclasses so the renderer can serialize them with ``dataclasses.asdict``.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

RewardType = Literal["quest", "vendor"]

@dataclass(frozen=True)
class QuestAction:
    """{quest|id|offer...}: hand in a quest, optionally naming reward offers."""
    quest_id: str
    reward_offer_ids: Tuple[int, ...] = ()
    type: Literal["quest"] = "quest"

@dataclass(frozen=True)
class QuestTextAction:
    value: str
    type: Literal["quest_text"] = "quest_text"

@dataclass(frozen=True)
class RewardStep:
    """A gem the build picks up, rendered as its own step after the hand-in."""
    reward_type: RewardType
    gem_id: str
    npc: str
    note: Optional[str] = None
    type: Literal["reward_step"] = "reward_step"
