"""Verb table: maps the first element of a token group to its evaluator."""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional, Union
from . import evaluators as ev
from ..quest.evaluators import evaluate_quest, evaluate_quest_text
from .actions import ParsedAction, EvaluateResult
from .errors import RouteDiagnostic, format_error
from .state import RouteLookup, RouteState

Evaluator = Callable[[ParsedAction, RouteLookup, RouteState], Union[EvaluateResult, RouteDiagnostic]]


class Verb(str, Enum):
    KILL = "kill"
    ARENA = "arena"
    AREA = "area"
    ENTER = "enter"
    TOWN = "town"
    WAYPOINT = "waypoint"
    GET_WAYPOINT = "get_waypoint"
    SET_PORTAL = "set_portal"
    USE_PORTAL = "use_portal"
    QUEST = "quest"
    QUEST_TEXT = "quest_text"
    GENERIC = "generic"
    TRIAL = "trial"
    ASCEND = "ascend"
    DIR = "dir"
    CRAFTING = "crafting"

    @classmethod
    def parse(cls, raw: str) -> Optional["Verb"]:
        try:
            return cls(raw)
        except ValueError:
            return None


EVALUATORS: Dict[Verb, Evaluator] = {
    Verb.KILL: ev.evaluate_kill,
    Verb.ARENA: ev.evaluate_arena,
    Verb.AREA: ev.evaluate_area,
    Verb.ENTER: ev.evaluate_enter,
    Verb.TOWN: ev.evaluate_town,
    Verb.WAYPOINT: ev.evaluate_waypoint,
    Verb.GET_WAYPOINT: ev.evaluate_get_waypoint,
    Verb.SET_PORTAL: ev.evaluate_set_portal,
    Verb.USE_PORTAL: ev.evaluate_use_portal,
    Verb.QUEST: evaluate_quest,
    Verb.QUEST_TEXT: evaluate_quest_text,
    Verb.GENERIC: ev.evaluate_generic,
    Verb.TRIAL: ev.evaluate_trial,
    Verb.ASCEND: ev.evaluate_ascend,
    Verb.DIR: ev.evaluate_direction,
    Verb.CRAFTING: ev.evaluate_crafting,
}

_unhandled = set(Verb) - set(EVALUATORS)
if _unhandled:
    raise RuntimeError(f"verbs without evaluator: {sorted(v.value for v in _unhandled)}")


def evaluate_action(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Union[EvaluateResult, RouteDiagnostic]:
    verb = Verb.parse(action[0]) if action else None
    if verb is None:
        return format_error(action)
    return EVALUATORS[verb](action, lookup, state)
