"""Per-verb evaluators for route action tokens.

Each evaluator takes the raw token (verb first), the read-only lookup and the
mutable route state. It checks the argument count first, then applies the
verb's rules, updating ``state`` in place on success. It returns either an
``EvaluateResult`` or a ``RouteDiagnostic``; nothing is raised.
"""
from __future__ import annotations
import math
from typing import Union
from .. import config
from .actions import (
    ParsedAction,
    EvaluateResult,
    KillAction,
    ArenaAction,
    AreaAction,
    EnterAction,
    TownAction,
    WaypointAction,
    GetWaypointAction,
    SetPortalAction,
    UsePortalAction,
    GenericAction,
    TrialAction,
    AscendAction,
    DirectionAction,
    CraftingAction,
)
from .errors import (
    RouteDiagnostic,
    format_error,
    missing_area,
    no_waypoint,
    semantic_error,
)
from .state import RouteLookup, RouteState

Outcome = Union[EvaluateResult, RouteDiagnostic]


def evaluate_kill(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    boss_name = action[1]
    # Boss-in-current-area check stays off until area boss data is complete.
    for area_id in lookup.registry.waypoint_unlocks(boss_name):
        state.implicit_waypoints.add(area_id)
    return EvaluateResult(KillAction(boss_name))


def evaluate_arena(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    return EvaluateResult(ArenaAction(action[1]))


def evaluate_area(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    area = lookup.registry.get_area(action[1])
    if area is None:
        return missing_area(action, action[1])
    return EvaluateResult(AreaAction(area.id))


def evaluate_enter(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    area = lookup.registry.get_area(action[1])
    if area is None:
        return missing_area(action, action[1])
    if not area.is_connected_to(state.current_area_id):
        return semantic_error(action, "not connected to current area", area.id)

    if area.is_town_area:
        state.last_town_area_id = area.id
        if area.has_waypoint:
            state.implicit_waypoints.add(area.id)
    state.current_area_id = area.id
    return EvaluateResult(EnterAction(area.id))


def evaluate_town(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 1:
        return format_error(action)
    state.current_area_id = state.last_town_area_id
    return EvaluateResult(TownAction())


def evaluate_waypoint(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    """Travel by waypoint, or with no argument just mark "use the waypoint"."""
    if len(action) not in (1, 2):
        return format_error(action)
    if len(action) == 1:
        return EvaluateResult(WaypointAction(None))

    area = lookup.registry.get_area(action[1])
    if area is None:
        return missing_area(action, action[1])
    if area.id not in state.known_waypoints():
        return semantic_error(action, "missing target waypoint", area.id)
    current = lookup.registry.get_area(state.current_area_id)
    if current is None or not current.has_waypoint:
        return no_waypoint(action, state.current_area_id)

    # standing at a waypoint and using it means we know it
    state.implicit_waypoints.add(current.id)
    state.used_waypoints.add(area.id)
    state.current_area_id = area.id
    return EvaluateResult(WaypointAction(area.id))


def evaluate_get_waypoint(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 1:
        return format_error(action)
    area = lookup.registry.get_area(state.current_area_id)
    if area is None:
        return missing_area(action, state.current_area_id)
    if not area.has_waypoint:
        return no_waypoint(action, area.id)
    # Only implicit knowledge counts here; a repeated get_waypoint is accepted.
    if area.id in state.implicit_waypoints:
        return semantic_error(action, "waypoint already acquired", area.id)
    state.explicit_waypoints.add(area.id)
    return EvaluateResult(GetWaypointAction())


def evaluate_set_portal(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 1:
        return format_error(action)
    state.portal_area_id = state.current_area_id
    return EvaluateResult(SetPortalAction())


def evaluate_use_portal(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    """Walk through the anchored portal.

    From the anchor area the portal leads to that act's town and stays open;
    from a town it leads back to the anchor and closes.
    """
    if len(action) != 1:
        return format_error(action)
    if not state.portal_area_id:
        return semantic_error(action, "portal must be set")

    current = lookup.registry.get_area(state.current_area_id)
    if current is None:
        return missing_area(action, state.current_area_id)
    if current.id == state.portal_area_id:
        town_id = lookup.towns.get(current.act)
        if town_id is None:
            return semantic_error(action, f"act {current.act} has no town", current.id)
        state.current_area_id = town_id
    else:
        if not current.is_town_area:
            return semantic_error(action, "can only use portal from town or portal area", current.id)
        state.current_area_id = state.portal_area_id
        state.portal_area_id = None
    return EvaluateResult(UsePortalAction())


def evaluate_generic(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    return EvaluateResult(GenericAction(action[1]))


def evaluate_trial(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 1:
        return format_error(action)
    return EvaluateResult(TrialAction())


def evaluate_ascend(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 1:
        return format_error(action)
    expected_id = config.get_labyrinth_area_id()
    if state.current_area_id != expected_id:
        expected_name = lookup.registry.get_area_name(expected_id)
        return semantic_error(action, f'must be in "{expected_name}"', state.current_area_id)
    state.current_area_id = state.last_town_area_id
    return EvaluateResult(AscendAction())


def evaluate_crafting(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) > 2:
        return format_error(action)
    area_id = action[1] if len(action) == 2 else state.current_area_id
    area = lookup.registry.get_area(area_id)
    if area is None:
        return missing_area(action, area_id)
    state.crafting_areas.add(area.id)
    return EvaluateResult(CraftingAction(area.crafting_recipes))


def evaluate_direction(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    # float() would also take digit separators like "4_5"
    if "_" in action[1]:
        return semantic_error(action, "dir value is not a number")
    try:
        parsed = float(action[1])
    except ValueError:
        return semantic_error(action, "dir value is not a number")
    if math.isnan(parsed):
        return semantic_error(action, "dir value is not a number")
    if math.isinf(parsed):
        return semantic_error(action, "dir value must be in intervals of 45")

    # a tiny negative modulo 360 rounds up to 360.0
    direction = parsed % 360
    if direction >= 360 or direction % 45 != 0:
        return semantic_error(action, "dir value must be in intervals of 45")
    return EvaluateResult(DirectionAction(int(direction // 45)))
