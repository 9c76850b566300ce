"""Test the verb table."""

import pytest

from routebook.bootstrap import load_registry
from routebook.core.actions import EvaluateResult
from routebook.core.assembler import initialize_route_lookup, initialize_route_state
from routebook.core.dispatch import EVALUATORS, Verb, evaluate_action
from routebook.core.errors import DiagnosticKind, RouteDiagnostic

@pytest.fixture
def env():
    return initialize_route_lookup(None, load_registry()), initialize_route_state()

def test_every_verb_has_an_evaluator():
    assert set(EVALUATORS) == set(Verb)
    assert len(Verb) == 16

@pytest.mark.parametrize("token", [["fly", "1_1_2"], ["KILL", "Hillock"], [""], []])
def test_unknown_verb_is_format_error(token, env):
    lookup, state = env
    res = evaluate_action(token, lookup, state)
    assert isinstance(res, RouteDiagnostic)
    assert res.kind == DiagnosticKind.FORMAT
    assert str(res) == "invalid format"

def test_dispatch_returns_evaluator_result_unchanged(env):
    lookup, state = env
    res = evaluate_action(["enter", "1_1_town"], lookup, state)
    assert isinstance(res, EvaluateResult)
    assert res.action.type == "enter"
    assert state.current_area_id == "1_1_town"

@pytest.mark.parametrize("token, action_type", [
    (["kill", "Hillock"], "kill"),
    (["arena", "Hillock's Lair"], "arena"),
    (["area", "1_1_2"], "area"),
    (["town"], "town"),
    (["waypoint"], "waypoint"),
    (["set_portal"], "set_portal"),
    (["quest", "a1q1"], "quest"),
    (["quest_text", "Take the Medicine Chest"], "quest_text"),
    (["generic", "Loot the chest"], "generic"),
    (["trial"], "trial"),
    (["dir", "90"], "dir"),
    (["crafting"], "crafting"),
])
def test_action_type_matches_verb(token, action_type, env):
    lookup, state = env
    res = evaluate_action(token, lookup, state)
    assert isinstance(res, EvaluateResult)
    assert res.action.type == action_type
