"""Test the quest collaborator evaluators."""

import pytest

from routebook.bootstrap import load_registry
from routebook.core.actions import EvaluateResult
from routebook.core.assembler import initialize_route_lookup, initialize_route_state
from routebook.core.errors import DiagnosticKind, RouteDiagnostic
from routebook.core.model.base import BuildData, RequiredGem
from routebook.quest.evaluators import evaluate_quest, evaluate_quest_text
from routebook.quest.model import QuestAction, QuestTextAction, RewardStep

@pytest.fixture
def witch_build():
    return BuildData(
        character_class="Witch",
        required_gems=(
            RequiredGem("Frostblink", "movement"),
            RequiredGem("Fireball"),
            RequiredGem("Molten Strike"),
            RequiredGem("Arcane Surge", "link with Fireball"),
        ),
    )

@pytest.fixture
def state():
    return initialize_route_state()

def test_quest_without_build_data(state):
    lookup = initialize_route_lookup(None, load_registry())
    res = evaluate_quest(["quest", "a1q1"], lookup, state)
    assert isinstance(res, EvaluateResult)
    assert res.action == QuestAction("a1q1", ())
    assert res.additional_steps == []
    assert state.acquired_gems == set()

def test_quest_rewards_follow_build(witch_build, state):
    """Quest rewards come before vendor rewards; other classes' gems are skipped."""
    lookup = initialize_route_lookup(witch_build, load_registry())
    res = evaluate_quest(["quest", "a1q1"], lookup, state)
    assert isinstance(res, EvaluateResult)
    assert res.additional_steps == [
        RewardStep("quest", "Fireball", "Tarkleigh", None),
        RewardStep("vendor", "Frostblink", "Tarkleigh", "movement"),
    ]
    assert state.acquired_gems == {"Fireball", "Frostblink"}

def test_acquired_gems_are_not_offered_again(witch_build, state):
    lookup = initialize_route_lookup(witch_build, load_registry())
    state.acquired_gems.add("Fireball")
    res = evaluate_quest(["quest", "a1q1"], lookup, state)
    assert [s.gem_id for s in res.additional_steps] == ["Frostblink"]

def test_reward_offer_selection(witch_build, state):
    lookup = initialize_route_lookup(witch_build, load_registry())
    res = evaluate_quest(["quest", "a1q4", "1"], lookup, state)
    assert res.action == QuestAction("a1q4", (1,))
    assert res.additional_steps == [
        RewardStep("quest", "Arcane Surge", "Tarkleigh", "link with Fireball"),
    ]

@pytest.mark.parametrize("token", [["quest"], ["quest", "a1q4", "2"], ["quest", "a1q4", "one"]])
def test_quest_format_errors(token, state):
    lookup = initialize_route_lookup(None, load_registry())
    res = evaluate_quest(token, lookup, state)
    assert isinstance(res, RouteDiagnostic)
    assert res.kind == DiagnosticKind.FORMAT

def test_unknown_quest(state):
    lookup = initialize_route_lookup(None, load_registry())
    res = evaluate_quest(["quest", "a9q9"], lookup, state)
    assert isinstance(res, RouteDiagnostic)
    assert str(res) == "quest does not exist"

def test_quest_text(state):
    lookup = initialize_route_lookup(None, load_registry())
    res = evaluate_quest_text(["quest_text", "Medicine Chest"], lookup, state)
    assert res.action == QuestTextAction("Medicine Chest")
    assert isinstance(evaluate_quest_text(["quest_text"], lookup, state), RouteDiagnostic)
