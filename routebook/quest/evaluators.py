"""Quest verb evaluators.

``{quest|quest_id|offer...}`` hands in a quest. When build data is present the
gems the build still needs are picked from the quest's reward offers and
emitted as extra ``RewardStep`` entries, quest rewards before vendor rewards.
``{quest_text|text}`` is narrative only.

Both follow the core evaluator contract: ``(action, lookup, state)`` in,
``EvaluateResult`` or ``RouteDiagnostic`` out.
"""

from typing import Dict, List, Tuple, Union
from ..core.actions import ParsedAction, EvaluateResult, Step
from ..core.errors import RouteDiagnostic, format_error, semantic_error
from ..core.model.base import BuildData, RewardOffer
from ..core.state import RouteLookup, RouteState
from .model import QuestAction, QuestTextAction, RewardStep, RewardType

Outcome = Union[EvaluateResult, RouteDiagnostic]

def _offered_to(classes: Tuple[str, ...], character_class: str) -> bool:
    return not classes or character_class in classes

def _collect_rewards(
    offer: RewardOffer,
    reward_type: RewardType,
    build: BuildData,
    state: RouteState,
) -> List[Step]:
    """Pick every still-missing build gem available from one side of an offer."""
    table: Dict[str, Tuple[str, ...]] = offer.quest if reward_type == "quest" else offer.vendor
    steps: List[Step] = []
    for gem in build.required_gems:
        if gem.id in state.acquired_gems:
            continue
        if gem.id not in table:
            continue
        if not _offered_to(table[gem.id], build.character_class):
            continue
        state.acquired_gems.add(gem.id)
        steps.append(RewardStep(
            reward_type=reward_type,
            gem_id=gem.id,
            npc=offer.quest_npc,
            note=gem.note or None,
        ))
    return steps

def evaluate_quest(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) < 2:
        return format_error(action)
    quest = lookup.registry.get_quest(action[1])
    if quest is None:
        return semantic_error(action, "quest does not exist")

    offer_ids: List[int] = []
    for raw in action[2:]:
        try:
            index = int(raw)
        except ValueError:
            return format_error(action)
        if not 0 <= index < len(quest.reward_offers):
            return format_error(action)
        offer_ids.append(index)
    considered = offer_ids or list(range(len(quest.reward_offers)))

    additional: List[Step] = []
    build = lookup.build_data
    if build is not None:
        for index in considered:
            offer = quest.reward_offers[index]
            additional.extend(_collect_rewards(offer, "quest", build, state))
            additional.extend(_collect_rewards(offer, "vendor", build, state))

    return EvaluateResult(
        QuestAction(quest_id=quest.id, reward_offer_ids=tuple(offer_ids)),
        additional,
    )

def evaluate_quest_text(action: ParsedAction, lookup: RouteLookup, state: RouteState) -> Outcome:
    if len(action) != 2:
        return format_error(action)
    return EvaluateResult(QuestTextAction(action[1]))
