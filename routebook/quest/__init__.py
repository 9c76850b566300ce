"""Quest collaborator for the route compiler.

Evaluators live in ``routebook.quest.evaluators`` and are wired into the verb
table by ``routebook.core.dispatch``.
"""

from .model import QuestAction, QuestTextAction, RewardStep, RewardType

__all__ = [
    'QuestAction', 'QuestTextAction', 'RewardStep', 'RewardType',
]
