"""Route compiler: turns annotated leveling route documents into typed steps."""

from .core.assembler import initialize_route_lookup, initialize_route_state, parse_route
from .core.actions import Action, ActionStep, EvaluateResult, Route, Step
from .core.errors import DiagnosticKind, RouteDiagnostic
from .core.state import RouteLookup, RouteState
from .core.model.base import Area, BuildData, RequiredGem
from .core.loader.world_loader import WorldDataError
from .bootstrap import load_registry, load_build_data
from .quest import RewardStep

__all__ = [
    'initialize_route_lookup', 'initialize_route_state', 'parse_route',
    'Action', 'ActionStep', 'EvaluateResult', 'Route', 'Step', 'RewardStep',
    'DiagnosticKind', 'RouteDiagnostic',
    'RouteLookup', 'RouteState',
    'Area', 'BuildData', 'RequiredGem',
    'WorldDataError',
    'load_registry', 'load_build_data',
]
