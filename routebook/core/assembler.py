"""Route assembler: turns route documents into compiled routes.

Drives the lexer and the verb table over every line of every document in
order, against one shared ``RouteState``, then runs the end-of-run checks.
Diagnostics go to the module logger (and to an optional collecting list);
they never stop compilation.
"""
from __future__ import annotations
import logging
from typing import List, Optional
from .. import config
from .actions import ActionStep, Route, Step
from .dispatch import evaluate_action
from .errors import DiagnosticKind, RouteDiagnostic
from .lexer import split_lines, tokenize_line
from .model.base import BuildData
from .registry import ContentRegistry
from .state import RouteLookup, RouteState

log = logging.getLogger(__name__)


def initialize_route_lookup(
    build_data: Optional[BuildData] = None,
    registry: Optional[ContentRegistry] = None,
) -> RouteLookup:
    """Build the act -> town table (and attach build data) once per run."""
    if registry is None:
        from ..bootstrap import load_registry
        registry = load_registry()
    return RouteLookup(registry=registry, towns=dict(registry.town_index), build_data=build_data)


def initialize_route_state(
    start_area_id: Optional[str] = None,
    start_town_id: Optional[str] = None,
) -> RouteState:
    return RouteState(
        current_area_id=start_area_id or config.get_start_area_id(),
        last_town_area_id=start_town_id or config.get_start_town_id(),
    )


def _report(diagnostic: RouteDiagnostic, sink: Optional[List[RouteDiagnostic]]) -> None:
    if sink is not None:
        sink.append(diagnostic)


def _compile_line(
    line: str,
    lookup: RouteLookup,
    state: RouteState,
    route: Route,
    sink: Optional[List[RouteDiagnostic]],
) -> None:
    step = ActionStep()
    additional_steps: List[Step] = []
    for token in tokenize_line(line):
        if isinstance(token, str):
            step.parts.append(token)
            continue
        result = evaluate_action(token, lookup, state)
        if isinstance(result, RouteDiagnostic):
            log.warning("%s: %s", result.message, result.token_text())
            _report(result, sink)
            continue
        if result.action is not None:
            step.parts.append(result.action)
        additional_steps.extend(result.additional_steps)

    if step.has_content():
        route.append(step)
    route.extend(additional_steps)


def check_unused_waypoints(state: RouteState) -> List[RouteDiagnostic]:
    return [
        RouteDiagnostic(
            DiagnosticKind.UNUSED_WAYPOINT,
            f"unused waypoint {area_id}",
            area_id=area_id,
        )
        for area_id in sorted(state.unused_waypoints())
    ]


def check_crafting_areas(lookup: RouteLookup, state: RouteState) -> List[RouteDiagnostic]:
    issues: List[RouteDiagnostic] = []
    for area in lookup.registry.crafting_areas():
        if area.id in state.crafting_areas:
            continue
        issues.append(RouteDiagnostic(
            DiagnosticKind.MISSING_CRAFTING_AREA,
            f"missing crafting area {area.id}, {', '.join(area.crafting_recipes)}",
            area_id=area.id,
        ))
    return issues


def parse_route(
    documents: List[str],
    lookup: RouteLookup,
    state: RouteState,
    diagnostics: Optional[List[RouteDiagnostic]] = None,
) -> List[Route]:
    """Compile every document, in order, against the shared ``state``.

    Returns one route per document. ``state`` is mutated in place. When
    ``diagnostics`` is given, every diagnostic is also appended to it.
    """
    routes: List[Route] = []
    for document in documents:
        route: Route = []
        for line in split_lines(document):
            if not line.strip():
                continue
            _compile_line(line, lookup, state, route, diagnostics)
        routes.append(route)

    for issue in check_unused_waypoints(state) + check_crafting_areas(lookup, state):
        log.info(issue.message)
        _report(issue, diagnostics)

    return routes
