"""Diagnostics produced while compiling a route.

Evaluators never raise: a rejected action comes back as a ``RouteDiagnostic``
value. ``str(diagnostic)`` is the plain message shown to route authors.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

ERROR_INVALID_FORMAT = "invalid format"
ERROR_MISSING_AREA = "area does not exist"
ERROR_AREA_NO_WAYPOINT = "area does not have a waypoint"


class DiagnosticKind(str, Enum):
    FORMAT = "format"
    UNKNOWN_AREA = "unknown_area"
    MISSING_WAYPOINT = "missing_waypoint"
    SEMANTIC = "semantic"
    # post-pass, informational only
    UNUSED_WAYPOINT = "unused_waypoint"
    MISSING_CRAFTING_AREA = "missing_crafting_area"


@dataclass(frozen=True)
class RouteDiagnostic:
    kind: DiagnosticKind
    message: str
    token: Optional[List[str]] = None
    area_id: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def token_text(self) -> str:
        """Token as written in the route, e.g. ``{enter|1_1_2}``."""
        if self.token is None:
            return ""
        return "{" + "|".join(self.token) + "}"


def format_error(token: List[str]) -> RouteDiagnostic:
    return RouteDiagnostic(DiagnosticKind.FORMAT, ERROR_INVALID_FORMAT, token)


def missing_area(token: List[str], area_id: str) -> RouteDiagnostic:
    return RouteDiagnostic(DiagnosticKind.UNKNOWN_AREA, ERROR_MISSING_AREA, token, area_id)


def no_waypoint(token: List[str], area_id: str) -> RouteDiagnostic:
    return RouteDiagnostic(DiagnosticKind.MISSING_WAYPOINT, ERROR_AREA_NO_WAYPOINT, token, area_id)


def semantic_error(token: List[str], message: str, area_id: Optional[str] = None) -> RouteDiagnostic:
    return RouteDiagnostic(DiagnosticKind.SEMANTIC, message, token, area_id)
