"""Heuristic phrase classifiers (core domain).

These predicates work on raw input with plain substring checks and are
independent of the cached vocabulary. Callers use them to branch on coarse
signals before or after normalization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

Severity = Literal["low", "medium", "high"]

ROUTE_COMPLICATION_PHRASES = ("jhol in the route", "route mein problem", "delivery stuck")
DADAR_HANDOFF_FAILED_PHRASES = ("dadar handoff failed", "dadar miss ho gaya", "sorting time nikla")
DELIVERY_CONFIRMED_PHRASES = ("packet chalega", "delivery confirmed", "route ok")

HIGH_SEVERITY_KEYWORDS = ("emergency", "urgent", "critical", "immediate")
LOW_SEVERITY_KEYWORDS = ("minor", "small", "slight", "little")


@dataclass(frozen=True)
class Classification:
    """All heuristic signals for one input."""

    route_complication: bool
    dadar_handoff_failed: bool
    delivery_confirmed: bool
    severity: Severity


def _contains_any(text: str, phrases: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(phrase in lowered for phrase in phrases)


def is_route_complication(text: str) -> bool:
    return _contains_any(text, ROUTE_COMPLICATION_PHRASES)


def is_dadar_handoff_failed(text: str) -> bool:
    return _contains_any(text, DADAR_HANDOFF_FAILED_PHRASES)


def is_delivery_confirmed(text: str) -> bool:
    return _contains_any(text, DELIVERY_CONFIRMED_PHRASES)


def complication_severity(text: str) -> Severity:
    """Grade a complication message by its urgency keywords.

    High-severity keywords win over low-severity ones; anything else is medium.
    """

    if _contains_any(text, HIGH_SEVERITY_KEYWORDS):
        return "high"
    if _contains_any(text, LOW_SEVERITY_KEYWORDS):
        return "low"
    return "medium"


def classify(text: str) -> Classification:
    """Return every heuristic signal for the given text."""

    return Classification(
        route_complication=is_route_complication(text),
        dadar_handoff_failed=is_dadar_handoff_failed(text),
        delivery_confirmed=is_delivery_confirmed(text),
        severity=complication_severity(text),
    )
