"""
Waste report status workflow.

    REPORTED → EN_ROUTE → COLLECTED

This module owns the transition table. Every path that changes a report's
status (API, seeder, scripts) goes through validate_transition, so illegal
moves are rejected regardless of where they come from.
"""
from typing import Dict, Optional, Set, Union

from wte_backend.domain.errors import ValidationError
from wte_backend.domain.models import WasteStatus


STATUS_TRANSITIONS: Dict[WasteStatus, Set[WasteStatus]] = {
    WasteStatus.REPORTED: {WasteStatus.EN_ROUTE},
    WasteStatus.EN_ROUTE: {WasteStatus.COLLECTED},
    WasteStatus.COLLECTED: set(),
}

INITIAL_STATUS = WasteStatus.REPORTED

# Position of each status in the workflow, used for list ordering
STATUS_ORDER: Dict[WasteStatus, int] = {
    WasteStatus.REPORTED: 0,
    WasteStatus.EN_ROUTE: 1,
    WasteStatus.COLLECTED: 2,
}


def parse_status(value: Union[str, WasteStatus]) -> WasteStatus:
    """
    Convert a raw status literal to WasteStatus.

    Raises:
        ValidationError: If the literal is not one of the workflow states
    """
    if isinstance(value, WasteStatus):
        return value
    try:
        return WasteStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in WasteStatus)
        raise ValidationError(f"Unknown status '{value}'. Expected one of: {allowed}")


def can_transition(current: WasteStatus, requested: WasteStatus) -> bool:
    return requested in STATUS_TRANSITIONS.get(current, set())


def next_status(current: WasteStatus) -> Optional[WasteStatus]:
    """The single forward step from current, or None when terminal."""
    allowed = STATUS_TRANSITIONS.get(current, set())
    return next(iter(allowed)) if allowed else None


def is_terminal(status: WasteStatus) -> bool:
    return not STATUS_TRANSITIONS.get(status)


def validate_transition(current: Union[str, WasteStatus], requested: Union[str, WasteStatus]) -> WasteStatus:
    """
    Check that moving from current to requested is a legal workflow step.

    Returns:
        The requested status as a WasteStatus

    Raises:
        ValidationError: Unknown literal, same-state, backward, skipped,
            or any move out of the terminal state
    """
    current = parse_status(current)
    requested = parse_status(requested)

    if can_transition(current, requested):
        return requested

    if current == requested:
        raise ValidationError(f"Report is already {current.value}")
    if is_terminal(current):
        raise ValidationError(f"Report is {current.value}; no further status changes are allowed")

    expected = next_status(current)
    raise ValidationError(
        f"Cannot change status from {current.value} to {requested.value}; "
        f"next allowed status is {expected.value}"
    )
