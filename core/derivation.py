"""Status derivation for weekly timesheets.

A timesheet's total hours, status and recommended action are always computed
from its task list; nothing else sets them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Protocol

from core.settings import TIMESHEETS

STATUS_COMPLETED = "completed"
STATUS_INCOMPLETE = "incomplete"
STATUS_MISSING = "missing"

STATUSES = (STATUS_COMPLETED, STATUS_INCOMPLETE, STATUS_MISSING)

# Sentinel accepted by the status filter.
ALL_STATUSES = "all"

ACTION_VIEW = "View"
ACTION_UPDATE = "Update"
ACTION_CREATE = "Create"

STATUS_META: Dict[str, Dict[str, str]] = {
    STATUS_COMPLETED: {
        "label": "Completed",
        "action": ACTION_VIEW,
        "color": "#03543F",    # green-900
        "bgcolor": "#DEF7EC",  # green-100
    },
    STATUS_INCOMPLETE: {
        "label": "Incomplete",
        "action": ACTION_UPDATE,
        "color": "#723B13",    # yellow-900
        "bgcolor": "#FDF6B2",  # yellow-100
    },
    STATUS_MISSING: {
        "label": "Missing",
        "action": ACTION_CREATE,
        "color": "#99154B",    # pink-900
        "bgcolor": "#FCE8F3",  # pink-100
    },
}


class HasHours(Protocol):
    hours: float


@dataclass(frozen=True)
class DerivedTotals:
    hours: float
    status: str
    action: str


def status_for_hours(hours: float, *, threshold: float | None = None) -> str:
    limit = TIMESHEETS.completed_hours if threshold is None else threshold
    if hours >= limit:
        return STATUS_COMPLETED
    if hours > 0:
        return STATUS_INCOMPLETE
    return STATUS_MISSING


def action_for_status(status: str) -> str:
    return STATUS_META[status]["action"]


def derive_summary(tasks: Iterable[HasHours]) -> DerivedTotals:
    """Return ``(hours, status, action)`` for a timesheet's tasks.

    Zero-hour tasks count as present but add nothing; totals above the
    completion threshold stay ``completed``.
    """
    hours = sum((task.hours for task in tasks), 0)
    status = status_for_hours(hours)
    return DerivedTotals(hours=hours, status=status, action=action_for_status(status))


def status_label(status: str) -> str:
    meta = STATUS_META.get(status)
    return meta["label"] if meta else status


def status_color(status: str) -> str:
    return STATUS_META.get(status, STATUS_META[STATUS_MISSING])["color"]


def status_bgcolor(status: str) -> str:
    return STATUS_META.get(status, STATUS_META[STATUS_MISSING])["bgcolor"]


def status_options() -> Dict[str, str]:
    """Return mapping of dropdown values -> labels, ``all`` first."""
    options = {ALL_STATUSES: "All statuses"}
    options.update({status: meta["label"] for status, meta in STATUS_META.items()})
    return options


__all__ = [
    "ACTION_CREATE",
    "ACTION_UPDATE",
    "ACTION_VIEW",
    "ALL_STATUSES",
    "DerivedTotals",
    "STATUSES",
    "STATUS_COMPLETED",
    "STATUS_INCOMPLETE",
    "STATUS_META",
    "STATUS_MISSING",
    "action_for_status",
    "derive_summary",
    "status_bgcolor",
    "status_color",
    "status_for_hours",
    "status_label",
    "status_options",
]
