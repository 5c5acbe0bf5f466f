# timesheets/models/timesheet.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from math import ceil
from typing import Iterable, List, Tuple

from core.derivation import DerivedTotals, action_for_status, derive_summary, status_for_hours
from core.errors import DuplicateTaskError, TaskOutsideWindowError
from core.settings import TIMESHEETS
from helpers.datetime_utils import format_date_range, window_dates

WEEKS_PER_BLOCK = 5


@dataclass(frozen=True)
class DailyTask:
    id: str
    date: date
    project_name: str
    description: str
    hours: float
    type_of_work: str = ""

    def with_changes(self, **fields) -> "DailyTask":
        return replace(self, **fields)


class _WeekWindow:
    """Identity and date-window properties shared by summaries and details."""

    id: int
    start_date: date

    @property
    def week(self) -> int:
        return ceil(self.id / WEEKS_PER_BLOCK)

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=TIMESHEETS.window_days - 1)

    @property
    def date_range(self) -> str:
        return format_date_range(self.start_date, self.end_date)

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class TimesheetSummary(_WeekWindow):
    """Aggregate view of one week; ``status`` and ``action`` follow ``hours``."""

    id: int
    start_date: date
    hours: float = 0

    @property
    def status(self) -> str:
        return status_for_hours(self.hours)

    @property
    def action(self) -> str:
        return action_for_status(self.status)


@dataclass(frozen=True)
class TimesheetDetails(_WeekWindow):
    """A week together with its tasks.

    Totals are never passed in: they are derived from ``tasks`` on access, and
    construction rejects tasks dated outside the week window.
    """

    id: int
    start_date: date
    tasks: Tuple[DailyTask, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.tasks, tuple):
            object.__setattr__(self, "tasks", tuple(self.tasks))
        seen = set()
        for task in self.tasks:
            if not self.contains(task.date):
                raise TaskOutsideWindowError(
                    f"{task.date.isoformat()} is outside {self.start_date.isoformat()}"
                    f"..{self.end_date.isoformat()}"
                )
            if task.id in seen:
                raise DuplicateTaskError(f"Duplicate task id {task.id}")
            seen.add(task.id)

    @property
    def totals(self) -> DerivedTotals:
        return derive_summary(self.tasks)

    @property
    def hours(self) -> float:
        return self.totals.hours

    @property
    def status(self) -> str:
        return self.totals.status

    @property
    def action(self) -> str:
        return self.totals.action

    @property
    def progress(self) -> float:
        return min(self.hours / TIMESHEETS.completed_hours, 1.0)

    def with_tasks(self, tasks: Iterable[DailyTask]) -> "TimesheetDetails":
        return TimesheetDetails(id=self.id, start_date=self.start_date, tasks=tuple(tasks))

    def find_task(self, task_id: str) -> DailyTask | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def days(self) -> List[Tuple[date, List[DailyTask]]]:
        buckets = {day: [] for day in window_dates(self.start_date, TIMESHEETS.window_days)}
        for task in self.tasks:
            buckets[task.date].append(task)
        return list(buckets.items())

    def summary(self) -> TimesheetSummary:
        return TimesheetSummary(id=self.id, start_date=self.start_date, hours=self.hours)


__all__ = ["DailyTask", "TimesheetDetails", "TimesheetSummary"]
