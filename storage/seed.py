"""Deterministic demo dataset standing in for a real timesheet backend."""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Iterator, List, Optional

from core.settings import TIMESHEETS
from models.timesheet import DailyTask, TimesheetDetails

PLACEHOLDER_DESCRIPTION = "Homepage Development"
PLACEHOLDER_PROJECT = "Project Name"
PLACEHOLDER_WORK_TYPE = "Feature Development"
TASK_HOURS = 4

_SEED_MULTIPLIER = 54321


def start_date_for(timesheet_id: int, *, epoch: Optional[date] = None) -> date:
    base = epoch or TIMESHEETS.dataset_epoch
    return base + timedelta(days=7 * timesheet_id)


def _task(timesheet_id: int, start: date, day: int, index: int) -> DailyTask:
    return DailyTask(
        id=f"{timesheet_id}-{day}-{index}",
        date=start + timedelta(days=day),
        project_name=PLACEHOLDER_PROJECT,
        description=PLACEHOLDER_DESCRIPTION,
        hours=TASK_HOURS,
        type_of_work=PLACEHOLDER_WORK_TYPE,
    )


def generate_timesheet(timesheet_id: int, *, epoch: Optional[date] = None) -> TimesheetDetails:
    """Build the demo week for ``timesheet_id``.

    A third of the weeks are full (40 h), a third partial and a third empty.
    The same id always yields the same tasks.
    """
    rng = random.Random(timesheet_id * _SEED_MULTIPLIER)
    start = start_date_for(timesheet_id, epoch=epoch)
    days = TIMESHEETS.window_days
    per_day: List[int] = [0] * days

    shape = rng.random()
    if shape > 0.66:
        full_week = int(TIMESHEETS.completed_hours // TASK_HOURS)
        for n in range(full_week):
            per_day[n % days] += 1
    elif shape > 0.33:
        for _ in range(rng.randint(1, 9)):
            per_day[rng.randrange(days)] += 1

    tasks = [
        _task(timesheet_id, start, day, index)
        for day, count in enumerate(per_day)
        for index in range(count)
    ]
    return TimesheetDetails(id=timesheet_id, start_date=start, tasks=tasks)


def generate_dataset(count: Optional[int] = None, *, epoch: Optional[date] = None) -> Iterator[TimesheetDetails]:
    total = TIMESHEETS.dataset_size if count is None else count
    for timesheet_id in range(1, total + 1):
        yield generate_timesheet(timesheet_id, epoch=epoch)


__all__ = ["generate_dataset", "generate_timesheet", "start_date_for"]
