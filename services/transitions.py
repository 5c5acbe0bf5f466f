"""Pure transitions over a timesheet's task list.

Every transition returns a new :class:`TimesheetDetails`, whose totals are
derived from the resulting tasks, so a caller cannot change a task without
the week's hours, status and action following along.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from core.errors import TaskNotFoundError
from models.timesheet import DailyTask, TimesheetDetails

EDITABLE_FIELDS = ("date", "project_name", "type_of_work", "description", "hours")


@dataclass(frozen=True)
class AddTask:
    task: DailyTask


@dataclass(frozen=True)
class EditTask:
    task_id: str
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteTask:
    task_id: str


TaskChange = Union[AddTask, EditTask, DeleteTask]


def apply_task_change(details: TimesheetDetails, change: TaskChange) -> TimesheetDetails:
    if isinstance(change, AddTask):
        return details.with_tasks(details.tasks + (change.task,))

    if isinstance(change, EditTask):
        if details.find_task(change.task_id) is None:
            raise TaskNotFoundError(change.task_id)
        unknown = set(change.changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unsupported task fields: {', '.join(sorted(unknown))}")
        return details.with_tasks(
            task.with_changes(**change.changes) if task.id == change.task_id else task
            for task in details.tasks
        )

    if isinstance(change, DeleteTask):
        return details.with_tasks(task for task in details.tasks if task.id != change.task_id)

    raise TypeError(f"Unsupported task change: {change!r}")


__all__ = ["AddTask", "DeleteTask", "EditTask", "TaskChange", "apply_task_change"]
