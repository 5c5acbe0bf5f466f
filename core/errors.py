"""Exceptions raised by the timesheet services.

All of them derive from :class:`ValueError` so UI code can keep catching the
single exception type it already reports to the user.
"""
from __future__ import annotations


class TimesheetError(ValueError):
    pass


class TimesheetNotFoundError(TimesheetError):
    def __init__(self, timesheet_id: int):
        super().__init__(f"Timesheet {timesheet_id} not found")
        self.timesheet_id = timesheet_id


class TaskNotFoundError(TimesheetError):
    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskOutsideWindowError(TimesheetError):
    pass


class DuplicateTaskError(TimesheetError):
    pass


class InvalidTaskInputError(TimesheetError):
    pass


__all__ = [
    "TimesheetError",
    "TimesheetNotFoundError",
    "TaskNotFoundError",
    "TaskOutsideWindowError",
    "DuplicateTaskError",
    "InvalidTaskInputError",
]
