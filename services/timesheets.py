# timesheets/services/timesheets.py
from __future__ import annotations

import math
import uuid
from datetime import date
from numbers import Real
from typing import Optional

from core.errors import InvalidTaskInputError, TaskNotFoundError, TimesheetNotFoundError
from core.log import get_logger
from core.settings import TIMESHEETS
from helpers.datetime_utils import coerce_date
from models.timesheet import DailyTask, TimesheetDetails
from services.query import (
    PageRequest,
    PaginatedResponse,
    SortSpec,
    TimesheetFilters,
    query_timesheets,
)
from services.timesheet_repository import TimesheetRepository
from services.transitions import AddTask, DeleteTask, EditTask, TaskChange, apply_task_change

logger = get_logger("service")


def new_task_id() -> str:
    return uuid.uuid4().hex[:9]


class TimesheetService:
    _listeners = {
        "after_change": set(),
    }

    def __init__(self, repository: TimesheetRepository):
        self.repo = repository

    # ---------- events ----------
    @classmethod
    def subscribe(cls, event: str, callback):
        if event not in cls._listeners:
            raise ValueError(f"Unsupported event: {event}")
        cls._listeners[event].add(callback)

    @classmethod
    def unsubscribe(cls, event: str, callback):
        if event not in cls._listeners:
            return
        cls._listeners[event].discard(callback)

    @classmethod
    def _emit(cls, event: str, details: TimesheetDetails):
        listeners = list(cls._listeners.get(event, []))
        for listener in listeners:
            try:
                listener(details)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event)

    # ---------- queries ----------
    def list_page(
        self,
        filters: Optional[TimesheetFilters] = None,
        sort: Optional[SortSpec] = None,
        page: Optional[PageRequest] = None,
    ) -> PaginatedResponse:
        result = query_timesheets(self.repo.list(), filters, sort, page)
        logger.debug(
            "Listed page %s/%s (%d of %d timesheets)",
            result.page,
            result.display_total_pages,
            len(result.data),
            result.total,
        )
        return result

    def get_details(self, timesheet_id: int) -> TimesheetDetails:
        details = self.repo.get(timesheet_id)
        if details is None:
            raise TimesheetNotFoundError(timesheet_id)
        return details

    # ---------- mutations ----------
    def add_task(
        self,
        timesheet_id: int,
        *,
        date: date | str,
        project_name: str,
        type_of_work: str,
        description: str,
        hours: float,
    ) -> TimesheetDetails:
        task = DailyTask(
            id=new_task_id(),
            date=self._validate_date(date),
            project_name=self._validate_text(project_name, "Project"),
            type_of_work=self._validate_text(type_of_work, "Type of work"),
            description=self._validate_text(description, "Task description"),
            hours=self._validate_hours(hours),
        )
        return self._apply(timesheet_id, AddTask(task))

    def update_task(
        self,
        timesheet_id: int,
        task_id: str,
        *,
        date: date | str | None = None,
        project_name: Optional[str] = None,
        type_of_work: Optional[str] = None,
        description: Optional[str] = None,
        hours: Optional[float] = None,
    ) -> TimesheetDetails:
        changes = {}
        if date is not None:
            changes["date"] = self._validate_date(date)
        if project_name is not None:
            changes["project_name"] = self._validate_text(project_name, "Project")
        if type_of_work is not None:
            changes["type_of_work"] = self._validate_text(type_of_work, "Type of work")
        if description is not None:
            changes["description"] = self._validate_text(description, "Task description")
        if hours is not None:
            changes["hours"] = self._validate_hours(hours)
        return self._apply(timesheet_id, EditTask(task_id, changes))

    def delete_task(self, timesheet_id: int, task_id: str) -> TimesheetDetails:
        return self._apply(timesheet_id, DeleteTask(task_id))

    def _apply(self, timesheet_id: int, change: TaskChange) -> TimesheetDetails:
        current = self.get_details(timesheet_id)
        try:
            updated = apply_task_change(current, change)
        except TaskNotFoundError:
            logger.warning("Timesheet %s has no task %s", timesheet_id, getattr(change, "task_id", None))
            raise
        saved = self.repo.save(updated)
        logger.info(
            "%s on timesheet %s: %s -> %s h (%s)",
            type(change).__name__,
            timesheet_id,
            current.hours,
            saved.hours,
            saved.status,
        )
        self._emit("after_change", saved)
        return saved

    # ------------------------------------------------------------------
    def _validate_text(self, value: Optional[str], label: str) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise InvalidTaskInputError(f"{label} is required")
        return cleaned

    def _validate_hours(self, value) -> float:
        if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
            raise InvalidTaskInputError("Hours must be a number")
        if value < 0 or value > TIMESHEETS.max_entry_hours:
            raise InvalidTaskInputError(
                f"Hours must be between 0 and {TIMESHEETS.max_entry_hours:g}"
            )
        return float(value)

    def _validate_date(self, value) -> date:
        parsed = coerce_date(value)
        if parsed is None:
            raise InvalidTaskInputError(f"Invalid date: {value!r}")
        return parsed


__all__ = ["TimesheetService", "new_task_id"]
