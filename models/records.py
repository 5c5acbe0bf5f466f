"""SQLModel tables backing the timesheet repository.

Rows hold identity, window and task data only; totals and status are derived
when rows are turned back into :mod:`models.timesheet` values.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from helpers.datetime_utils import utc_now


class TimesheetRecord(SQLModel, table=True):
    pk: Optional[int] = Field(default=None, primary_key=True)
    id: int = Field(index=True)
    owner_id: str = Field(index=True)
    start_date: date
    end_date: date
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TaskRecord(SQLModel, table=True):
    pk: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(index=True)
    timesheet_id: int = Field(index=True)
    owner_id: str = Field(index=True)
    day: date
    project_name: str
    type_of_work: str = ""
    description: str
    hours: float = 0.0
    position: int = 0
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


__all__ = ["TaskRecord", "TimesheetRecord"]
