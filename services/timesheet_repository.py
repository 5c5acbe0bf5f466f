from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Protocol

from sqlmodel import Session, select

from core.errors import TimesheetNotFoundError
from core.log import get_logger
from helpers.datetime_utils import utc_now
from models.records import TaskRecord, TimesheetRecord
from models.timesheet import DailyTask, TimesheetDetails, TimesheetSummary
from services.query import TimesheetFilters, apply_filters
from storage.db import get_session
from storage.seed import generate_dataset

logger = get_logger("storage")

SessionFactory = Callable[[], Session]


class TimesheetRepository(Protocol):
    def list(self, filters: Optional[TimesheetFilters] = None) -> List[TimesheetSummary]: ...

    def get(self, timesheet_id: int) -> Optional[TimesheetDetails]: ...

    def save(self, details: TimesheetDetails) -> TimesheetDetails: ...


def _to_task(row: TaskRecord) -> DailyTask:
    return DailyTask(
        id=row.id,
        date=row.day,
        project_name=row.project_name,
        type_of_work=row.type_of_work,
        description=row.description,
        hours=row.hours,
    )


def _task_rows(owner_id: str, details: TimesheetDetails) -> Iterable[TaskRecord]:
    for position, task in enumerate(details.tasks):
        yield TaskRecord(
            id=task.id,
            timesheet_id=details.id,
            owner_id=owner_id,
            day=task.date,
            project_name=task.project_name,
            type_of_work=task.type_of_work,
            description=task.description,
            hours=task.hours,
            position=position,
        )


class SqlTimesheetRepository:
    """Timesheets of one owner kept in a SQLModel store.

    ``owner_id`` is the opaque session identity; it is only used to keep
    collections apart. An owner's collection is seeded with the demo dataset
    on first access.
    """

    def __init__(
        self,
        owner_id: str,
        *,
        session_factory: Optional[SessionFactory] = None,
        seed_count: Optional[int] = None,
    ):
        self.owner_id = owner_id
        self._session_factory = session_factory or get_session
        self._seed_count = seed_count
        self._seeded = False

    # ---------- seeding ----------
    def ensure_seeded(self) -> None:
        if self._seeded:
            return
        with self._session_factory() as s:
            stmt = select(TimesheetRecord.pk).where(TimesheetRecord.owner_id == self.owner_id)
            if s.exec(stmt).first() is None:
                count = 0
                for details in generate_dataset(self._seed_count):
                    s.add(
                        TimesheetRecord(
                            id=details.id,
                            owner_id=self.owner_id,
                            start_date=details.start_date,
                            end_date=details.end_date,
                        )
                    )
                    for row in _task_rows(self.owner_id, details):
                        s.add(row)
                    count += 1
                s.commit()
                logger.info("Seeded %d demo timesheets for owner %s", count, self.owner_id)
        self._seeded = True

    # ---------- reads ----------
    def list(self, filters: Optional[TimesheetFilters] = None) -> List[TimesheetSummary]:
        self.ensure_seeded()
        with self._session_factory() as s:
            sheets = s.exec(
                select(TimesheetRecord)
                .where(TimesheetRecord.owner_id == self.owner_id)
                .order_by(TimesheetRecord.id.asc())
            ).all()
            hours = {}
            tasks = s.exec(select(TaskRecord).where(TaskRecord.owner_id == self.owner_id)).all()
            for task in tasks:
                hours[task.timesheet_id] = hours.get(task.timesheet_id, 0) + task.hours
            summaries = [
                TimesheetSummary(id=row.id, start_date=row.start_date, hours=hours.get(row.id, 0))
                for row in sheets
            ]
        return apply_filters(summaries, filters)

    def get(self, timesheet_id: int) -> Optional[TimesheetDetails]:
        self.ensure_seeded()
        with self._session_factory() as s:
            sheet = self._get_sheet(s, timesheet_id)
            if not sheet:
                return None
            rows = s.exec(
                select(TaskRecord)
                .where(TaskRecord.owner_id == self.owner_id, TaskRecord.timesheet_id == timesheet_id)
                .order_by(TaskRecord.position.asc())
            ).all()
            return TimesheetDetails(
                id=sheet.id,
                start_date=sheet.start_date,
                tasks=tuple(_to_task(row) for row in rows),
            )

    # ---------- writes ----------
    def save(self, details: TimesheetDetails) -> TimesheetDetails:
        self.ensure_seeded()
        with self._session_factory() as s:
            sheet = self._get_sheet(s, details.id)
            if not sheet:
                raise TimesheetNotFoundError(details.id)
            existing = s.exec(
                select(TaskRecord).where(
                    TaskRecord.owner_id == self.owner_id,
                    TaskRecord.timesheet_id == details.id,
                )
            ).all()
            for row in existing:
                s.delete(row)
            for row in _task_rows(self.owner_id, details):
                s.add(row)
            sheet.updated_at = utc_now()
            s.add(sheet)
            s.commit()
        logger.info(
            "Saved timesheet %s: %d tasks, %s h, %s",
            details.id,
            len(details.tasks),
            details.hours,
            details.status,
        )
        return details

    def _get_sheet(self, s: Session, timesheet_id: int) -> Optional[TimesheetRecord]:
        stmt = select(TimesheetRecord).where(
            TimesheetRecord.owner_id == self.owner_id,
            TimesheetRecord.id == timesheet_id,
        )
        return s.exec(stmt).first()


__all__ = ["SqlTimesheetRepository", "TimesheetRepository"]
