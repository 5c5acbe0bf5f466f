from datetime import date
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from sqlmodel import select

from core.errors import TimesheetNotFoundError
from models import TaskRecord, TimesheetRecord
from models.timesheet import DailyTask, TimesheetDetails
from services.query import TimesheetFilters
from services.timesheet_repository import SqlTimesheetRepository
from storage.db import init_db, make_engine, session_factory_for
from storage.seed import generate_timesheet


@pytest.fixture()
def session_factory():
    engine = make_engine("sqlite://")
    init_db(engine)
    return session_factory_for(engine)


@pytest.fixture()
def repo(session_factory):
    return SqlTimesheetRepository("owner-1", session_factory=session_factory, seed_count=20)


def test_session_factory_shares_in_memory_database(session_factory):
    with session_factory() as s:
        s.add(TimesheetRecord(id=1, owner_id="x", start_date=date(2024, 1, 8), end_date=date(2024, 1, 12)))
        s.commit()
    with session_factory() as s:
        assert [r.id for r in s.exec(select(TimesheetRecord)).all()] == [1]


def test_first_access_seeds_owner_collection(repo, session_factory):
    summaries = repo.list()
    assert [s.id for s in summaries] == list(range(1, 21))
    with session_factory() as s:
        rows = s.exec(select(TimesheetRecord)).all()
        assert len(rows) == 20


def test_seeding_happens_once(repo, session_factory):
    repo.list()
    again = SqlTimesheetRepository("owner-1", session_factory=session_factory, seed_count=20)
    again.list()
    with session_factory() as s:
        assert len(s.exec(select(TimesheetRecord)).all()) == 20


def test_owners_are_isolated(repo, session_factory):
    other = SqlTimesheetRepository("owner-2", session_factory=session_factory, seed_count=5)
    assert len(repo.list()) == 20
    assert len(other.list()) == 5


def test_list_summaries_match_generated_details(repo):
    summaries = {s.id: s for s in repo.list()}
    for timesheet_id in (1, 7, 13):
        expected = generate_timesheet(timesheet_id)
        assert summaries[timesheet_id].hours == expected.hours
        assert summaries[timesheet_id].status == expected.status
        assert summaries[timesheet_id].start_date == expected.start_date


def test_list_applies_filters(repo):
    result = repo.list(TimesheetFilters(status="missing"))
    assert result
    assert all(s.status == "missing" for s in result)


def test_get_round_trips_tasks_in_order(repo):
    details = repo.get(3)
    assert details == generate_timesheet(3)


def test_get_unknown_returns_none(repo):
    assert repo.get(999) is None


def test_save_replaces_task_set(repo, session_factory):
    details = repo.get(1)
    task = DailyTask(
        id="new-1",
        date=details.start_date,
        project_name="Internal",
        description="Planning",
        hours=2.5,
        type_of_work="Meeting",
    )
    updated = details.with_tasks((task,))
    repo.save(updated)

    loaded = repo.get(1)
    assert loaded.tasks == (task,)
    assert loaded.hours == 2.5
    assert {s.id: s for s in repo.list()}[1].hours == 2.5
    with session_factory() as s:
        rows = s.exec(select(TaskRecord).where(TaskRecord.timesheet_id == 1)).all()
        assert len(rows) == 1


def test_save_unknown_timesheet_raises(repo):
    with pytest.raises(TimesheetNotFoundError):
        repo.save(TimesheetDetails(id=999, start_date=date(2024, 1, 8)))
