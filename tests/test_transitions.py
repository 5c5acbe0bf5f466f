from datetime import date
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from core.errors import DuplicateTaskError, TaskNotFoundError, TaskOutsideWindowError
from models.timesheet import DailyTask, TimesheetDetails
from services.transitions import AddTask, DeleteTask, EditTask, apply_task_change

MONDAY = date(2024, 1, 8)


def _task(task_id, hours=4, day=MONDAY):
    return DailyTask(
        id=task_id,
        date=day,
        project_name="Project A",
        description="Homepage Development",
        hours=hours,
        type_of_work="Bug fixes",
    )


@pytest.fixture()
def week():
    return TimesheetDetails(id=1, start_date=MONDAY, tasks=[_task("a"), _task("b"), _task("c")])


def test_details_derive_totals_from_tasks(week):
    assert week.hours == 12
    assert week.status == "incomplete"
    assert week.action == "Update"
    assert week.summary().hours == 12
    assert week.summary().status == "incomplete"


def test_details_window_properties(week):
    assert week.end_date == date(2024, 1, 12)
    assert week.week == 1
    assert week.date_range == "8 January - 12 January, 2024"
    assert [d for d, _ in week.days()] == [date(2024, 1, 8 + i) for i in range(5)]
    assert [t.id for t in dict(week.days())[MONDAY]] == ["a", "b", "c"]


def test_details_reject_out_of_window_task():
    with pytest.raises(TaskOutsideWindowError):
        TimesheetDetails(id=1, start_date=MONDAY, tasks=[_task("a", day=date(2024, 1, 13))])


def test_details_reject_duplicate_ids():
    with pytest.raises(DuplicateTaskError):
        TimesheetDetails(id=1, start_date=MONDAY, tasks=[_task("a"), _task("a")])


def test_add_task_recomputes(week):
    updated = apply_task_change(week, AddTask(_task("d", hours=28, day=date(2024, 1, 12))))
    assert updated.hours == 40
    assert updated.status == "completed"
    assert updated.action == "View"
    assert week.hours == 12


def test_add_task_outside_window_is_rejected(week):
    with pytest.raises(TaskOutsideWindowError):
        apply_task_change(week, AddTask(_task("d", day=date(2024, 1, 15))))


def test_edit_task_keeps_id_and_position(week):
    updated = apply_task_change(week, EditTask("b", {"hours": 8, "description": "Review"}))
    assert [t.id for t in updated.tasks] == ["a", "b", "c"]
    assert updated.find_task("b").hours == 8
    assert updated.find_task("b").description == "Review"
    assert updated.hours == 16


def test_edit_unknown_task_raises(week):
    with pytest.raises(TaskNotFoundError):
        apply_task_change(week, EditTask("zzz", {"hours": 1}))


def test_edit_rejects_unknown_fields(week):
    with pytest.raises(ValueError):
        apply_task_change(week, EditTask("a", {"id": "x"}))


def test_edit_moving_task_out_of_window_is_rejected(week):
    with pytest.raises(TaskOutsideWindowError):
        apply_task_change(week, EditTask("a", {"date": date(2024, 1, 7)}))


def test_delete_all_tasks_becomes_missing(week):
    result = week
    for task_id in ("a", "b", "c"):
        result = apply_task_change(result, DeleteTask(task_id))
    assert result.tasks == ()
    assert result.hours == 0
    assert result.status == "missing"
    assert result.action == "Create"


def test_delete_unknown_task_is_noop(week):
    assert apply_task_change(week, DeleteTask("zzz")) == week


def test_progress_is_capped(week):
    assert week.progress == pytest.approx(0.3)
    full = apply_task_change(week, AddTask(_task("d", hours=40)))
    assert full.progress == 1.0
