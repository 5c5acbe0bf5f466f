from datetime import date
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from core.derivation import (
    ACTION_CREATE,
    ACTION_UPDATE,
    ACTION_VIEW,
    STATUS_COMPLETED,
    STATUS_INCOMPLETE,
    STATUS_MISSING,
    action_for_status,
    derive_summary,
    status_for_hours,
    status_options,
)
from models.timesheet import DailyTask


def _tasks(*hours):
    return [
        DailyTask(
            id=f"t{i}",
            date=date(2024, 1, 8),
            project_name="Project A",
            description="Homepage Development",
            hours=h,
        )
        for i, h in enumerate(hours)
    ]


def test_empty_task_list_is_missing():
    result = derive_summary([])
    assert result.hours == 0
    assert result.status == STATUS_MISSING
    assert result.action == ACTION_CREATE


def test_three_four_hour_tasks_are_incomplete():
    result = derive_summary(_tasks(4, 4, 4))
    assert result.hours == 12
    assert result.status == STATUS_INCOMPLETE
    assert result.action == ACTION_UPDATE


def test_exactly_forty_hours_is_completed():
    result = derive_summary(_tasks(8, 8, 8, 8, 8))
    assert result.hours == 40
    assert result.status == STATUS_COMPLETED
    assert result.action == ACTION_VIEW


def test_overtime_saturates_at_completed():
    result = derive_summary(_tasks(24, 24, 24))
    assert result.hours == 72
    assert result.status == STATUS_COMPLETED


def test_zero_hour_task_alone_is_missing_but_does_not_hide_others():
    assert derive_summary(_tasks(0)).status == STATUS_MISSING
    assert derive_summary(_tasks(0, 2)).status == STATUS_INCOMPLETE


@pytest.mark.parametrize("hours", [0.5, 1, 20, 39, 39.5])
def test_partial_hours_are_incomplete(hours):
    assert status_for_hours(hours) == STATUS_INCOMPLETE


def test_hours_equal_sum_of_tasks():
    tasks = _tasks(1.5, 2.25, 0, 7)
    assert derive_summary(tasks).hours == sum(t.hours for t in tasks)


def test_derivation_is_idempotent():
    tasks = _tasks(4, 4, 4)
    assert derive_summary(tasks) == derive_summary(tasks)


def test_custom_threshold():
    assert status_for_hours(20, threshold=20) == STATUS_COMPLETED
    assert status_for_hours(19, threshold=20) == STATUS_INCOMPLETE


def test_action_mapping():
    assert action_for_status(STATUS_COMPLETED) == ACTION_VIEW
    assert action_for_status(STATUS_INCOMPLETE) == ACTION_UPDATE
    assert action_for_status(STATUS_MISSING) == ACTION_CREATE


def test_status_options_start_with_all():
    options = status_options()
    assert list(options)[0] == "all"
    assert set(options) == {"all", STATUS_COMPLETED, STATUS_INCOMPLETE, STATUS_MISSING}
