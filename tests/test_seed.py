from datetime import date
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storage.seed import generate_dataset, generate_timesheet, start_date_for


def test_start_dates_are_mondays_one_week_apart():
    assert start_date_for(1) == date(2024, 1, 8)
    assert start_date_for(2) == date(2024, 1, 15)
    assert all(start_date_for(i).weekday() == 0 for i in range(1, 50))


def test_generation_is_deterministic():
    assert generate_timesheet(17) == generate_timesheet(17)


def test_dataset_size_and_ids():
    dataset = list(generate_dataset())
    assert len(dataset) == 200
    assert [d.id for d in dataset] == list(range(1, 201))


def test_dataset_covers_every_status():
    statuses = {d.status for d in generate_dataset()}
    assert statuses == {"completed", "incomplete", "missing"}


def test_generated_totals_follow_tasks():
    for details in generate_dataset(30):
        assert details.hours == sum(t.hours for t in details.tasks)
        assert all(details.contains(t.date) for t in details.tasks)
        if details.status == "completed":
            assert details.hours == 40


def test_generated_task_ids_encode_day_and_index():
    for details in generate_dataset(30):
        for task in details.tasks:
            ts_id, day, _ = task.id.split("-")
            assert int(ts_id) == details.id
            assert (task.date - details.start_date).days == int(day)
