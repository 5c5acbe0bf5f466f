"""Domain values and ORM rows exposed by the Timesheets application."""
from .records import TaskRecord, TimesheetRecord
from .timesheet import DailyTask, TimesheetDetails, TimesheetSummary

__all__ = ["DailyTask", "TaskRecord", "TimesheetDetails", "TimesheetRecord", "TimesheetSummary"]
