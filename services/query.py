"""Filter, sort and paginate timesheet summaries.

Stages always run in the same order: status filter, date-range filter, sort,
paginate. None of them raises for odd input; an unusable parameter simply
leaves the collection as it was (or empty, for an unreadable date bound).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from math import ceil
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar, Union

from core.derivation import ALL_STATUSES
from core.settings import TIMESHEETS
from helpers.datetime_utils import coerce_date
from models.timesheet import TimesheetSummary

T = TypeVar("T")

DateBound = Union[date, datetime, str, None]

SORT_ASC = "asc"
SORT_DESC = "desc"

SORT_KEYS: Dict[str, Callable[[TimesheetSummary], Any]] = {
    "week": lambda s: s.week,
    # The display label is not date-ordered, compare the window start instead.
    "dateRange": lambda s: s.start_date,
    "hours": lambda s: s.hours,
    "status": lambda s: s.status,
}


@dataclass(frozen=True)
class TimesheetFilters:
    status: Optional[str] = None
    date_start: DateBound = None
    date_end: DateBound = None


@dataclass(frozen=True)
class SortSpec:
    field: Optional[str] = None
    order: str = SORT_ASC

    @property
    def descending(self) -> bool:
        return self.order == SORT_DESC


@dataclass(frozen=True)
class PageRequest:
    number: int = 1
    size: int = TIMESHEETS.default_page_size

    def normalized(self) -> "PageRequest":
        number = self.number if self.number and self.number > 0 else 1
        size = self.size if self.size and self.size > 0 else TIMESHEETS.default_page_size
        return PageRequest(number=number, size=size)


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    data: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = TIMESHEETS.default_page_size
    total_pages: int = 0

    @property
    def display_total_pages(self) -> int:
        return max(1, self.total_pages)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def filter_by_status(summaries: Sequence[TimesheetSummary], status: Optional[str]) -> List[TimesheetSummary]:
    if not status or status == ALL_STATUSES:
        return list(summaries)
    return [s for s in summaries if s.status == status]


def filter_by_date_range(
    summaries: Sequence[TimesheetSummary],
    date_start: DateBound,
    date_end: DateBound,
) -> List[TimesheetSummary]:
    """Keep summaries whose window overlaps ``[date_start, date_end]``.

    Both bounds are required for the filter to apply. A bound that cannot be
    read as a date matches nothing.
    """
    if not date_start or not date_end:
        return list(summaries)
    start = coerce_date(date_start)
    end = coerce_date(date_end)
    if start is None or end is None:
        return []
    return [s for s in summaries if s.start_date <= end and s.end_date >= start]


def apply_filters(
    summaries: Sequence[TimesheetSummary],
    filters: Optional[TimesheetFilters],
) -> List[TimesheetSummary]:
    if filters is None:
        return list(summaries)
    result = filter_by_status(summaries, filters.status)
    return filter_by_date_range(result, filters.date_start, filters.date_end)


def sort_summaries(summaries: Sequence[TimesheetSummary], sort: Optional[SortSpec]) -> List[TimesheetSummary]:
    if sort is None or not sort.field:
        return list(summaries)
    key = SORT_KEYS.get(sort.field)
    if key is None:
        return list(summaries)
    # sorted() is stable for reverse=True as well: ties keep their input order.
    return sorted(summaries, key=key, reverse=sort.descending)


def paginate(items: Sequence[T], page: Optional[PageRequest] = None) -> PaginatedResponse[T]:
    request = (page or PageRequest()).normalized()
    total = len(items)
    total_pages = ceil(total / request.size)
    start = (request.number - 1) * request.size
    data = list(items[start:start + request.size]) if start < total else []
    return PaginatedResponse(
        data=data,
        total=total,
        page=request.number,
        limit=request.size,
        total_pages=total_pages,
    )


def query_timesheets(
    summaries: Sequence[TimesheetSummary],
    filters: Optional[TimesheetFilters] = None,
    sort: Optional[SortSpec] = None,
    page: Optional[PageRequest] = None,
) -> PaginatedResponse[TimesheetSummary]:
    filtered = apply_filters(summaries, filters)
    ordered = sort_summaries(filtered, sort)
    return paginate(ordered, page)


__all__ = [
    "PageRequest",
    "PaginatedResponse",
    "SORT_ASC",
    "SORT_DESC",
    "SORT_KEYS",
    "SortSpec",
    "TimesheetFilters",
    "apply_filters",
    "filter_by_date_range",
    "filter_by_status",
    "paginate",
    "query_timesheets",
    "sort_summaries",
]
