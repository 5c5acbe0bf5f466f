# ui/pages/dashboard.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import flet as ft

from core.derivation import ALL_STATUSES, status_options
from core.settings import TIMESHEETS, UI
from helpers.datetime_utils import format_hours, parse_date_input
from models.timesheet import TimesheetSummary
from services.query import SORT_ASC, SORT_DESC, PageRequest, SortSpec, TimesheetFilters
from ui.badges import status_badge

# Column index -> sort field understood by the query pipeline.
_SORT_COLUMNS = {0: "week", 1: "dateRange", 2: "status", 3: "hours"}


class DashboardPage:
    def __init__(self, app):
        self.app = app
        self.page_number = 1
        self.page_size = TIMESHEETS.default_page_size
        self.sort: Optional[SortSpec] = None

        self.status_dd = ft.Dropdown(
            label="Status",
            width=180,
            value=ALL_STATUSES,
            options=[ft.dropdown.Option(key, label) for key, label in status_options().items()],
            on_change=self._on_filters_changed,
        )

        self.start_tf = ft.TextField(label="From", hint_text="DD.MM.YYYY", width=150,
                                     on_submit=self._on_filters_changed)
        self.end_tf = ft.TextField(label="To", hint_text="DD.MM.YYYY", width=150,
                                   on_submit=self._on_filters_changed)

        self.start_picker = ft.DatePicker(
            first_date=date(2000, 1, 1),
            last_date=date(2100, 12, 31),
            on_change=lambda e: self._set_date(self.start_tf, e.control.value),
        )
        self.end_picker = ft.DatePicker(
            first_date=date(2000, 1, 1),
            last_date=date(2100, 12, 31),
            on_change=lambda e: self._set_date(self.end_tf, e.control.value),
        )

        self.start_btn = ft.IconButton(
            icon=ft.Icons.CALENDAR_MONTH,
            tooltip="Pick a date",
            on_click=lambda e: self.app.page.open(self.start_picker),
        )
        self.end_btn = ft.IconButton(
            icon=ft.Icons.CALENDAR_MONTH,
            tooltip="Pick a date",
            on_click=lambda e: self.app.page.open(self.end_picker),
        )

        self.reset_btn = ft.TextButton("Reset", icon=ft.Icons.REFRESH, on_click=self._on_reset)

        filters_row = ft.Row(
            [
                ft.Row([self.start_tf, self.start_btn], spacing=6),
                ft.Row([self.end_tf, self.end_btn], spacing=6),
                self.status_dd,
                self.reset_btn,
            ],
            alignment=ft.MainAxisAlignment.START,
            vertical_alignment=ft.CrossAxisAlignment.END,
            spacing=12,
            wrap=True,
        )

        self.table = ft.DataTable(
            columns=[
                ft.DataColumn(ft.Text("WEEK #"), numeric=True, on_sort=self._on_sort),
                ft.DataColumn(ft.Text("DATE"), on_sort=self._on_sort),
                ft.DataColumn(ft.Text("STATUS"), on_sort=self._on_sort),
                ft.DataColumn(ft.Text("HOURS"), numeric=True, on_sort=self._on_sort),
                ft.DataColumn(ft.Text("ACTIONS")),
            ],
            rows=[],
            heading_row_color=UI.theme.page_bg,
            expand=True,
        )

        self.empty_text = ft.Text("No timesheets found", color=UI.theme.text_subtle, visible=False)

        self.page_size_dd = ft.Dropdown(
            width=110,
            value=str(self.page_size),
            options=[ft.dropdown.Option(str(n), f"{n} / page") for n in UI.page_size_options],
            on_change=self._on_page_size_changed,
        )
        self.prev_btn = ft.IconButton(icon=ft.Icons.CHEVRON_LEFT, tooltip="Previous", on_click=lambda e: self._go(-1))
        self.next_btn = ft.IconButton(icon=ft.Icons.CHEVRON_RIGHT, tooltip="Next", on_click=lambda e: self._go(1))
        self.page_info = ft.Text("", size=12, color=UI.theme.text_subtle)

        pagination_row = ft.Row(
            [self.page_size_dd, ft.Row([self.prev_btn, self.page_info, self.next_btn], spacing=4)],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

        self.view = ft.Container(
            content=ft.Column(
                [
                    ft.Text("Your Timesheets", size=22, weight=ft.FontWeight.BOLD, color=UI.theme.text_primary),
                    filters_row,
                    ft.Column([self.table, self.empty_text], scroll=ft.ScrollMode.AUTO, expand=True),
                    pagination_row,
                ],
                spacing=16,
                expand=True,
            ),
            expand=True,
            padding=24,
        )

    def attach(self):
        for picker in (self.start_picker, self.end_picker):
            if picker not in self.app.page.overlay:
                self.app.page.overlay.append(picker)

    def detach(self):
        for picker in (self.start_picker, self.end_picker):
            if picker in self.app.page.overlay:
                self.app.page.overlay.remove(picker)

    # ---------- Filters ----------
    def _on_filters_changed(self, _):
        self.page_number = 1
        self.load()

    def _on_reset(self, _):
        self.start_tf.value = ""
        self.end_tf.value = ""
        self.status_dd.value = ALL_STATUSES
        self.sort = None
        self.table.sort_column_index = None
        self.page_number = 1
        self.load()

    def _on_sort(self, e: ft.DataColumnSortEvent):
        field = _SORT_COLUMNS.get(e.column_index)
        if field is None:
            return
        self.sort = SortSpec(field=field, order=SORT_ASC if e.ascending else SORT_DESC)
        self.table.sort_column_index = e.column_index
        self.table.sort_ascending = e.ascending
        self.load()

    def _on_page_size_changed(self, e):
        try:
            self.page_size = int(e.control.value)
        except (TypeError, ValueError):
            self.page_size = TIMESHEETS.default_page_size
        self.page_number = 1
        self.load()

    def _go(self, delta: int):
        self.page_number = max(1, self.page_number + delta)
        self.load()

    def current_filters(self) -> TimesheetFilters:
        return TimesheetFilters(
            status=self.status_dd.value,
            date_start=parse_date_input(self.start_tf.value),
            date_end=parse_date_input(self.end_tf.value),
        )

    # ---------- Data ----------
    def load(self):
        result = self.app.service.list_page(
            self.current_filters(),
            self.sort,
            PageRequest(number=self.page_number, size=self.page_size),
        )
        self.table.rows = [self._row(summary) for summary in result.data]
        self.empty_text.visible = not result.data
        self.page_info.value = f"Page {result.page} of {result.display_total_pages} · {result.total} total"
        self.prev_btn.disabled = not result.has_previous
        self.next_btn.disabled = not result.has_next
        self.app.page.update()

    # ---------- Helpers ----------
    def _row(self, summary: TimesheetSummary) -> ft.DataRow:
        return ft.DataRow(
            cells=[
                ft.DataCell(ft.Text(str(summary.week))),
                ft.DataCell(ft.Text(summary.date_range)),
                ft.DataCell(status_badge(summary.status)),
                ft.DataCell(ft.Text(format_hours(summary.hours))),
                ft.DataCell(
                    ft.TextButton(
                        summary.action,
                        on_click=lambda e, tid=summary.id: self.app.open_timesheet(tid),
                    )
                ),
            ]
        )

    def _set_date(self, tf: ft.TextField, value):
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            tf.value = value.strftime("%d.%m.%Y")
            self.page_number = 1
            self.load()
