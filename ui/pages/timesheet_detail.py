# ui/pages/timesheet_detail.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

import flet as ft

from core.settings import TIMESHEETS, UI
from helpers.datetime_utils import format_day_label, format_hours
from models.timesheet import DailyTask, TimesheetDetails
from ui.badges import project_chip
from ui.dialogs import confirm
from ui.entry_dialog import open_entry_dialog


class TimesheetDetailPage:
    def __init__(self, app):
        self.app = app
        self.details: Optional[TimesheetDetails] = None

        self.title = ft.Text("This week's timesheet", size=22, weight=ft.FontWeight.W_600,
                             color=UI.theme.text_primary)
        self.subtitle = ft.Text("", size=14, color=UI.theme.text_subtle)
        self.hours_text = ft.Text("", size=12, weight=ft.FontWeight.W_500)
        self.percent_text = ft.Text("", size=12, weight=ft.FontWeight.W_500)
        self.progress = ft.ProgressBar(value=0, width=192, color=UI.theme.progress, bgcolor=UI.theme.outline)
        self.days_column = ft.Column(spacing=0)

        header = ft.Row(
            [
                ft.Column([self.title, self.subtitle], spacing=4),
                ft.Column(
                    [
                        ft.Row([self.hours_text, self.percent_text], width=192,
                               alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                        self.progress,
                    ],
                    spacing=8,
                ),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.START,
        )

        self.view = ft.Container(
            content=ft.Column(
                [
                    ft.TextButton("Back", icon=ft.Icons.CHEVRON_LEFT, on_click=lambda e: self.app.show_dashboard()),
                    ft.Container(
                        content=ft.Column([header, self.days_column], spacing=24),
                        padding=24,
                        bgcolor=ft.Colors.WHITE,
                        border_radius=12,
                        border=ft.border.all(1, UI.theme.outline),
                    ),
                ],
                spacing=12,
                scroll=ft.ScrollMode.AUTO,
                expand=True,
            ),
            expand=True,
            padding=24,
        )

    # ---------- Data ----------
    def load(self, timesheet_id: int):
        try:
            self.details = self.app.service.get_details(timesheet_id)
        except ValueError as ex:
            self.details = None
            self.app.toast(str(ex), ok=False)
        self._render()

    def _render(self):
        details = self.details
        if details is None:
            self.subtitle.value = "Timesheet not found"
            self.days_column.controls = []
            self.app.page.update()
            return

        self.subtitle.value = details.date_range
        self.hours_text.value = f"{format_hours(details.hours)}/{format_hours(TIMESHEETS.completed_hours)} hrs"
        self.percent_text.value = f"{round(details.progress * 100)}%"
        self.progress.value = details.progress
        self.days_column.controls = [self._day_row(day, tasks) for day, tasks in details.days()]
        self.app.page.update()

    def _day_row(self, day: date, tasks: List[DailyTask]) -> ft.Control:
        items: List[ft.Control] = [self._task_row(task) for task in tasks]
        items.append(
            ft.OutlinedButton(
                "Add new task",
                icon=ft.Icons.ADD,
                on_click=lambda e, d=day: self._open_entry(d),
                style=ft.ButtonStyle(
                    color=UI.theme.text_subtle,
                    shape=ft.RoundedRectangleBorder(radius=8),
                    padding=ft.padding.symmetric(vertical=14),
                ),
                expand=True,
            )
        )
        return ft.Container(
            content=ft.Row(
                [
                    ft.Container(
                        ft.Text(format_day_label(day), size=16, weight=ft.FontWeight.W_600),
                        width=80,
                    ),
                    ft.Column(items, spacing=8, expand=True),
                ],
                vertical_alignment=ft.CrossAxisAlignment.START,
                spacing=32,
            ),
            padding=ft.padding.symmetric(vertical=16),
            border=ft.border.only(bottom=ft.BorderSide(1, UI.theme.outline)),
        )

    def _task_row(self, task: DailyTask) -> ft.Control:
        menu = ft.PopupMenuButton(
            icon=ft.Icons.MORE_HORIZ,
            items=[
                ft.PopupMenuItem(text="Edit", on_click=lambda e, t=task: self._open_entry(t.date, t)),
                ft.PopupMenuItem(text="Delete", on_click=lambda e, t=task: self._confirm_delete(t)),
            ],
        )
        return ft.Row(
            [
                ft.Text(task.description, size=14, weight=ft.FontWeight.W_500, expand=True),
                ft.Row(
                    [
                        ft.Text(f"{format_hours(task.hours)} hrs", size=14, color=UI.theme.text_subtle),
                        project_chip(task.project_name),
                        menu,
                    ],
                    spacing=16,
                ),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    # ---------- Actions ----------
    def _open_entry(self, day: date, task: Optional[DailyTask] = None):
        details = self.details
        if details is None:
            return

        def on_save(payload: dict):
            if task:
                self.details = self.app.service.update_task(details.id, task.id, **payload)
                self.app.toast("Entry updated")
            else:
                self.details = self.app.service.add_task(details.id, **payload)
                self.app.toast("Entry added")
            self._render()

        open_entry_dialog(self.app.page, day=day, on_save=on_save, task=task)

    def _confirm_delete(self, task: DailyTask):
        details = self.details
        if details is None:
            return

        def on_delete():
            try:
                self.details = self.app.service.delete_task(details.id, task.id)
                self.app.toast("Entry deleted")
            except ValueError as ex:
                self.app.toast(str(ex), ok=False)
            self._render()

        confirm(
            self.app.page,
            title="Delete entry?",
            message=f"{task.description} ({format_hours(task.hours)} hrs) will be removed.",
            confirm_label="Delete",
            on_confirm=on_delete,
        )
