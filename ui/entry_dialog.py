# timesheets/ui/entry_dialog.py
from __future__ import annotations

from datetime import date
from typing import Callable, Optional

import flet as ft

from core.settings import TIMESHEETS, UI
from helpers.datetime_utils import format_day_label, format_hours
from models.timesheet import DailyTask
from ui.dialogs import close_alert_dialog, open_alert_dialog


def open_entry_dialog(
    page: ft.Page,
    *,
    day: date,
    on_save: Callable[[dict], None],
    task: Optional[DailyTask] = None,
):
    """Add/edit form for a single task entry.

    ``on_save`` receives ``project_name``, ``type_of_work``, ``description``,
    ``hours`` and ``date``; it may raise ``ValueError`` to keep the dialog open.
    """
    state = {"hours": float(task.hours) if task else 0.0}
    dlg: ft.AlertDialog | None = None

    projects = list(TIMESHEETS.projects)
    work_types = list(TIMESHEETS.work_types)
    # Generated rows carry placeholder values that are not part of the option lists.
    if task and task.project_name not in projects:
        projects.append(task.project_name)
    if task and task.type_of_work and task.type_of_work not in work_types:
        work_types.append(task.type_of_work)

    project_dd = ft.Dropdown(
        label="Select Project *",
        hint_text="Project Name",
        value=task.project_name if task else None,
        options=[ft.dropdown.Option(p) for p in projects],
        expand=True,
    )
    work_dd = ft.Dropdown(
        label="Type of Work *",
        hint_text="Bug fixes",
        value=(task.type_of_work or None) if task else None,
        options=[ft.dropdown.Option(w) for w in work_types],
        expand=True,
    )
    description_tf = ft.TextField(
        label="Task description *",
        hint_text="Write text here ...",
        helper_text="A note for extra info",
        value=task.description if task else "",
        multiline=True,
        min_lines=4,
        max_lines=6,
    )
    hours_text = ft.Text(format_hours(state["hours"]), size=14, weight=ft.FontWeight.W_500, width=40,
                         text_align=ft.TextAlign.CENTER)

    save_btn = ft.FilledButton("Save changes" if task else "Add entry")

    def refresh_state(_=None):
        hours_text.value = format_hours(state["hours"])
        save_btn.disabled = not (project_dd.value and work_dd.value and (description_tf.value or "").strip())
        page.update()

    def step(delta: float):
        state["hours"] = min(TIMESHEETS.max_entry_hours, max(0.0, state["hours"] + delta))
        refresh_state()

    def on_submit(_):
        payload = {
            "project_name": project_dd.value or "",
            "type_of_work": work_dd.value or "",
            "description": (description_tf.value or "").strip(),
            "hours": state["hours"],
            "date": day,
        }
        try:
            on_save(payload)
        except ValueError as ex:
            description_tf.error_text = str(ex)
            page.update()
            return
        close_alert_dialog(page, dlg)

    project_dd.on_change = refresh_state
    work_dd.on_change = refresh_state
    description_tf.on_change = refresh_state
    save_btn.on_click = on_submit

    hours_row = ft.Row(
        [
            ft.IconButton(icon=ft.Icons.REMOVE, on_click=lambda e: step(-1)),
            hours_text,
            ft.IconButton(icon=ft.Icons.ADD, on_click=lambda e: step(1)),
        ],
        spacing=0,
    )

    content = ft.Container(
        width=UI.dialog_width,
        content=ft.Column(
            [
                ft.Text(format_day_label(day), color=UI.theme.text_subtle),
                project_dd,
                work_dd,
                description_tf,
                ft.Text("Hours *", weight=ft.FontWeight.W_600),
                hours_row,
            ],
            spacing=16,
            tight=True,
            scroll=ft.ScrollMode.AUTO,
        ),
    )

    save_btn.disabled = task is None
    dlg = open_alert_dialog(
        page,
        title="Edit Entry" if task else "Add New Entry",
        content=content,
        actions=[save_btn, ft.OutlinedButton("Cancel", on_click=lambda e: close_alert_dialog(page, dlg))],
    )
    return dlg


__all__ = ["open_entry_dialog"]
