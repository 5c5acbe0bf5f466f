# ui/app_shell.py
from __future__ import annotations

import flet as ft

from core.log import get_logger
from core.settings import UI
from services.auth import AuthService, UserSession
from services.timesheet_repository import SqlTimesheetRepository
from services.timesheets import TimesheetService

from .pages.dashboard import DashboardPage
from .pages.login import LoginPage
from .pages.timesheet_detail import TimesheetDetailPage

logger = get_logger("ui")


class AppShell:
    def __init__(self, page: ft.Page, auth: AuthService | None = None):
        self.page = page
        self.auth = auth or AuthService()
        self.service: TimesheetService | None = None

        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START
        self.page.bgcolor = UI.theme.page_bg

        self._login = LoginPage(self)
        self._dashboard: DashboardPage | None = None
        self._detail: TimesheetDetailPage | None = None

        self.user_label = ft.Text("", size=13, color=UI.theme.text_subtle)
        self.appbar = ft.AppBar(
            title=ft.Text("ticktock", weight=ft.FontWeight.W_700),
            center_title=False,
            bgcolor=ft.Colors.WHITE,
            actions=[
                ft.TextButton("Timesheets", on_click=lambda e: self.show_dashboard()),
                ft.Container(self.user_label, padding=ft.padding.symmetric(horizontal=12)),
                ft.IconButton(icon=ft.Icons.LOGOUT, tooltip="Sign out", on_click=lambda e: self.sign_out()),
            ],
        )

        self.content = ft.Container(expand=True)

    # ---------- mount ----------
    def mount(self):
        self.page.controls.clear()
        self.page.add(self.content)
        self.show_login()

    # ---------- session ----------
    def on_signed_in(self, session: UserSession):
        repo = SqlTimesheetRepository(session.user_id)
        self.service = TimesheetService(repo)
        self._dashboard = DashboardPage(self)
        self._dashboard.attach()
        self._detail = TimesheetDetailPage(self)
        self.user_label.value = session.name
        logger.info("Session started for user %s", session.user_id)
        self.show_dashboard()

    def sign_out(self):
        self.auth.sign_out()
        if self._dashboard is not None:
            self._dashboard.detach()
        self.service = None
        self._dashboard = None
        self._detail = None
        self.show_login()

    # ---------- navigation ----------
    def show_login(self):
        self.page.appbar = None
        self.content.content = self._login.view
        self.page.update()

    def show_dashboard(self):
        if self._dashboard is None:
            self.show_login()
            return
        self.page.appbar = self.appbar
        self.content.content = self._dashboard.view
        self.page.update()
        self._dashboard.load()

    def open_timesheet(self, timesheet_id: int):
        if self._detail is None:
            self.show_login()
            return
        self.page.appbar = self.appbar
        self.content.content = self._detail.view
        self.page.update()
        self._detail.load(timesheet_id)

    # ---------- helpers for pages ----------
    def toast(self, text: str, ok: bool = True):
        bar = ft.SnackBar(
            ft.Text(text, color=ft.Colors.WHITE),
            bgcolor=ft.Colors.GREEN_700 if ok else ft.Colors.RED_700,
        )
        self.page.open(bar)
