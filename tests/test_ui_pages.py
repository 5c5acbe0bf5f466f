from pathlib import Path
from types import SimpleNamespace
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import flet as ft
import pytest

from services.auth import AuthService
from ui.pages.dashboard import DashboardPage
from ui.pages.login import LoginPage


class FakePage:
    def __init__(self):
        self.overlay = []
        self.updates = 0

    def update(self):
        self.updates += 1


@pytest.fixture()
def app():
    signed_in = []
    return SimpleNamespace(
        page=FakePage(),
        auth=AuthService(),
        signed_in=signed_in,
        on_signed_in=signed_in.append,
    )


def test_dashboard_pickers_are_removed_on_detach(app):
    dashboard = DashboardPage(app)
    dashboard.attach()
    dashboard.attach()
    assert app.page.overlay == [dashboard.start_picker, dashboard.end_picker]

    dashboard.detach()
    assert app.page.overlay == []


def test_repeated_sessions_do_not_grow_overlay(app):
    for _ in range(3):
        dashboard = DashboardPage(app)
        dashboard.attach()
        dashboard.detach()
    assert app.page.overlay == []


def test_login_form_has_no_unused_controls(app):
    login = LoginPage(app)
    assert not any(isinstance(c, ft.Checkbox) for c in login.form.controls)


def test_login_signs_in_with_entered_credentials(app):
    login = LoginPage(app)
    login.email_tf.value = "someone@example.com"
    login.password_tf.value = "secret"
    login.sign_in(None)

    assert len(app.signed_in) == 1
    assert app.signed_in[0].user_id == "1"
    assert login.password_tf.value == ""


def test_login_with_blank_fields_shows_error(app):
    login = LoginPage(app)
    login.email_tf.value = ""
    login.password_tf.value = ""
    login.sign_in(None)

    assert app.signed_in == []
    assert login.error_text.value
    assert app.page.updates == 1
