# ui/pages/login.py
import flet as ft

from core.settings import APP_NAME, UI


class LoginPage:
    def __init__(self, app):
        self.app = app

        self.email_tf = ft.TextField(
            label="Email",
            hint_text="name@example.com",
            keyboard_type=ft.KeyboardType.EMAIL,
            autofocus=True,
            on_submit=self.sign_in,
        )
        self.password_tf = ft.TextField(
            label="Password",
            password=True,
            can_reveal_password=True,
            on_submit=self.sign_in,
        )
        self.error_text = ft.Text("", color=ft.Colors.RED_600, size=12)

        self.form = ft.Column(
            controls=[
                ft.Text("Welcome back", size=24, weight=ft.FontWeight.BOLD, color=UI.theme.text_primary),
                self.email_tf,
                self.password_tf,
                self.error_text,
                ft.FilledButton("Sign in", on_click=self.sign_in, width=UI.login_width),
            ],
            spacing=16,
            width=UI.login_width,
            tight=True,
        )

        self.view = ft.Container(
            content=ft.Column(
                [
                    ft.Text(APP_NAME, size=28, weight=ft.FontWeight.W_700, color=UI.theme.accent),
                    ft.Container(self.form, padding=32, bgcolor=ft.Colors.WHITE, border_radius=12,
                                 border=ft.border.all(1, UI.theme.outline)),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                alignment=ft.MainAxisAlignment.CENTER,
                spacing=24,
            ),
            alignment=ft.alignment.center,
            expand=True,
            bgcolor=UI.theme.page_bg,
        )

    def reset(self):
        self.password_tf.value = ""
        self.error_text.value = ""

    def sign_in(self, _):
        session = self.app.auth.authorize(self.email_tf.value, self.password_tf.value)
        if session is None:
            self.error_text.value = "Enter your email and password"
            self.app.page.update()
            return
        self.reset()
        self.app.on_signed_in(session)
