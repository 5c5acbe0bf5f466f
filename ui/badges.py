import flet as ft

from core.derivation import status_bgcolor, status_color, status_label
from core.settings import UI


def status_badge(status: str) -> ft.Control:
    return ft.Container(
        content=ft.Text(
            status_label(status).upper(),
            size=11,
            weight=ft.FontWeight.W_600,
            color=status_color(status),
        ),
        bgcolor=status_bgcolor(status),
        padding=ft.padding.symmetric(horizontal=8, vertical=4),
        border_radius=ft.border_radius.all(6),
    )


def project_chip(name: str) -> ft.Control:
    return ft.Container(
        content=ft.Text(name, size=12, weight=ft.FontWeight.W_500, color=UI.theme.chip_text),
        bgcolor=UI.theme.chip,
        padding=ft.padding.symmetric(horizontal=10, vertical=2),
        border_radius=ft.border_radius.all(6),
    )
