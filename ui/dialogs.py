import flet as ft

from core.settings import UI


def open_alert_dialog(page: ft.Page, *, title: str, content: ft.Control, actions: list[ft.Control]):
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, size=20, weight=ft.FontWeight.BOLD),
        content=content,
        actions=actions,
        actions_alignment=ft.MainAxisAlignment.START,
        bgcolor=ft.Colors.WHITE,
    )
    page.open(dlg)
    return dlg


def close_alert_dialog(page: ft.Page, dlg: ft.AlertDialog | None):
    if dlg is None:
        return
    page.close(dlg)


def confirm(page: ft.Page, *, title: str, message: str, confirm_label: str, on_confirm):
    dlg: ft.AlertDialog | None = None

    def _on_confirm(_):
        close_alert_dialog(page, dlg)
        on_confirm()

    dlg = open_alert_dialog(
        page,
        title=title,
        content=ft.Text(message, color=UI.theme.text_subtle),
        actions=[
            ft.FilledButton(
                confirm_label,
                icon=ft.Icons.DELETE_OUTLINE,
                style=ft.ButtonStyle(bgcolor=ft.Colors.RED_600, color=ft.Colors.WHITE),
                on_click=_on_confirm,
            ),
            ft.OutlinedButton("Cancel", on_click=lambda e: close_alert_dialog(page, dlg)),
        ],
    )
    return dlg
