"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``."""

    platform_id = (platform or sys.platform).lower()
    environ = dict(env or os.environ)
    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = Path(environ.get("APPDATA") or home_dir / "Library" / "Application Support")
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return (base.expanduser() / sanitized)


APP_NAME = "Timesheets"


DATA_DIR = get_default_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"

for _dir in (DATA_DIR, LOG_DIR):
    _dir.mkdir(parents=True, exist_ok=True)


LOG_PATH = LOG_DIR / "timesheets.log"

# The store is rebuilt from the demo generator on every start.
DB_URL = os.getenv("TIMESHEETS_DB_URL", "sqlite://")


@dataclass(frozen=True)
class TimesheetSettings:
    completed_hours: float = 40.0
    window_days: int = 5
    max_entry_hours: float = 24.0
    default_page_size: int = 5
    dataset_size: int = 200
    dataset_epoch: date = date(2024, 1, 1)
    projects: tuple[str, ...] = ("Project A", "Project B", "Internal")
    work_types: tuple[str, ...] = (
        "Bug fixes",
        "Feature Development",
        "Meeting",
        "Documentation",
    )


TIMESHEETS = TimesheetSettings()


@dataclass(frozen=True)
class ThemeColors:
    page_bg: str = "#F9FAFB"
    outline: str = "#E5E7EB"
    text_primary: str = "#111928"
    text_subtle: str = "#9CA3AF"
    accent: str = "#1C64F2"
    progress: str = "#FF8A4C"
    chip: str = "#EBF5FF"
    chip_text: str = "#1E429F"


@dataclass(frozen=True)
class UISettings:
    app_title: str = APP_NAME
    theme_mode: str = "light"
    color_scheme_seed: str = "#1C64F2"
    window_min_width: int = 900
    window_min_height: int = 600
    login_width: int = 420
    dialog_width: int = 560
    page_size_options: tuple[int, ...] = (5, 10, 20)
    theme: ThemeColors = ThemeColors()


UI = UISettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "LOG_DIR",
    "LOG_PATH",
    "DB_URL",
    "TIMESHEETS",
    "UI",
    "get_default_data_dir",
]
