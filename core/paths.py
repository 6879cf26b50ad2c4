"""
core/paths.py — FATURA
=======================
Single source of truth for filesystem paths.

  - BASE_DIR / config_path() → files shipped with the application (read-only)
  - get_user_data_dir()      → writable user data
      - FATURA_HOME if set
      - Windows: %APPDATA%/FATURA/
      - Linux/Mac: ~/.local/share/FATURA/

    from core.paths import config_path, logs_path
"""

import os
import sys
from pathlib import Path

from version import APP_NAME


BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    """Application config directory, or a file inside it."""
    p = BASE_DIR / "config"
    return p / filename if filename else p


def get_user_data_dir() -> Path:
    """
    Writable user data directory, created on first use.
    """
    override = os.getenv("FATURA_HOME")
    if override:
        user_dir = Path(override)
    else:
        if sys.platform == "win32":
            appdata = os.getenv("APPDATA")
            if not appdata:
                appdata = str(Path.home() / "AppData" / "Roaming")
            base = Path(appdata)
        else:
            base = Path.home() / ".local" / "share"
        user_dir = base / APP_NAME

    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


def logs_path(filename: str = "") -> Path:
    """Log directory inside the user data directory."""
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p
