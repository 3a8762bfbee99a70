"""Filesystem locations and standard input helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "thqm"


def get_data_dir() -> Path:
    """Return the thqm data directory (styles live under ``styles/``)."""
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / APP_NAME


def get_config_dir() -> Path:
    """Return the thqm configuration directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def read_stdin() -> str:
    """Read all of standard input."""
    return sys.stdin.read()


def split_entries(text: str, separator: str = "\n") -> list[str]:
    """Split raw input into entries, dropping empty ones.

    Order is preserved and duplicates are kept.
    """
    if not separator:
        raise ValueError("Entry separator must not be empty")
    return [entry for entry in text.split(separator) if entry.strip()]
