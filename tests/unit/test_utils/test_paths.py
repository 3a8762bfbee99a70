"""Tests for data directory and input helpers."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from thqm.utils.paths import get_config_dir, get_data_dir, read_stdin, split_entries


class TestDirs:
    def test_data_dir_from_xdg(self, isolated_dirs: Path) -> None:
        assert get_data_dir() == isolated_dirs / "data" / "thqm"

    def test_config_dir_from_xdg(self, isolated_dirs: Path) -> None:
        assert get_config_dir() == isolated_dirs / "config" / "thqm"

    def test_data_dir_default(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("XDG_DATA_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_data_dir() == tmp_path / ".local" / "share" / "thqm"


class TestSplitEntries:
    def test_newline_separated(self) -> None:
        assert split_entries("a\nb\nc\n") == ["a", "b", "c"]

    def test_drops_blank_entries(self) -> None:
        assert split_entries("a\n\n  \nb") == ["a", "b"]

    def test_custom_separator(self) -> None:
        assert split_entries("a,b,,c", ",") == ["a", "b", "c"]

    def test_keeps_duplicates_and_order(self) -> None:
        assert split_entries("b\na\nb") == ["b", "a", "b"]

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError):
            split_entries("a", "")


def test_read_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo\n"))
    assert read_stdin() == "one\ntwo\n"
