"""Tests for the selection and command handlers."""

from __future__ import annotations

import io

import pytest
from fastapi import Response

from thqm.domain.models import Terminate
from thqm.server.handlers import handle_cmd, handle_select


class TestHandleSelect:
    def test_prints_entry_and_redirects(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = handle_select("foo", oneshot=False)
        assert capsys.readouterr().out == "foo\n"
        assert isinstance(result, Response)
        assert result.status_code == 302
        assert result.headers["location"] == "/"

    def test_oneshot_prints_and_terminates(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = handle_select("foo", oneshot=True)
        assert capsys.readouterr().out == "foo\n"
        assert result == Terminate(exit_code=0)

    def test_entry_printed_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        handle_select("two\nlines\t<b>", oneshot=False)
        assert capsys.readouterr().out == "two\nlines\t<b>\n"

    def test_custom_stream(self) -> None:
        out = io.StringIO()
        handle_select("bar", oneshot=False, out=out)
        assert out.getvalue() == "bar\n"


class TestHandleCmd:
    def test_shutdown_terminates(self) -> None:
        result = handle_cmd("shutdown")
        assert isinstance(result, Terminate)
        assert result.exit_code == 0

    @pytest.mark.parametrize("command", ["anything-else", "", "Shutdown", "shutdown "])
    def test_unknown_command_is_404(self, command: str) -> None:
        result = handle_cmd(command)
        assert isinstance(result, Response)
        assert result.status_code == 404
        assert result.body == b""
