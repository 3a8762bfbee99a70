"""Tests for the uvicorn server runner."""

from __future__ import annotations

from unittest.mock import patch

from thqm.domain.models import ServerConfig
from thqm.server.app import create_app
from thqm.server.runner import ServerRunner


class TestServerRunner:
    def test_installs_terminate_hook(self, server_config: ServerConfig) -> None:
        app = create_app(server_config)
        runner = ServerRunner(app, host="127.0.0.1", port=2222)
        assert app.state.on_terminate == runner.request_stop

    def test_request_stop_sets_should_exit(self, server_config: ServerConfig) -> None:
        runner = ServerRunner(create_app(server_config), host="127.0.0.1", port=2222)
        assert runner.stopping is False
        runner.request_stop(0)
        assert runner.stopping is True
        assert runner.exit_code == 0

    def test_run_returns_exit_code(self, server_config: ServerConfig) -> None:
        runner = ServerRunner(create_app(server_config), host="127.0.0.1", port=2222)
        with patch.object(runner._server, "run", side_effect=lambda: runner.request_stop(3)):
            assert runner.run() == 3
