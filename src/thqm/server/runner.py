"""Run the thqm app under uvicorn until a handler asks it to stop."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


class ServerRunner:
    """Owns the uvicorn server and turns ``Terminate`` into an orderly stop.

    Usage::

        runner = ServerRunner(app, host="0.0.0.0", port=2222)
        exit_code = runner.run()
    """

    def __init__(self, app: FastAPI, host: str, port: int) -> None:
        self._app = app
        self.exit_code = 0
        self._server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=host,
                port=port,
                # Our own handlers (see thqm.utils.logging) keep stdout clean.
                log_config=None,
            )
        )
        app.state.on_terminate = self.request_stop

    @property
    def stopping(self) -> bool:
        return self._server.should_exit

    def request_stop(self, exit_code: int = 0) -> None:
        """Stop accepting connections and let in-flight requests finish."""
        logger.info("Stopping server (exit code %d)", exit_code)
        self.exit_code = exit_code
        self._server.should_exit = True

    def run(self) -> int:
        """Serve until stopped. Returns the requested exit code."""
        logger.info("Serving on %s:%d", self._server.config.host, self._server.config.port)
        self._server.run()
        return self.exit_code
