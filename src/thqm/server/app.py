"""FastAPI application serving the entry page.

Routes (all GET):

    /                   -> rendered page
    /?cmd=<name>        -> command handler (takes precedence over select)
    /?select=<entry>    -> selection handler
    /select/{entry}     -> selection handler
    /cmd/{command}      -> command handler
    anything else       -> static asset from the style directory, or 404

When basic auth credentials are configured, every request goes through
the auth gate first, static assets and 404s included.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import HTMLResponse

from thqm.domain.models import ServerConfig, Terminate
from thqm.server.auth import authenticate
from thqm.server.handlers import HandlerResult, handle_cmd, handle_select

logger = logging.getLogger(__name__)

TerminateHook = Callable[[int], None]

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _guess_type(path: Path) -> str:
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or "application/octet-stream"


def resolve_asset(static_dir: Path, path: str) -> Path | None:
    """Resolve a request path to a file inside ``static_dir``.

    Returns None for missing files, directories and paths that escape
    the base directory.
    """
    base = static_dir.resolve()
    candidate = (base / path.lstrip("/")).resolve()
    if not candidate.is_relative_to(base) or not candidate.is_file():
        return None
    return candidate


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(
    config: ServerConfig,
    on_terminate: TerminateHook | None = None,
) -> FastAPI:
    """Create the thqm web application.

    Args:
        config: Startup configuration (page, credentials, oneshot...).
        on_terminate: Called with the exit code when a handler asks the
            server to stop. The runner installs one that stops uvicorn;
            it can also be set later through ``app.state.on_terminate``.
    """
    app = FastAPI(
        title="thqm",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.on_terminate = on_terminate
    # Set by the first Terminate; later selections and commands are ignored.
    app.state.stopping = False

    def _dispatch(handler: Callable[..., HandlerResult], *args: object) -> Response:
        if app.state.stopping:
            logger.debug("Server is stopping, ignoring %s%r", handler.__name__, args)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        result = handler(*args)
        if isinstance(result, Terminate):
            app.state.stopping = True
            hook: TerminateHook | None = app.state.on_terminate
            if hook is None:
                logger.warning("Stop requested but no terminate hook is installed")
            else:
                hook(result.exit_code)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return result

    if config.credentials is not None:
        login = config.credentials.login
        password = config.credentials.password

        @app.middleware("http")
        async def basic_auth(request: Request, call_next):  # type: ignore[no-untyped-def]
            rejection = await authenticate(request, login, password)
            if rejection is not None:
                return rejection
            return await call_next(request)

    @app.get("/")
    async def index(cmd: str | None = None, select: str | None = None) -> Response:
        if cmd is not None:
            return _dispatch(handle_cmd, cmd)
        if select is not None:
            return _dispatch(handle_select, select, config.oneshot)
        return HTMLResponse(config.page)

    @app.get("/select/{entry}")
    async def select_entry(entry: str) -> Response:
        return _dispatch(handle_select, entry, config.oneshot)

    @app.get("/cmd/{command}")
    async def run_command(command: str) -> Response:
        return _dispatch(handle_cmd, command)

    @app.api_route("/{path:path}", methods=_ALL_METHODS, include_in_schema=False)
    async def static_asset(request: Request, path: str) -> Response:
        if request.method != "GET":
            return _not_found()
        asset = resolve_asset(config.static_dir, path)
        if asset is None:
            return _not_found()
        try:
            content = asset.read_bytes()
        except OSError as e:
            logger.debug("Failed to read asset %s: %s", asset, e)
            return _not_found()
        return Response(content=content, media_type=_guess_type(asset))

    return app
