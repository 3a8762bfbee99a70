"""Selection and command handlers.

Handlers return either an HTTP response or a :class:`Terminate` value.
They never stop the process themselves; the router hands ``Terminate``
to the server loop, which shuts down in order.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO, Union

from fastapi import Response, status
from fastapi.responses import RedirectResponse

from thqm.domain.models import Terminate

logger = logging.getLogger(__name__)

HandlerResult = Union[Response, Terminate]

SHUTDOWN_COMMAND = "shutdown"


def handle_select(entry: str, oneshot: bool, out: TextIO | None = None) -> HandlerResult:
    """Print the selected ``entry`` to stdout and redirect to ``/``.

    The entry is printed verbatim. If ``oneshot``, the server is asked
    to stop instead of redirecting.
    """
    print(entry, file=out or sys.stdout, flush=True)
    logger.info("Selected entry %r", entry)
    if oneshot:
        return Terminate(exit_code=0)
    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


def handle_cmd(command: str) -> HandlerResult:
    """Run a page command. Unknown commands get an empty 404."""
    if command == SHUTDOWN_COMMAND:
        logger.info("Shutdown requested")
        return Terminate(exit_code=0)
    logger.debug("Unknown command %r", command)
    return Response(status_code=status.HTTP_404_NOT_FOUND)
