"""HTTP basic auth gate.

Every request is checked against a single configured login/password pair
before it reaches the router. A failed check always answers with a 401
challenge so browsers prompt for credentials again.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request, Response, status
from fastapi.security import HTTPBasic

logger = logging.getLogger(__name__)

REALM = "thqm"

_basic = HTTPBasic(realm=REALM, auto_error=False)


def login_required() -> Response:
    """A 401 response carrying the basic auth challenge."""
    return Response(
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )


async def authenticate(request: Request, login: str, password: str) -> Response | None:
    """Check the request's basic auth credentials.

    Returns:
        A challenge response when credentials are missing, malformed or
        wrong, or None when the request may continue to routing.
    """
    try:
        credentials = await _basic(request)
    except HTTPException:
        # Malformed header (bad base64, no colon)
        credentials = None
    if credentials is None:
        return login_required()

    logger.debug("Handling auth for user %r", credentials.username)

    if credentials.username != login or credentials.password != password:
        return login_required()
    return None
