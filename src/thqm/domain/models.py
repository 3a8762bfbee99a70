"""Core domain models for thqm.

An entry is a plain string and needs no model of its own. What does need
structure is the startup configuration handed to the server, and the
signal a handler returns when the server should stop.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """A single login/password pair for HTTP basic auth.

    Compared verbatim against each request; nothing is hashed.
    """

    model_config = ConfigDict(frozen=True)

    login: str
    password: str = Field(repr=False)


class ServerConfig(BaseModel):
    """Immutable startup configuration for the HTTP server."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="0.0.0.0", description="Address to bind")
    port: int = Field(default=2222, ge=1, le=65535)
    oneshot: bool = Field(default=False, description="Stop after the first selection")
    credentials: Credentials | None = Field(
        default=None, description="Basic auth credentials; None disables auth"
    )
    page: str = Field(description="Pre-rendered HTML served at /")
    static_dir: Path = Field(description="Base directory for static assets")


class Terminate(BaseModel):
    """Returned by a handler to ask the server loop to stop."""

    model_config = ConfigDict(frozen=True)

    exit_code: int = Field(default=0)
