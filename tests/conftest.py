"""Shared test fixtures for the thqm test suite.

Provides a style directory with static assets, a server configuration
built on it, and an isolated data directory for style lookups.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest

from thqm.domain.models import Credentials, ServerConfig


# ---------------------------------------------------------------------------
# Filesystem Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the XDG data/config directories at a temporary location."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("THQM_PASSWORD", "THQM_PORT", "THQM_USERNAME", "THQM_ONESHOT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_loggers() -> Iterator[None]:
    """Undo handler changes made by setup_logging() in CLI tests."""
    saved = {}
    for name in ("thqm", "uvicorn"):
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers), logger.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers
        logger.propagate = propagate


@pytest.fixture
def style_dir(tmp_path: Path) -> Path:
    """A minimal style directory with a template and one stylesheet."""
    base = tmp_path / "style"
    (base / "static").mkdir(parents=True)
    (base / "template.html").write_text(
        "<html><head><title>$title</title></head>"
        "<body>$shutdown $custom_input $entries $qrcode</body></html>"
    )
    (base / "static" / "style.css").write_text("body { color: red; }")
    return base


# ---------------------------------------------------------------------------
# Server Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def page_html() -> str:
    return "<html><body><h1>entries</h1></body></html>"


@pytest.fixture
def server_config(style_dir: Path, page_html: str) -> ServerConfig:
    """A ServerConfig without auth, not in oneshot mode."""
    return ServerConfig(page=page_html, static_dir=style_dir)


@pytest.fixture
def oneshot_config(server_config: ServerConfig) -> ServerConfig:
    return server_config.model_copy(update={"oneshot": True})


@pytest.fixture
def auth_config(server_config: ServerConfig) -> ServerConfig:
    """A ServerConfig requiring user/hunter2."""
    return server_config.model_copy(
        update={"credentials": Credentials(login="user", password="hunter2")}
    )


@pytest.fixture
def on_terminate() -> MagicMock:
    """A mock terminate hook standing in for the server runner."""
    return MagicMock()
