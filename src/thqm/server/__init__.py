"""HTTP server for the entry page.

Public API:
    create_app -- FastAPI application factory
    ServerRunner -- runs the app under uvicorn with orderly shutdown
"""

from thqm.server.app import create_app
from thqm.server.runner import ServerRunner

__all__ = ["ServerRunner", "create_app"]
