"""Domain models for thqm.

Immutable value objects shared by the server, the handlers and the CLI.
"""

from thqm.domain.models import Credentials, ServerConfig, Terminate

__all__ = ["Credentials", "ServerConfig", "Terminate"]
