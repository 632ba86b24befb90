"""404 Deployment Not Found service."""

from notfound_server.server import create_app

__all__ = ["create_app"]
