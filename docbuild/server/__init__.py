"""Static file server for generated documentation."""

from .api import create_app, serve
from .settings import ServerSettings, get_settings

__all__ = ["create_app", "serve", "ServerSettings", "get_settings"]
