"""API proxy toolkit for stateless FastAPI services backed by third-party APIs."""

from .processor import BaseProcessor, ProxyAction
from .api import create_app, ServiceConfig
from .config import settings
from .rendering import prefers_json, render
from .upstream import UpstreamClient, UpstreamError

__version__ = "1.0.0"


__all__ = [
    "BaseProcessor",
    "ProxyAction",
    "create_app",
    "ServiceConfig",
    "settings",
    "prefers_json",
    "render",
    "UpstreamClient",
    "UpstreamError",
]
