"""Repository data model shared by selectors and the session builder."""

from .base import (
    DEFAULT_LAYOUT,
    Authentication,
    LocalRepository,
    Mirror,
    Proxy,
    RemoteRepository,
    Server,
    is_external_url,
    url_host,
    url_protocol,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "Authentication",
    "LocalRepository",
    "Mirror",
    "Proxy",
    "RemoteRepository",
    "Server",
    "is_external_url",
    "url_host",
    "url_protocol",
]
