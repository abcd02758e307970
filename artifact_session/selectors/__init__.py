"""Selectors binding mirrors, proxies and credentials to repositories."""

from .auth import AuthenticationSelector, server_configuration_properties
from .mirror import MirrorSelector
from .proxy import ProxySelector

__all__ = [
    "AuthenticationSelector",
    "MirrorSelector",
    "ProxySelector",
    "server_configuration_properties",
]
