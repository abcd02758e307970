"""Repository session assembly for artifact resolution.

Builds the read-only session a resolution engine uses to reach remote
repositories: mirror, proxy and credential selection, cache and update
policies, and merged configuration properties.
"""

from .errors import NoLocalRepositoryManagerError, SessionError, SessionReadOnlyError
from .properties import ConfigurationProperties
from .repository import Authentication, LocalRepository, Mirror, Proxy, RemoteRepository, Server
from .selectors import AuthenticationSelector, MirrorSelector, ProxySelector
from .session import BuildRequest, RepositorySession, SessionBuilder, new_repository_session

__all__ = [
    "Authentication",
    "AuthenticationSelector",
    "BuildRequest",
    "ConfigurationProperties",
    "LocalRepository",
    "Mirror",
    "MirrorSelector",
    "NoLocalRepositoryManagerError",
    "Proxy",
    "ProxySelector",
    "RemoteRepository",
    "RepositorySession",
    "Server",
    "SessionBuilder",
    "SessionError",
    "SessionReadOnlyError",
    "new_repository_session",
]
