"""Authentication selection for remote repositories.

Credentials are bound to repositories by exact server id. They must
already be decrypted; nothing here decrypts or validates secrets.
"""

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from ..common.logger import get_logger
from ..properties import ConfigurationProperties
from ..repository.base import Authentication, RemoteRepository, Server

logger = get_logger("auth_selector")

# Server configuration entry reserved for choosing a transport provider
WAGON_PROVIDER = "wagonProvider"


@dataclass(frozen=True)
class AuthenticationSelector:
    """Immutable mapping of server id to authentication."""

    entries: Mapping[str, Authentication] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_servers(cls, servers: Iterable[Server]) -> "AuthenticationSelector":
        """Build a selector from decrypted servers in registration order."""
        selector = cls()
        for server in servers:
            selector = selector.add(server.id, server.authentication)
        return selector

    def add(
        self, server_id: str, authentication: Optional[Authentication]
    ) -> "AuthenticationSelector":
        """Return a new selector binding ``authentication`` to ``server_id``.

        A later binding for the same id replaces the earlier one; binding
        None removes it.
        """
        entries = dict(self.entries)
        if authentication is not None:
            entries[server_id] = authentication
        else:
            entries.pop(server_id, None)
        return AuthenticationSelector(MappingProxyType(entries))

    def select(self, repository_id: str) -> Optional[Authentication]:
        return self.entries.get(repository_id)

    def get_authentication(
        self, repository: RemoteRepository
    ) -> Optional[Authentication]:
        authentication = self.select(repository.id)
        if authentication is not None:
            logger.debug(f"Repository {repository.id} has server credentials")
        return authentication


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return copy.deepcopy(value)


def strip_wagon_provider(configuration: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copy a server configuration block without its ``wagonProvider`` entry.

    The copy is read-only all the way down: nested mappings become
    ``MappingProxyType`` views and lists become tuples.
    """
    return _freeze(
        {key: value for key, value in configuration.items() if key != WAGON_PROVIDER}
    )


def server_configuration_properties(servers: Iterable[Server]) -> Dict[str, Any]:
    """Collect per-server connector properties.

    Args:
        servers: Decrypted server definitions

    Returns:
        Dictionary with the wagon configuration (when the server has a
        configuration block) and the file and directory modes of each server
    """
    properties: Dict[str, Any] = {}
    for server in servers:
        if server.configuration is not None:
            properties[ConfigurationProperties.wagon_config(server.id)] = (
                strip_wagon_provider(server.configuration)
            )
        properties[ConfigurationProperties.file_mode(server.id)] = server.file_permissions
        properties[ConfigurationProperties.dir_mode(server.id)] = (
            server.directory_permissions
        )
    return properties
