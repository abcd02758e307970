"""Build request documents.

Parses YAML request documents into the typed records the session
builder consumes. Malformed entries raise ValueError naming the
offending section or field.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..common.config import load_config
from ..repository.base import DEFAULT_LAYOUT, Mirror, Proxy, RemoteRepository, Server
from .base import BuildRequest

DEFAULT_LOCAL_REPOSITORY = "~/.m2/repository"
DEFAULT_PROXY_PORT = 8080


def _require_mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Invalid {what}: expected a mapping, got {type(value).__name__}")
    return value


def _entries(request_dict: Dict[str, Any], section: str) -> List[Any]:
    entries = request_dict.get(section)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError(f"Invalid {section}: expected a list, got {type(entries).__name__}")
    return entries


def _optional_str(value: Any) -> Optional[str]:
    # YAML reads unquoted numeric secrets such as 123456 as int
    return None if value is None else str(value)


def _port(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid proxy port: {value!r}") from e


def parse_repository(repo_dict: Dict[str, Any]) -> RemoteRepository:
    """Parse a remote repository dictionary.

    Args:
        repo_dict: Repository dictionary with id, url and optional layout

    Returns:
        RemoteRepository instance

    Raises:
        ValueError: If the entry is not a mapping
    """
    repo_dict = _require_mapping(repo_dict, "repository entry")
    return RemoteRepository(
        id=str(repo_dict.get("id", "")),
        url=str(repo_dict.get("url", "")),
        layout=repo_dict.get("layout") or DEFAULT_LAYOUT,
    )


def parse_mirror(mirror_dict: Dict[str, Any]) -> Mirror:
    """Parse a mirror dictionary.

    Args:
        mirror_dict: Mirror dictionary

    Returns:
        Mirror instance

    Raises:
        ValueError: If the entry is not a mapping
    """
    mirror_dict = _require_mapping(mirror_dict, "mirror entry")
    return Mirror(
        id=str(mirror_dict.get("id", "")),
        url=str(mirror_dict.get("url", "")),
        mirror_of=str(mirror_dict.get("mirror_of", "")),
        layout=mirror_dict.get("layout") or DEFAULT_LAYOUT,
        mirror_of_layouts=_optional_str(mirror_dict.get("mirror_of_layouts")),
        blocked=bool(mirror_dict.get("blocked", False)),
    )


def parse_proxy(proxy_dict: Dict[str, Any]) -> Proxy:
    """Parse a proxy dictionary.

    Args:
        proxy_dict: Proxy dictionary

    Returns:
        Proxy instance

    Raises:
        ValueError: If the entry is not a mapping or the port is not a number
    """
    proxy_dict = _require_mapping(proxy_dict, "proxy entry")
    return Proxy(
        protocol=str(proxy_dict.get("protocol", "http")),
        host=str(proxy_dict.get("host", "")),
        port=_port(proxy_dict.get("port", DEFAULT_PROXY_PORT)),
        username=_optional_str(proxy_dict.get("username")),
        password=_optional_str(proxy_dict.get("password")),
        non_proxy_hosts=_optional_str(proxy_dict.get("non_proxy_hosts")),
        id=_optional_str(proxy_dict.get("id")),
    )


def parse_server(server_dict: Dict[str, Any]) -> Server:
    """Parse a server dictionary.

    Credential fields are read as strings.

    Args:
        server_dict: Server dictionary

    Returns:
        Server instance

    Raises:
        ValueError: If the entry or its configuration block is not a mapping
    """
    server_dict = _require_mapping(server_dict, "server entry")
    server_id = str(server_dict.get("id", ""))
    configuration = server_dict.get("configuration")
    if configuration is not None:
        _require_mapping(configuration, f"configuration of server {server_id}")

    return Server(
        id=server_id,
        username=_optional_str(server_dict.get("username")),
        password=_optional_str(server_dict.get("password")),
        private_key=_optional_str(server_dict.get("private_key")),
        passphrase=_optional_str(server_dict.get("passphrase")),
        configuration=configuration,
        file_permissions=_optional_str(server_dict.get("file_permissions")),
        directory_permissions=_optional_str(server_dict.get("directory_permissions")),
    )


def parse_request(request_dict: Dict[str, Any]) -> BuildRequest:
    """Parse a full build request dictionary.

    Args:
        request_dict: Build request dictionary

    Returns:
        BuildRequest instance

    Raises:
        ValueError: If a section or entry is malformed
    """
    local_repository = request_dict.get("local_repository") or DEFAULT_LOCAL_REPOSITORY
    system_properties = request_dict.get("system_properties") or {}
    user_properties = request_dict.get("user_properties") or {}

    return BuildRequest(
        local_repository=Path(os.path.expanduser(str(local_repository))),
        remote_repositories=[
            parse_repository(r) for r in _entries(request_dict, "remote_repositories")
        ],
        plugin_repositories=[
            parse_repository(r) for r in _entries(request_dict, "plugin_repositories")
        ],
        mirrors=[parse_mirror(m) for m in _entries(request_dict, "mirrors")],
        proxies=[parse_proxy(p) for p in _entries(request_dict, "proxies")],
        servers=[parse_server(s) for s in _entries(request_dict, "servers")],
        system_properties=dict(_require_mapping(system_properties, "system_properties")),
        user_properties=dict(_require_mapping(user_properties, "user_properties")),
        offline=request_dict.get("offline", False),
        interactive=request_dict.get("interactive", True),
        global_checksum_policy=request_dict.get("checksum_policy"),
        no_snapshot_updates=request_dict.get("no_snapshot_updates", False),
        update_snapshots=request_dict.get("update_snapshots", False),
        cache_not_found=request_dict.get("cache_not_found", True),
        cache_transfer_error=request_dict.get("cache_transfer_error", False),
    )


def load_request(request_path: str) -> BuildRequest:
    """Load and parse a build request document.

    Args:
        request_path: Path to the YAML request document

    Returns:
        BuildRequest instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is invalid YAML
        TypeError: If the document root is not a mapping
        ValueError: If a section or entry is malformed
    """
    return parse_request(load_config(request_path))
