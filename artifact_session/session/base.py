"""Session, build request and collaborator interfaces.

The session is assembled by :class:`~artifact_session.session.builder.SessionBuilder`
and switched to read-only before it is handed out, so resolution workers
can share it without locking.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from ..errors import SessionReadOnlyError
from ..repository.base import LocalRepository, Mirror, Proxy, RemoteRepository, Server
from ..selectors.auth import AuthenticationSelector
from ..selectors.mirror import MirrorSelector
from ..selectors.proxy import ProxySelector
from .artifacts import ArtifactHandler, ArtifactTypeRegistry
from .policy import ResolutionErrorPolicy


class TransferListener(Protocol):
    """Receives transfer events; passed through untouched."""


class RepositoryListener(Protocol):
    """Receives repository events such as artifact resolution."""

    def on_event(self, event: "RepositoryEvent") -> None: ...


class WorkspaceReader(Protocol):
    """Resolves artifacts from an in-progress build instead of a repository."""


class LocalRepositoryManager(Protocol):
    """Locates and stores artifacts in local storage."""

    @property
    def repository(self) -> LocalRepository: ...


@dataclass(frozen=True)
class RepositoryEvent:
    """Event raised by the resolution engine for a repository operation."""

    type: str
    artifact: Optional[str] = None
    repository: Optional[RemoteRepository] = None
    file: Optional[Path] = None
    exception: Optional[BaseException] = None


@dataclass
class DecryptionProblem:
    """Non-fatal problem reported while decrypting settings."""

    message: str
    exception: Optional[BaseException] = None


@dataclass
class DecryptionResult:
    """Decrypted proxies and servers plus any problems encountered."""

    proxies: List[Proxy] = field(default_factory=list)
    servers: List[Server] = field(default_factory=list)
    problems: List[DecryptionProblem] = field(default_factory=list)


class SettingsDecrypter(Protocol):
    """Decrypts proxy and server credentials."""

    def decrypt(
        self, proxies: Sequence[Proxy], servers: Sequence[Server]
    ) -> DecryptionResult: ...


class RepositorySystem(Protocol):
    """Creates local repository managers."""

    def new_local_repository_manager(
        self, session: "RepositorySession", local_repository: LocalRepository
    ) -> LocalRepositoryManager: ...


class ArtifactHandlerCatalog(Protocol):
    """Lists the artifact handlers known to the host."""

    def handlers(self) -> Sequence[ArtifactHandler]: ...


class EventDispatcher(Protocol):
    """Chains a repository listener with event spies."""

    def chain_listener(self, listener: RepositoryListener) -> RepositoryListener: ...


@dataclass
class BuildRequest:
    """Raw repository settings of one build execution."""

    local_repository: Union[str, Path]
    remote_repositories: List[RemoteRepository] = field(default_factory=list)
    plugin_repositories: List[RemoteRepository] = field(default_factory=list)
    mirrors: List[Mirror] = field(default_factory=list)
    proxies: List[Proxy] = field(default_factory=list)
    servers: List[Server] = field(default_factory=list)
    system_properties: Dict[str, Any] = field(default_factory=dict)
    user_properties: Dict[str, Any] = field(default_factory=dict)
    offline: bool = False
    interactive: bool = True
    global_checksum_policy: Optional[str] = None
    no_snapshot_updates: bool = False
    update_snapshots: bool = False
    cache_not_found: bool = True
    cache_transfer_error: bool = False
    transfer_listener: Optional[TransferListener] = None
    workspace_reader: Optional[WorkspaceReader] = None
    repository_cache: Any = None


@dataclass
class RepositorySession:
    """Configuration shared by every resolution of one build execution.

    Call :meth:`set_read_only` once assembly is finished; afterwards any
    assignment raises SessionReadOnlyError and the property maps and
    repository lists become immutable views.
    """

    cache: Any = None
    offline: bool = False
    checksum_policy: Optional[str] = None
    update_policy: Optional[str] = None
    resolution_error_policy: ResolutionErrorPolicy = field(
        default_factory=ResolutionErrorPolicy
    )
    artifact_type_registry: Optional[ArtifactTypeRegistry] = None
    local_repository_manager: Optional[LocalRepositoryManager] = None
    workspace_reader: Optional[WorkspaceReader] = None
    mirror_selector: MirrorSelector = field(default_factory=MirrorSelector)
    proxy_selector: ProxySelector = field(default_factory=ProxySelector)
    authentication_selector: AuthenticationSelector = field(
        default_factory=AuthenticationSelector
    )
    transfer_listener: Optional[TransferListener] = None
    repository_listener: Optional[RepositoryListener] = None
    user_properties: Mapping[str, Any] = field(default_factory=dict)
    system_properties: Mapping[str, Any] = field(default_factory=dict)
    config_properties: Mapping[str, Any] = field(default_factory=dict)
    remote_repositories: Sequence[RemoteRepository] = field(default_factory=list)
    plugin_repositories: Sequence[RemoteRepository] = field(default_factory=list)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_read_only", False):
            raise SessionReadOnlyError(name)
        super().__setattr__(name, value)

    @property
    def read_only(self) -> bool:
        return getattr(self, "_read_only", False)

    @property
    def local_repository(self) -> Optional[LocalRepository]:
        if self.local_repository_manager is None:
            return None
        return self.local_repository_manager.repository

    def set_read_only(self) -> "RepositorySession":
        """Freeze the session, returning it for chaining."""
        if self.read_only:
            return self
        self.user_properties = MappingProxyType(dict(self.user_properties))
        self.system_properties = MappingProxyType(dict(self.system_properties))
        self.config_properties = MappingProxyType(dict(self.config_properties))
        self.remote_repositories = tuple(self.remote_repositories)
        self.plugin_repositories = tuple(self.plugin_repositories)
        object.__setattr__(self, "_read_only", True)
        return self
