"""Builds the repository session of a build execution.

The steps run in a fixed order: properties and policies first, then the
local repository manager, then the selectors (from decrypted settings),
and finally injection of mirrors, proxies and credentials into the
remote and plugin repository lists.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..common.logger import get_logger
from ..common.settings import Settings, get_settings
from ..properties import ConfigurationProperties
from ..repository.base import LocalRepository
from ..selectors.auth import AuthenticationSelector, server_configuration_properties
from ..selectors.mirror import MirrorSelector
from ..selectors.proxy import ProxySelector
from .agent import get_user_agent
from .artifacts import DefaultArtifactHandlerCatalog, new_artifact_type_registry
from .base import (
    ArtifactHandlerCatalog,
    BuildRequest,
    EventDispatcher,
    RepositorySession,
    RepositorySystem,
    SettingsDecrypter,
    WorkspaceReader,
)
from .decrypt import PassthroughDecrypter
from .injector import RepositoryInjector
from .listeners import ListenerChain, LoggingRepositoryListener
from .local import SimpleRepositorySystem
from .policy import new_error_policy, update_policy

logger = get_logger("session_builder")


class SessionBuilder:
    """Assembles repository sessions from build requests.

    Collaborators are passed in explicitly; a bootstrap layer (such as
    the command line entry point) decides which implementations to use.
    """

    def __init__(
        self,
        repository_system: Optional[RepositorySystem] = None,
        decrypter: Optional[SettingsDecrypter] = None,
        handler_catalog: Optional[ArtifactHandlerCatalog] = None,
        event_dispatcher: Optional[EventDispatcher] = None,
        workspace_reader: Optional[WorkspaceReader] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the builder.

        Args:
            repository_system: Creates the local repository manager
            decrypter: Decrypts proxy and server credentials
            handler_catalog: Source of the artifact type registry
            event_dispatcher: Chains the repository listener with event spies
            workspace_reader: Default workspace reader, used when the
                request does not carry one
            settings: Product identity and logging settings
        """
        self.repository_system = repository_system or SimpleRepositorySystem()
        self.decrypter = decrypter or PassthroughDecrypter()
        self.handler_catalog = handler_catalog or DefaultArtifactHandlerCatalog()
        self.event_dispatcher = event_dispatcher or ListenerChain()
        self.workspace_reader = workspace_reader
        self.settings = settings or get_settings()

    def get_user_agent(self, system_properties: Dict[str, Any]) -> str:
        return get_user_agent(
            self.settings.product_name,
            self.settings.product_version,
            system_properties,
        )

    def new_repository_session(self, request: BuildRequest) -> RepositorySession:
        """Build a read-only session for a build request.

        The request's remote and plugin repository lists are replaced with
        their injected forms.

        Args:
            request: Raw repository settings of the build

        Returns:
            Read-only RepositorySession

        Raises:
            NoLocalRepositoryManagerError: If no local repository manager
                can be created (or whatever the repository system raises)
        """
        session = RepositorySession()
        session.cache = request.repository_cache

        config_props: Dict[str, Any] = {
            ConfigurationProperties.USER_AGENT: self.get_user_agent(request.system_properties),
            ConfigurationProperties.INTERACTIVE: request.interactive,
        }
        config_props.update(request.system_properties)
        config_props.update(request.user_properties)

        session.offline = request.offline
        session.checksum_policy = request.global_checksum_policy
        session.update_policy = update_policy(
            request.no_snapshot_updates, request.update_snapshots
        )
        session.resolution_error_policy = new_error_policy(
            request.cache_not_found, request.cache_transfer_error
        )
        session.artifact_type_registry = new_artifact_type_registry(self.handler_catalog)

        local_repository = LocalRepository(Path(request.local_repository))
        session.local_repository_manager = self.repository_system.new_local_repository_manager(
            session, local_repository
        )

        if request.workspace_reader is not None:
            session.workspace_reader = request.workspace_reader
        else:
            session.workspace_reader = self.workspace_reader

        decrypted = self.decrypter.decrypt(request.proxies, request.servers)
        if logger.isEnabledFor(logging.DEBUG):
            for problem in decrypted.problems:
                logger.debug(problem.message, exc_info=problem.exception)

        session.mirror_selector = MirrorSelector.from_mirrors(request.mirrors)
        session.proxy_selector = ProxySelector.from_proxies(decrypted.proxies)
        session.authentication_selector = AuthenticationSelector.from_servers(
            decrypted.servers
        )
        config_props.update(server_configuration_properties(decrypted.servers))

        session.transfer_listener = request.transfer_listener
        session.repository_listener = self.event_dispatcher.chain_listener(
            LoggingRepositoryListener()
        )

        session.user_properties = dict(request.user_properties)
        session.system_properties = dict(request.system_properties)
        session.config_properties = config_props

        injector = RepositoryInjector.for_session(session)
        session.remote_repositories = injector.inject(request.remote_repositories)
        session.plugin_repositories = injector.inject(request.plugin_repositories)
        request.remote_repositories = list(session.remote_repositories)
        request.plugin_repositories = list(session.plugin_repositories)

        logger.info(
            f"Created repository session with {len(session.remote_repositories)} remote "
            f"and {len(session.plugin_repositories)} plugin repositories "
            f"(local repository {local_repository.basedir}, offline={session.offline})"
        )
        return session.set_read_only()


def new_repository_session(request: BuildRequest, **collaborators) -> RepositorySession:
    """Build a session with default collaborators, overridable by keyword."""
    return SessionBuilder(**collaborators).new_repository_session(request)
