"""Rewrites repository lists with their mirror, proxy and credentials.

Each pass maps a list to a new list; input repositories are never
modified. Mirrors are injected first so that proxy and authentication
lookups see the mirror's endpoint and id.
"""

from typing import Iterable, List

from ..common.logger import get_logger
from ..repository.base import RemoteRepository
from ..selectors.auth import AuthenticationSelector
from ..selectors.mirror import MirrorSelector
from ..selectors.proxy import ProxySelector

logger = get_logger("repository_injector")


class RepositoryInjector:
    """Applies the session selectors to repository lists."""

    def __init__(
        self,
        mirror_selector: MirrorSelector,
        proxy_selector: ProxySelector,
        authentication_selector: AuthenticationSelector,
    ):
        self.mirror_selector = mirror_selector
        self.proxy_selector = proxy_selector
        self.authentication_selector = authentication_selector

    @classmethod
    def for_session(cls, session) -> "RepositoryInjector":
        return cls(
            session.mirror_selector,
            session.proxy_selector,
            session.authentication_selector,
        )

    def inject_mirror(self, repositories: Iterable[RemoteRepository]) -> List[RemoteRepository]:
        result = []
        for repository in repositories:
            mirrored = self.mirror_selector.get_mirror(repository)
            result.append(mirrored if mirrored is not None else repository)
        return result

    def inject_proxy(self, repositories: Iterable[RemoteRepository]) -> List[RemoteRepository]:
        result = []
        for repository in repositories:
            proxy = self.proxy_selector.get_proxy(repository)
            result.append(repository.with_proxy(proxy) if proxy is not None else repository)
        return result

    def inject_authentication(
        self, repositories: Iterable[RemoteRepository]
    ) -> List[RemoteRepository]:
        result = []
        for repository in repositories:
            authentication = self.authentication_selector.get_authentication(repository)
            if authentication is not None:
                repository = repository.with_authentication(authentication)
            result.append(repository)
        return result

    def inject(self, repositories: Iterable[RemoteRepository]) -> List[RemoteRepository]:
        """Inject mirrors, then proxies, then authentication.

        Args:
            repositories: Repositories as declared by the build

        Returns:
            New list with the effective repositories, in the same order
        """
        injected = self.inject_mirror(repositories)
        injected = self.inject_proxy(injected)
        injected = self.inject_authentication(injected)
        logger.debug(
            f"Effective repositories: {', '.join(f'{r.id} ({r.url})' for r in injected)}"
        )
        return injected
