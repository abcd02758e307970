"""Proxy selection for remote repositories.

A proxy serves repositories whose protocol matches its own, except for
hosts listed in its ``non_proxy_hosts`` pattern. The first eligible
proxy in registration order wins.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..common.logger import get_logger
from ..repository.base import Proxy, RemoteRepository

logger = get_logger("proxy_selector")

NON_PROXY_HOSTS_SEPARATORS = re.compile(r"[|,]")


def compile_non_proxy_hosts(non_proxy_hosts: Optional[str]) -> Tuple[re.Pattern, ...]:
    """Compile a ``|`` or comma separated host list into regexes.

    ``*`` matches any run of characters, so ``*.example.com`` matches
    every subdomain of example.com. Other patterns match exactly.
    """
    if not non_proxy_hosts:
        return ()

    patterns = []
    for host in NON_PROXY_HOSTS_SEPARATORS.split(non_proxy_hosts):
        host = host.strip()
        if not host:
            continue
        regex = ".*".join(re.escape(part) for part in host.split("*"))
        patterns.append(re.compile(regex, re.IGNORECASE))
    return tuple(patterns)


@dataclass(frozen=True)
class ProxyRule:
    """A proxy together with its compiled host exclusions."""

    proxy: Proxy
    excluded_hosts: Tuple[re.Pattern, ...] = ()

    def is_excluded(self, host: str) -> bool:
        return any(pattern.fullmatch(host) for pattern in self.excluded_hosts)

    def serves(self, protocol: str, host: str) -> bool:
        """Check whether this proxy is eligible for a protocol and host."""
        if self.proxy.protocol.lower() != (protocol or "").lower():
            return False
        return not self.is_excluded(host or "")


@dataclass(frozen=True)
class ProxySelector:
    """Immutable ordered list of proxy rules."""

    rules: Tuple[ProxyRule, ...] = ()

    @classmethod
    def from_proxies(cls, proxies: Iterable[Proxy]) -> "ProxySelector":
        """Build a selector using each proxy's own ``non_proxy_hosts``."""
        selector = cls()
        for proxy in proxies:
            selector = selector.add(proxy, proxy.non_proxy_hosts)
        return selector

    def add(self, proxy: Proxy, non_proxy_hosts: Optional[str] = None) -> "ProxySelector":
        """Return a new selector with one more proxy appended."""
        rule = ProxyRule(proxy, compile_non_proxy_hosts(non_proxy_hosts))
        return ProxySelector(self.rules + (rule,))

    def select(self, protocol: str, host: str) -> Optional[Proxy]:
        """Find the first proxy serving a protocol and host.

        Args:
            protocol: URL scheme of the repository (case-insensitive)
            host: Host name of the repository

        Returns:
            Proxy or None
        """
        for rule in self.rules:
            if rule.serves(protocol, host):
                return rule.proxy
        return None

    def get_proxy(self, repository: RemoteRepository) -> Optional[Proxy]:
        proxy = self.select(repository.protocol, repository.host)
        if proxy is not None:
            logger.debug(
                f"Repository {repository.id} uses proxy {proxy.host}:{proxy.port}"
            )
        return proxy
