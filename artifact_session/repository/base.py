"""Data model for repositories, mirrors, proxies and servers.

Defines the immutable records that selectors match against and that
the session builder assembles, along with URL helpers used to derive
a repository's protocol and host.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

DEFAULT_LAYOUT = "default"

# Hosts that never count as external for mirror matching
LOCAL_HOSTS = ("localhost", "127.0.0.1")


def url_protocol(url: str) -> str:
    """Return the lower-cased scheme of a URL ('' when absent)."""
    return urlsplit(url).scheme.lower() if url else ""


def url_host(url: str) -> str:
    """Return the lower-cased host of a URL ('' when absent)."""
    if not url:
        return ""
    return urlsplit(url).hostname or ""


def is_external_url(url: Optional[str]) -> bool:
    """Check whether a URL points off the local machine.

    File URLs and loopback hosts are local; a missing URL counts as external.
    """
    if url is None:
        return True
    return not (url_protocol(url) == "file" or url_host(url) in LOCAL_HOSTS)


@dataclass(frozen=True)
class Authentication:
    """Plaintext credentials bound to a repository or proxy.

    Secrets are excluded from the repr so the object can be logged.
    """

    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    private_key: Optional[str] = None
    passphrase: Optional[str] = field(default=None, repr=False)

    @classmethod
    def build(
        cls,
        username: Optional[str] = None,
        password: Optional[str] = None,
        private_key: Optional[str] = None,
        passphrase: Optional[str] = None,
    ) -> Optional["Authentication"]:
        """Create an authentication, or None when no credential is set."""
        if username is None and password is None and private_key is None:
            return None
        return cls(
            username=username,
            password=password,
            private_key=private_key,
            passphrase=passphrase if private_key is not None else None,
        )


@dataclass(frozen=True)
class Proxy:
    """Network proxy bound to a protocol."""

    protocol: str
    host: str
    port: int = 8080
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    non_proxy_hosts: Optional[str] = None
    id: Optional[str] = None

    @property
    def authentication(self) -> Optional[Authentication]:
        return Authentication.build(username=self.username, password=self.password)


@dataclass(frozen=True)
class Mirror:
    """Substitute endpoint for repositories matching ``mirror_of``."""

    id: str
    url: str
    mirror_of: str
    layout: str = DEFAULT_LAYOUT
    mirror_of_layouts: Optional[str] = None
    blocked: bool = False


@dataclass(frozen=True)
class Server:
    """Per-repository credentials and connector configuration."""

    id: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    private_key: Optional[str] = None
    passphrase: Optional[str] = field(default=None, repr=False)
    configuration: Optional[Dict[str, Any]] = field(default=None, compare=False)
    file_permissions: Optional[str] = None
    directory_permissions: Optional[str] = None

    @property
    def authentication(self) -> Optional[Authentication]:
        return Authentication.build(
            username=self.username,
            password=self.password,
            private_key=self.private_key,
            passphrase=self.passphrase,
        )


@dataclass(frozen=True)
class RemoteRepository:
    """Remote artifact repository.

    Instances are immutable: injecting a mirror, proxy or authentication
    produces a new repository via the ``with_*`` helpers.
    """

    id: str
    url: str
    layout: str = DEFAULT_LAYOUT
    mirrored_from: Optional["RemoteRepository"] = None
    proxy: Optional[Proxy] = None
    authentication: Optional[Authentication] = None
    blocked: bool = False

    @property
    def protocol(self) -> str:
        return url_protocol(self.url)

    @property
    def host(self) -> str:
        return url_host(self.url)

    @property
    def is_external(self) -> bool:
        """Check whether the repository lives outside the local machine."""
        return is_external_url(self.url)

    def with_proxy(self, proxy: Optional[Proxy]) -> "RemoteRepository":
        return replace(self, proxy=proxy)

    def with_authentication(
        self, authentication: Optional[Authentication]
    ) -> "RemoteRepository":
        return replace(self, authentication=authentication)


@dataclass(frozen=True)
class LocalRepository:
    """Local artifact storage rooted at ``basedir``."""

    basedir: Path
    content_type: str = ""

    def __str__(self) -> str:
        return f"{self.basedir} ({self.content_type or DEFAULT_LAYOUT})"
