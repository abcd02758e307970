"""Tests for the repository data model."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from artifact_session.repository.base import (
    Authentication,
    LocalRepository,
    Proxy,
    RemoteRepository,
    Server,
    is_external_url,
    url_host,
    url_protocol,
)


class TestUrlHelpers:
    """Tests for URL helpers."""

    def test_protocol_and_host(self):
        url = "HTTPS://Repo.Example.COM:8443/maven2"

        assert url_protocol(url) == "https"
        assert url_host(url) == "repo.example.com"

    def test_empty_url(self):
        assert url_protocol("") == ""
        assert url_host("") == ""

    @pytest.mark.parametrize(
        "url,external",
        [
            ("https://repo.maven.apache.org/maven2", True),
            ("file:///home/user/.m2/repository", False),
            ("http://localhost:8081/repository", False),
            ("http://127.0.0.1/repo", False),
            (None, True),
        ],
    )
    def test_is_external_url(self, url, external):
        """Test file URLs and loopback hosts are local."""
        assert is_external_url(url) is external


class TestAuthentication:
    """Tests for Authentication."""

    def test_build_without_credentials(self):
        """Test no credentials yields no authentication."""
        assert Authentication.build() is None
        assert Authentication.build(passphrase="orphan") is None

    def test_passphrase_requires_private_key(self):
        """Test the passphrase is kept only alongside a private key."""
        assert Authentication.build(username="u", passphrase="p").passphrase is None
        assert Authentication.build(private_key="k", passphrase="p").passphrase == "p"

    def test_server_authentication(self):
        """Test servers expose their credentials as an authentication."""
        server = Server(id="s", username="u", password="p")

        assert server.authentication == Authentication(username="u", password="p")
        assert Server(id="anon").authentication is None

    def test_secrets_hidden_from_repr(self):
        """Test proxy passwords are not rendered."""
        proxy = Proxy(protocol="http", host="p", username="u", password="topsecret")

        assert "topsecret" not in repr(proxy)


class TestRemoteRepository:
    """Tests for RemoteRepository."""

    def test_derived_fields(self, central):
        assert central.protocol == "https"
        assert central.host == "repo.maven.apache.org"
        assert central.is_external
        assert central.layout == "default"

    def test_immutable(self, central):
        """Test repositories cannot be modified in place."""
        with pytest.raises(FrozenInstanceError):
            central.url = "https://other.example.com"

    def test_with_helpers_return_copies(self, central):
        """Test with_proxy and with_authentication leave the original intact."""
        proxy = Proxy(protocol="https", host="proxy.example.com")
        auth = Authentication(username="u")

        proxied = central.with_proxy(proxy).with_authentication(auth)

        assert proxied.proxy == proxy
        assert proxied.authentication == auth
        assert proxied.id == central.id
        assert central.proxy is None
        assert central.authentication is None

    def test_server_configuration_ignored_in_equality(self):
        """Test servers compare by identity fields, not configuration."""
        assert Server(id="a", configuration={"x": 1}) == Server(id="a")


class TestLocalRepository:
    """Tests for LocalRepository."""

    def test_str(self):
        repository = LocalRepository(Path("/tmp/repo"))

        assert str(repository) == "/tmp/repo (default)"

    def test_equality(self):
        assert LocalRepository(Path("/tmp/repo")) == LocalRepository(Path("/tmp/repo"))
        assert LocalRepository(Path("/tmp/repo"), "simple") != LocalRepository(Path("/tmp/repo"))

    def test_remote_repository_defaults(self):
        repository = RemoteRepository(id="r", url="https://r.example.com")

        assert repository.mirrored_from is None
        assert repository.blocked is False
