"""Pytest configuration and shared fixtures."""

import pytest

from artifact_session.common.settings import Settings
from artifact_session.repository.base import Mirror, Proxy, RemoteRepository, Server
from artifact_session.session.base import BuildRequest
from artifact_session.session.builder import SessionBuilder


@pytest.fixture
def central():
    """Maven Central repository."""
    return RemoteRepository(id="central", url="https://repo.maven.apache.org/maven2")


@pytest.fixture
def internal():
    """Internal company repository."""
    return RemoteRepository(id="internal", url="https://nexus.internal.example.com/repository/maven")


@pytest.fixture
def settings():
    """Settings with a fixed product identity."""
    return Settings(product_name="artifact-session", product_version="1.2.3")


@pytest.fixture
def builder(settings):
    """Session builder with default collaborators."""
    return SessionBuilder(settings=settings)


@pytest.fixture
def build_request(tmp_path, central, internal):
    """Build request with one mirror, one proxy and one server."""
    return BuildRequest(
        local_repository=tmp_path / "repository",
        remote_repositories=[central, internal],
        plugin_repositories=[
            RemoteRepository(id="plugins", url="https://plugins.example.com/maven2"),
        ],
        mirrors=[
            Mirror(
                id="company-mirror",
                url="https://mirror.example.com/maven2",
                mirror_of="*,!internal",
            ),
        ],
        proxies=[
            Proxy(
                protocol="https",
                host="proxy.example.com",
                port=3128,
                username="proxyuser",
                password="proxypass",
                non_proxy_hosts="*.internal.example.com|localhost",
            ),
        ],
        servers=[
            Server(id="company-mirror", username="deployer", password="s3cret"),
            Server(
                id="internal",
                username="builder",
                password="hunter2",
                configuration={"wagonProvider": "httpclient", "timeout": 30000},
                file_permissions="0664",
                directory_permissions="0775",
            ),
        ],
        system_properties={"java.version": "17.0.2", "os.name": "Linux", "os.version": "6.1"},
        user_properties={"skipTests": "true"},
    )


@pytest.fixture
def sample_request_dict(tmp_path):
    """Build request document as loaded from YAML."""
    return {
        "local_repository": str(tmp_path / "repository"),
        "offline": False,
        "update_snapshots": True,
        "remote_repositories": [
            {"id": "central", "url": "https://repo.maven.apache.org/maven2"},
        ],
        "plugin_repositories": [
            {"id": "plugins", "url": "https://plugins.example.com/maven2", "layout": "default"},
        ],
        "mirrors": [
            {"id": "all", "url": "https://mirror.example.com/maven2", "mirror_of": "*"},
        ],
        "proxies": [
            {"protocol": "https", "host": "proxy.example.com", "port": 3128},
        ],
        "servers": [
            {"id": "all", "username": "deployer", "password": "s3cret"},
        ],
        "user_properties": {"skipTests": "true"},
    }
