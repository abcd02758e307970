"""CLI interface for building a repository session."""

import sys

import yaml

from .common.logger import setup_logger
from .common.settings import get_settings
from .errors import SessionError
from .session.builder import SessionBuilder
from .session.request import load_request


def main():
    """Main entry point for the session CLI."""
    if len(sys.argv) < 2:
        print("Usage: python -m artifact_session <request.yaml>", file=sys.stderr)
        sys.exit(1)

    request_path = sys.argv[1]
    settings = get_settings()

    # Configure the package logger; component loggers propagate to it
    setup_logger(
        "artifact_session",
        log_dir=settings.log_dir,
        level=settings.log_level,
        file_logging=settings.file_logging,
    )

    try:
        request = load_request(request_path)
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        session = SessionBuilder(settings=settings).new_repository_session(request)
    except SessionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(3)

    print(f"Local repository: {session.local_repository}")
    print(f"Offline: {session.offline}")
    print(f"Update policy: {session.update_policy or 'default'}")
    policy = session.resolution_error_policy
    print(f"Error policy: base={policy.base_policy} fallback={policy.fallback_policy}")

    for title, repositories in (
        ("Remote repositories", session.remote_repositories),
        ("Plugin repositories", session.plugin_repositories),
    ):
        print(f"{title}:")
        for repository in repositories:
            line = f"  {repository.id}: {repository.url}"
            if repository.mirrored_from is not None:
                line += f" (mirror of {repository.mirrored_from.id})"
            if repository.proxy is not None:
                line += f" via {repository.proxy.host}:{repository.proxy.port}"
            if repository.authentication is not None:
                line += " [authenticated]"
            print(line)

    sys.exit(0)


if __name__ == "__main__":
    main()
