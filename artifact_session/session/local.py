"""Default repository system creating simple local repository managers."""

from pathlib import Path
from typing import Callable, Dict, Optional

from ..common.logger import get_logger
from ..errors import NoLocalRepositoryManagerError
from ..repository.base import LocalRepository, RemoteRepository

logger = get_logger("local_repository")

SUPPORTED_CONTENT_TYPES = ("", "default", "simple")


class SimpleLocalRepositoryManager:
    """Local repository manager storing artifacts under one base directory."""

    def __init__(self, repository: LocalRepository):
        self._repository = repository

    @property
    def repository(self) -> LocalRepository:
        return self._repository

    def path_for_local_artifact(self, artifact_path: str) -> Path:
        return self._repository.basedir / artifact_path

    def path_for_remote_artifact(self, artifact_path: str, remote: RemoteRepository) -> Path:
        # Remote artifacts share the local layout; the remote only tags provenance
        return self._repository.basedir / artifact_path

    def __repr__(self) -> str:
        return f"SimpleLocalRepositoryManager({self._repository})"


ManagerFactory = Callable[[LocalRepository], SimpleLocalRepositoryManager]


class SimpleRepositorySystem:
    """Creates local repository managers for supported content types.

    Additional factories can be registered per content type.
    """

    def __init__(self, factories: Optional[Dict[str, ManagerFactory]] = None):
        self._factories: Dict[str, ManagerFactory] = {
            content_type: SimpleLocalRepositoryManager
            for content_type in SUPPORTED_CONTENT_TYPES
        }
        if factories:
            self._factories.update(factories)

    def new_local_repository_manager(self, session, local_repository: LocalRepository):
        """Create the manager for a local repository.

        Raises:
            NoLocalRepositoryManagerError: If the base directory is not a
                directory or no factory handles the content type
        """
        basedir = Path(local_repository.basedir)
        if basedir.exists() and not basedir.is_dir():
            raise NoLocalRepositoryManagerError(
                local_repository, f"Local repository {basedir} is not a directory"
            )

        factory = self._factories.get(local_repository.content_type)
        if factory is None:
            raise NoLocalRepositoryManagerError(
                local_repository,
                f"Unsupported local repository type: {local_repository.content_type}",
            )

        manager = factory(local_repository)
        logger.debug(f"Using local repository {local_repository}")
        return manager
