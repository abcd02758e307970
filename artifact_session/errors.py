"""Exceptions raised while building a repository session."""


class SessionError(Exception):
    """Base class for session construction errors."""


class NoLocalRepositoryManagerError(SessionError):
    """Raised when no local repository manager can serve a local repository."""

    def __init__(self, local_repository, message: str = ""):
        super().__init__(
            message or f"No manager available for local repository {local_repository}"
        )
        self.local_repository = local_repository


class SessionReadOnlyError(SessionError):
    """Raised when a finished session is modified."""

    def __init__(self, attribute: str):
        super().__init__(f"Session is read-only, cannot set '{attribute}'")
        self.attribute = attribute
