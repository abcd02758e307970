"""Repository session assembly.

Turns a build request's raw repository settings into a read-only
session: merged properties, cache and update policies, the local
repository manager, and selectors for mirrors, proxies and credentials.
"""

from .base import (
    BuildRequest,
    DecryptionProblem,
    DecryptionResult,
    RepositoryEvent,
    RepositorySession,
)
from .builder import SessionBuilder, new_repository_session
from .injector import RepositoryInjector
from .policy import (
    CACHE_ALL,
    CACHE_DISABLED,
    CACHE_NOT_FOUND,
    CACHE_TRANSFER_ERROR,
    ResolutionErrorPolicy,
    compose_error_policy,
    update_policy,
)

__all__ = [
    "BuildRequest",
    "DecryptionProblem",
    "DecryptionResult",
    "RepositoryEvent",
    "RepositorySession",
    "SessionBuilder",
    "new_repository_session",
    "RepositoryInjector",
    "CACHE_ALL",
    "CACHE_DISABLED",
    "CACHE_NOT_FOUND",
    "CACHE_TRANSFER_ERROR",
    "ResolutionErrorPolicy",
    "compose_error_policy",
    "update_policy",
]
