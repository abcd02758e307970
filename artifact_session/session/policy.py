"""Resolution error and update policies derived from request flags."""

from dataclasses import dataclass
from typing import Optional, Tuple

# Resolution error policy bits
CACHE_DISABLED = 0x00
CACHE_TRANSFER_ERROR = 0x01
CACHE_NOT_FOUND = 0x02
CACHE_ALL = CACHE_NOT_FOUND | CACHE_TRANSFER_ERROR

UPDATE_POLICY_NEVER = "never"
UPDATE_POLICY_ALWAYS = "always"


@dataclass(frozen=True)
class ResolutionErrorPolicy:
    """Caching of failed artifact and metadata lookups.

    ``base_policy`` applies to artifact lookups; ``fallback_policy``
    applies to metadata lookups and always caches "not found" outcomes.
    """

    base_policy: int = CACHE_NOT_FOUND
    fallback_policy: int = CACHE_NOT_FOUND

    @property
    def caches_not_found(self) -> bool:
        return bool(self.base_policy & CACHE_NOT_FOUND)

    @property
    def caches_transfer_error(self) -> bool:
        return bool(self.base_policy & CACHE_TRANSFER_ERROR)


def compose_error_policy(
    cache_not_found: bool, cache_transfer_error: bool
) -> Tuple[int, int]:
    """Compose the base and fallback resolution error policies.

    Args:
        cache_not_found: Cache "not found" outcomes
        cache_transfer_error: Cache transfer failures

    Returns:
        Tuple of (base_policy, fallback_policy); the fallback always
        includes CACHE_NOT_FOUND
    """
    policy = CACHE_DISABLED
    policy |= CACHE_NOT_FOUND if cache_not_found else CACHE_DISABLED
    policy |= CACHE_TRANSFER_ERROR if cache_transfer_error else CACHE_DISABLED
    return policy, policy | CACHE_NOT_FOUND


def new_error_policy(
    cache_not_found: bool, cache_transfer_error: bool
) -> ResolutionErrorPolicy:
    base, fallback = compose_error_policy(cache_not_found, cache_transfer_error)
    return ResolutionErrorPolicy(base_policy=base, fallback_policy=fallback)


def update_policy(no_snapshot_updates: bool, update_snapshots: bool) -> Optional[str]:
    """Pick the snapshot update policy, or None for the engine default.

    ``no_snapshot_updates`` takes precedence when both flags are set.
    """
    if no_snapshot_updates:
        return UPDATE_POLICY_NEVER
    elif update_snapshots:
        return UPDATE_POLICY_ALWAYS
    return None
