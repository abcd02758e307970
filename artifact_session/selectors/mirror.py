"""Mirror selection for remote repositories.

A mirror's ``mirror_of`` pattern is a comma-separated list of tokens:

- ``*`` matches any repository
- ``external:*`` matches any repository not on the local machine
- ``<id>`` matches the repository with that id
- ``!<id>`` excludes the repository with that id, even if another
  token in the same pattern matches it

``mirror_of_layouts`` uses the same positive/negative form against the
repository layout. When several mirrors match, one naming the repository
id outranks one matched by a wildcard; ties go to the earliest mirror.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from ..common.logger import get_logger
from ..repository.base import Mirror, RemoteRepository, is_external_url

logger = get_logger("mirror_selector")

WILDCARD = "*"
EXTERNAL_WILDCARD = "external:*"

# Match ranks, higher wins
NO_MATCH = 0
WILDCARD_MATCH = 1
EXACT_MATCH = 2


def _split_tokens(pattern: Optional[str]) -> Tuple[str, ...]:
    if not pattern:
        return ()
    return tuple(token.strip() for token in pattern.split(",") if token.strip())


def _is_negated(token: str) -> bool:
    return len(token) > 1 and token.startswith("!")


def match_pattern(
    pattern: Optional[str], repository_id: str, external: bool = True
) -> int:
    """Rank how a ``mirror_of`` pattern matches a repository id.

    Args:
        pattern: Comma-separated mirror_of pattern
        repository_id: Id of the repository being matched
        external: Whether the repository lives off the local machine

    Returns:
        EXACT_MATCH, WILDCARD_MATCH or NO_MATCH
    """
    rank = NO_MATCH
    for token in _split_tokens(pattern):
        if _is_negated(token):
            if token[1:] == repository_id:
                return NO_MATCH
        elif token == repository_id:
            rank = EXACT_MATCH
        elif token == WILDCARD or (token == EXTERNAL_WILDCARD and external):
            rank = max(rank, WILDCARD_MATCH)
    return rank


def match_layout(pattern: Optional[str], layout: str) -> bool:
    """Check a repository layout against a ``mirror_of_layouts`` pattern.

    An empty pattern matches every layout.
    """
    tokens = _split_tokens(pattern)
    if not tokens:
        return True

    matched = False
    for token in tokens:
        if _is_negated(token):
            if token[1:] == layout:
                return False
        elif token == WILDCARD or token == layout:
            matched = True
    return matched


@dataclass(frozen=True)
class MirrorSelector:
    """Immutable ordered list of mirror rules."""

    mirrors: Tuple[Mirror, ...] = ()

    @classmethod
    def from_mirrors(cls, mirrors: Iterable[Mirror]) -> "MirrorSelector":
        """Build a selector from mirror definitions in registration order."""
        return cls(tuple(mirrors))

    def add(
        self,
        id: str,
        url: str,
        layout: str,
        mirror_of: str,
        mirror_of_layouts: Optional[str] = None,
        blocked: bool = False,
    ) -> "MirrorSelector":
        """Return a new selector with one more mirror appended."""
        mirror = Mirror(
            id=id,
            url=url,
            layout=layout,
            mirror_of=mirror_of,
            mirror_of_layouts=mirror_of_layouts,
            blocked=blocked,
        )
        return MirrorSelector(self.mirrors + (mirror,))

    def match(
        self,
        repository_id: str,
        repository_layout: str,
        repository_url: Optional[str] = None,
    ) -> Optional[Mirror]:
        """Find the mirror bound to a repository.

        Args:
            repository_id: Id of the repository
            repository_layout: Layout of the repository
            repository_url: Repository URL, used for ``external:*``; a
                repository without a URL counts as external

        Returns:
            The best matching Mirror or None
        """
        if not repository_id:
            return None

        external = is_external_url(repository_url)
        best: Optional[Mirror] = None
        best_rank = NO_MATCH
        for mirror in self.mirrors:
            rank = match_pattern(mirror.mirror_of, repository_id, external)
            if rank <= best_rank:
                continue
            if not match_layout(mirror.mirror_of_layouts, repository_layout):
                continue
            best, best_rank = mirror, rank
            if rank == EXACT_MATCH:
                break
        return best

    def get_mirror(self, repository: RemoteRepository) -> Optional[RemoteRepository]:
        """Return the mirrored form of a repository, or None if unmirrored."""
        mirror = self.match(repository.id, repository.layout, repository.url)
        if mirror is None:
            return None

        logger.debug(f"Repository {repository.id} is mirrored by {mirror.id}")
        return replace(
            repository,
            id=mirror.id,
            url=mirror.url,
            layout=mirror.layout or repository.layout,
            mirrored_from=repository,
            proxy=None,
            authentication=None,
            blocked=mirror.blocked,
        )
