"""Revision resolution: short and full identifiers to stored objects."""

import logging

from grove.codec import GitObject, decode
from grove.digest import is_hex
from grove.errors import AmbiguousReferenceError, ObjectNotFoundError
from grove.objects import SHARD_LENGTH, ObjectStore

logger = logging.getLogger(__name__)

# Shorter prefixes collide in any non-trivial store
MIN_PREFIX_LENGTH = 4


class RevisionResolver:
    """Maps a revision string to exactly one stored object."""

    def __init__(self, store: ObjectStore):
        self.store = store

    def candidates(self, rev: str) -> list[str]:
        """Full identifiers of stored objects whose identifier starts with ``rev``."""
        if len(rev) < MIN_PREFIX_LENGTH or not is_hex(rev):
            return []

        shard, suffix = rev[:SHARD_LENGTH], rev[SHARD_LENGTH:]
        return [
            shard + name
            for name in self.store.list_shard(shard)
            if name.startswith(suffix)
        ]

    def resolve_id(self, rev: str) -> str:
        """Resolve a revision to a single full identifier.

        Raises:
            ObjectNotFoundError: nothing matches
            AmbiguousReferenceError: several objects match
        """
        candidates = self.candidates(rev)

        if len(candidates) == 1:
            logger.debug("Resolved %s to %s", rev, candidates[0])
            return candidates[0]
        if not candidates:
            raise ObjectNotFoundError("Object not found")
        raise AmbiguousReferenceError(candidates)

    def resolve(self, rev: str) -> GitObject:
        """Resolve a revision and decode the object it names."""
        return decode(self.store.get(self.resolve_id(rev)))
