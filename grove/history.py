"""Commit history traversal."""

from collections.abc import Iterator
from dataclasses import dataclass

from grove.codec import Commit, decode
from grove.revisions import RevisionResolver


@dataclass(frozen=True)
class LogEntry:
    id: str
    summary: str
    committer: str

    def short_id(self, length: int = 6) -> str:
        return self.id[:length]


def walk_history(resolver: RevisionResolver, rev: str) -> Iterator[LogEntry]:
    """Yield one entry per commit, following first parents back to the root.

    Stops silently when the revision names a blob or a tree.
    """
    next_rev = rev

    while True:
        identifier = resolver.resolve_id(next_rev)
        obj = decode(resolver.store.get(identifier))
        if not isinstance(obj, Commit):
            return

        yield LogEntry(identifier, obj.summary, obj.committer)

        if not obj.parent:
            return
        next_rev = obj.parent
