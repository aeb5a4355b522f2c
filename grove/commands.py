"""Plumbing operations returning text ready for output."""

from grove.codec import Blob, Commit, Tree, encode, hash_of
from grove.errors import InvalidUtf8Error
from grove.history import walk_history
from grove.repo import Repository


def hash_object(data: bytes, repo: Repository | None = None) -> str:
    """Compute the blob identifier of data, storing it when a repository is given."""
    blob = Blob(data)
    identifier = hash_of(blob)

    if repo is not None and not repo.store.exists(identifier):
        repo.store.put(identifier, encode(blob))

    return identifier


def cat_object(repo: Repository, rev: str) -> str:
    """Pretty-print the object a revision names."""
    obj = repo.revisions.resolve(rev)

    if isinstance(obj, Blob):
        try:
            return obj.data.decode("utf-8") + "\n"
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(f"Blob is not valid UTF-8: {e}") from e

    if isinstance(obj, Tree):
        return "".join(
            f"{entry.mode.value:>6} {entry.type_label:>4} {entry.id:43} {entry.name}\n"
            for entry in obj.entries
        )

    if isinstance(obj, Commit):
        lines = [f"tree: {obj.tree}"]
        lines.extend(f"parent: {parent}" for parent in obj.parents or [""])
        lines.append(f"author: {obj.author}")
        lines.append(f"committer: {obj.committer}")
        lines.append("")
        lines.append(obj.message)
        return "\n".join(lines) + "\n"

    raise TypeError(f"Unhandled object kind: {type(obj).__name__}")


def log(repo: Repository, rev: str, abbrev: int = 6) -> str:
    """One line per commit, newest first."""
    return "".join(
        f'{entry.short_id(abbrev)} - {entry.summary} - "{entry.committer}"\n'
        for entry in walk_history(repo.revisions, rev)
    )


def show_refs(repo: Repository, patterns: list[str] | None = None) -> str:
    """List references as ``<identifier> <name>`` lines sorted by name."""
    return "".join(
        f"{identifier} {name}\n"
        for name, identifier in repo.refs.list_refs(patterns)
    )
