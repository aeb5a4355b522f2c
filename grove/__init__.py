"""Grove - Content-addressed object store and revision resolver."""

__version__ = "0.1.0"

from grove.codec import Blob, Commit, Mode, Tree, TreeEntry, decode, encode, hash_of
from grove.objects import ObjectStore
from grove.refs import References
from grove.repo import Repository, init_repository
from grove.revisions import RevisionResolver

__all__ = [
    "Blob",
    "Commit",
    "Mode",
    "Tree",
    "TreeEntry",
    "decode",
    "encode",
    "hash_of",
    "ObjectStore",
    "References",
    "Repository",
    "init_repository",
    "RevisionResolver",
]
