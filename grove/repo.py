"""Repository layout, creation and discovery."""

import logging
import zlib
from pathlib import Path

from grove.errors import RepositoryNotFoundError
from grove.objects import ObjectStore
from grove.refs import References
from grove.revisions import RevisionResolver

logger = logging.getLogger(__name__)

STORE_MARKER = ".git"


class Repository:
    """A working directory and its object store."""

    def __init__(self, root: Path, compression_level: int = zlib.Z_DEFAULT_COMPRESSION):
        self.root = root
        self.store_root = root / STORE_MARKER
        self.store = ObjectStore(self.store_root / "objects", compression_level)
        self.refs = References(self.store_root)
        self.revisions = RevisionResolver(self.store)

    @classmethod
    def discover(cls, start: Path, compression_level: int = zlib.Z_DEFAULT_COMPRESSION) -> "Repository":
        """Find the nearest enclosing repository.

        Raises:
            RepositoryNotFoundError: no ancestor of ``start`` holds a store
        """
        start = start.resolve()

        for candidate in [start, *start.parents]:
            if (candidate / STORE_MARKER).is_dir():
                return cls(candidate, compression_level)

        raise RepositoryNotFoundError(f"Not a repository (or any parent up to /): {start}")


def init_repository(root: Path, branch: str) -> Repository:
    """Create the store layout for a new repository.

    Running it again on an existing repository only rewrites ``HEAD``.

    Args:
        root: Working directory root
        branch: Branch that ``HEAD`` points to
    """
    logger.info("Initializing repo %s with branch %s", root, branch)

    store_root = root / STORE_MARKER
    for dir_path in ["objects", "refs/heads"]:
        (store_root / dir_path).mkdir(parents=True, exist_ok=True)

    (store_root / "HEAD").write_text(f"ref: refs/heads/{branch}")

    return Repository(root)
