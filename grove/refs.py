"""Reference resolution and enumeration."""

import logging
from pathlib import Path

import pathspec

from grove.errors import ReferenceCycleError, ReferenceNotFoundError, StorageError
from grove.util import safe_path_join

logger = logging.getLogger(__name__)

SYMBOLIC_PREFIX = "ref: "
NAMESPACES = ("heads", "remotes", "tags")
MAX_REF_DEPTH = 10


class References:
    """Named pointers stored as small text files under the store root."""

    def __init__(self, store_root: Path):
        self.store_root = store_root

    def read(self, name: str) -> str:
        """Read the trimmed content of a reference file."""
        path = safe_path_join(self.store_root, name)

        if path is None or not path.is_file():
            raise ReferenceNotFoundError(name)

        try:
            return path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read reference {name}: {e}") from e

    def resolve(self, name: str) -> str:
        """Follow symbolic references until a literal identifier is found.

        Raises:
            ReferenceNotFoundError: a reference in the chain does not exist
            ReferenceCycleError: the chain loops or exceeds MAX_REF_DEPTH hops
        """
        chain = [name]

        while True:
            content = self.read(chain[-1])
            if not content.startswith(SYMBOLIC_PREFIX):
                return content

            target = content[len(SYMBOLIC_PREFIX):].strip()
            logger.debug("Reference %s -> %s", chain[-1], target)

            if target in chain or len(chain) > MAX_REF_DEPTH:
                raise ReferenceCycleError(chain + [target])
            chain.append(target)

    def iter_names(self, namespace: str) -> list[str]:
        """List reference names stored under ``refs/<namespace>``."""
        root = self.store_root / "refs" / namespace

        if not root.is_dir():
            return []

        return sorted(
            path.relative_to(self.store_root).as_posix()
            for path in root.rglob("*")
            if path.is_file()
        )

    def list_refs(self, patterns: list[str] | None = None) -> list[tuple[str, str]]:
        """Resolve every reference in the standard namespaces.

        Args:
            patterns: Optional gitwildmatch patterns; a name is kept if any matches

        Returns:
            (name, identifier) pairs sorted by name
        """
        spec = pathspec.PathSpec.from_lines("gitwildmatch", patterns) if patterns else None

        found = []
        for namespace in NAMESPACES:
            for name in self.iter_names(namespace):
                if spec is not None and not spec.match_file(name):
                    continue
                found.append((name, self.resolve(name)))

        return sorted(found)
