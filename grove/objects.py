"""Compressed, content-addressed object store."""

import logging
import zlib
from pathlib import Path

from grove.errors import ObjectNotFoundError, StorageError
from grove.util import atomic_write

logger = logging.getLogger(__name__)

SHARD_LENGTH = 2


class ObjectStore:
    """Zlib-compressed objects sharded by the first two hex characters."""

    def __init__(self, store_path: Path, compression_level: int = zlib.Z_DEFAULT_COMPRESSION):
        """Initialize object store rooted at an ``objects`` directory."""
        self.store_path = store_path
        self.compression_level = compression_level

    def get_object_path(self, identifier: str) -> Path:
        """Get path for an object by identifier."""
        return self.store_path / identifier[:SHARD_LENGTH] / identifier[SHARD_LENGTH:]

    def exists(self, identifier: str) -> bool:
        """Check if an object exists."""
        return self.get_object_path(identifier).is_file()

    def get(self, identifier: str) -> bytes:
        """Read and inflate the canonical bytes of an object."""
        path = self.get_object_path(identifier)

        try:
            compressed = path.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFoundError("Object not found") from None
        except OSError as e:
            raise StorageError(f"Could not read object {identifier}: {e}") from e

        try:
            return zlib.decompress(compressed)
        except zlib.error as e:
            raise StorageError(f"Corrupt object {identifier}: {e}") from e

    def put(self, identifier: str, data: bytes) -> None:
        """Compress and write canonical bytes under an identifier.

        Note: Caller is responsible for ensuring identifier matches data.
        """
        path = self.get_object_path(identifier)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(path, zlib.compress(data, self.compression_level))
        except OSError as e:
            raise StorageError(f"Could not write object {identifier}: {e}") from e

        logger.debug("Wrote object %s (%d bytes)", identifier, len(data))

    def list_shard(self, prefix: str) -> list[str]:
        """List object file names stored under a two character shard.

        Returns:
            Sorted identifier suffixes, empty if the shard does not exist
        """
        shard = self.store_path / prefix

        if not shard.is_dir():
            return []

        try:
            names = [
                path.name
                for path in shard.iterdir()
                if path.is_file() and not path.name.endswith(".tmp")
            ]
        except OSError as e:
            raise StorageError(f"Could not list shard {prefix}: {e}") from e

        logger.debug("Shard %s holds %d objects", prefix, len(names))
        return sorted(names)

