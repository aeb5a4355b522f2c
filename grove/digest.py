"""Canonical object framing and content identifiers."""

import hashlib


def frame(object_type: str, content: bytes) -> bytes:
    """Prefix content with its ``<type> <length>\\0`` header."""
    return f"{object_type} {len(content)}\0".encode("ascii") + content


def compute_digest(data: bytes) -> str:
    """Compute the SHA-1 identifier of canonical object bytes.

    Args:
        data: Full canonical encoding (header and content)

    Returns:
        40 character lowercase hex digest
    """
    hasher = hashlib.sha1()
    hasher.update(data)
    return hasher.hexdigest()


def hash_content(object_type: str, content: bytes) -> str:
    """Identifier of an object given its type and raw content."""
    return compute_digest(frame(object_type, content))


def is_hex(value: str) -> bool:
    return all(c in "0123456789abcdef" for c in value)
