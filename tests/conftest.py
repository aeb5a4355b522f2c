"""Shared fixtures for Grove tests."""

import zlib
from pathlib import Path

import pytest

from grove.repo import Repository, init_repository

BLOB_TEST = "d670460b4b4aece5915caf5c68d12f560a9fe3e4"
BLOB_MORE = "1234567890abcdef1234567890abcdef12345678"
TREE = "99887766554433221100aabbccddeeff00112233"
ROOT_COMMIT = "aaaaaaaaaaaaaaaaaaaabbbbbbbbbbbbbbbbbbbb"
CHILD_COMMIT = "ccccccccccccccccccccdddddddddddddddddddd"


def write_compressed_object(root: Path, identifier: str, data: bytes) -> None:
    """Store raw canonical bytes under an arbitrary identifier."""
    path = root / ".git" / "objects" / identifier[:2] / identifier[2:]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(zlib.compress(data))


def create_blob(root: Path, identifier: str, content: str) -> None:
    data = content.encode("utf-8")
    write_compressed_object(root, identifier, b"blob %d\0" % len(data) + data)


def create_tree(root: Path, identifier: str, entries: list[tuple[str, str, str]]) -> None:
    """Entries are (mode, name, hex identifier)."""
    content = b"".join(
        f"{mode} {name}\0".encode("utf-8") + bytes.fromhex(child)
        for mode, name, child in entries
    )
    write_compressed_object(root, identifier, b"tree %d\0" % len(content) + content)


def create_commit(
    root: Path,
    identifier: str,
    tree: str,
    parent: str,
    author: str,
    committer: str,
    message: str,
) -> None:
    # Headers deliberately out of canonical order
    content = (
        f"tree {tree}\n"
        f"encoding \n"
        f"committer {committer}\n"
        f"author {author}\n"
        f"parent {parent}\n"
        f"\n"
        f"{message}"
    ).encode("utf-8")
    write_compressed_object(root, identifier, b"commit %d\0" % len(content) + content)


@pytest.fixture
def repo(tmp_path):
    """Repository seeded with two blobs, a tree and a two commit chain."""
    root = tmp_path / "repo"
    init_repository(root, "main")

    create_blob(root, BLOB_TEST, "test content\n")
    create_blob(root, BLOB_MORE, "more content\nfrom a good client")
    create_tree(root, TREE, [
        ("100644", "test.txt", BLOB_TEST),
        ("100644", "more.txt", BLOB_MORE),
    ])
    create_commit(
        root,
        ROOT_COMMIT,
        tree=TREE,
        parent="",
        author="Bob <hello@bob.test>",
        committer="Alice <bye@alice.test>",
        message="This is a good commit",
    )
    create_commit(
        root,
        CHILD_COMMIT,
        tree=TREE,
        parent=ROOT_COMMIT,
        author="Captain Nemo <nemo@nautilus.sea>",
        committer="Sherlock Holmes <sherlock@baker.street>",
        message="Here is a better commit",
    )

    return Repository(root)
