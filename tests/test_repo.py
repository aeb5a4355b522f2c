"""Tests for repository creation and discovery."""

import pytest

from grove.errors import RepositoryNotFoundError
from grove.repo import Repository, init_repository


def test_init_repository(tmp_path):
    root = tmp_path / "project"
    repo = init_repository(root, "bestbranch")

    assert (root / ".git" / "HEAD").read_text() == "ref: refs/heads/bestbranch"
    assert (root / ".git" / "objects").is_dir()
    assert (root / ".git" / "refs" / "heads").is_dir()
    assert repo.store_root == root / ".git"


def test_init_repository_is_idempotent(tmp_path):
    repo = init_repository(tmp_path, "main")
    identifier = "d670460b4b4aece5915caf5c68d12f560a9fe3e4"
    repo.store.put(identifier, b"blob 13\0test content\n")

    init_repository(tmp_path, "main")

    assert repo.store.exists(identifier)
    assert (tmp_path / ".git" / "HEAD").read_text() == "ref: refs/heads/main"


def test_discover_from_subdirectory(tmp_path):
    init_repository(tmp_path, "main")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    repo = Repository.discover(nested)

    assert repo.root == tmp_path.resolve()


def test_discover_not_found(tmp_path):
    with pytest.raises(RepositoryNotFoundError):
        Repository.discover(tmp_path)
