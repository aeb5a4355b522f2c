"""Tests for the plumbing operations."""

import pytest

from conftest import BLOB_MORE, CHILD_COMMIT, ROOT_COMMIT, TREE
from grove.codec import Commit, encode, hash_of
from grove.commands import cat_object, hash_object, log, show_refs
from grove.errors import InvalidUtf8Error, ObjectNotFoundError


def test_hash_object_without_repo():
    assert hash_object(b"test content\n") == "d670460b4b4aece5915caf5c68d12f560a9fe3e4"


def test_hash_object_does_not_write_without_repo(repo):
    identifier = hash_object(b"fresh content")
    assert not repo.store.exists(identifier)


def test_hash_object_write(repo):
    """Test a written blob can be read back."""
    identifier = hash_object(b"brand new\n", repo)

    assert repo.store.exists(identifier)
    assert cat_object(repo, identifier) == "brand new\n\n"
    assert cat_object(repo, identifier[:7]) == "brand new\n\n"


def test_hash_object_write_twice(repo):
    first = hash_object(b"twice", repo)
    second = hash_object(b"twice", repo)

    assert first == second
    assert repo.store.list_shard(first[:2]) == [first[2:]]
    assert cat_object(repo, first) == "twice\n"


@pytest.mark.parametrize("rev, expected", [
    ("d670", "test content\n\n"),
    ("d67046", "test content\n\n"),
    ("1234567890", "more content\nfrom a good client\n"),
])
def test_cat_blob(repo, rev, expected):
    assert cat_object(repo, rev) == expected


def test_cat_blob_invalid_utf8(repo):
    identifier = "abcd" + "0" * 36
    repo.store.put(identifier, b"blob 2\0\xff\xfe")

    with pytest.raises(InvalidUtf8Error):
        cat_object(repo, identifier)


def test_cat_tree(repo):
    assert cat_object(repo, TREE) == (
        "100644 blob d670460b4b4aece5915caf5c68d12f560a9fe3e4    test.txt\n"
        "100644 blob 1234567890abcdef1234567890abcdef12345678    more.txt\n"
    )


def test_cat_tree_labels(repo):
    content = (
        b"40000 src\0" + b"\x01" * 20
        + b"120000 link\0" + b"\x02" * 20
        + b"160000 vendor\0" + b"\x03" * 20
    )
    identifier = "eeee" + "0" * 36
    repo.store.put(identifier, b"tree %d\0" % len(content) + content)

    assert cat_object(repo, identifier) == (
        " 40000 tree " + "01" * 20 + "    src\n"
        "120000 symlink " + "02" * 20 + "    link\n"
        "160000 submodule " + "03" * 20 + "    vendor\n"
    )


def test_cat_commit(repo):
    assert cat_object(repo, ROOT_COMMIT) == (
        "tree: 99887766554433221100aabbccddeeff00112233\n"
        "parent: \n"
        "author: Bob <hello@bob.test>\n"
        "committer: Alice <bye@alice.test>\n"
        "\n"
        "This is a good commit\n"
    )


def test_cat_merge_commit(repo):
    commit = Commit(tree=TREE, parents=(ROOT_COMMIT, CHILD_COMMIT), author="a", committer="c", message="Merge")
    identifier = hash_of(commit)
    repo.store.put(identifier, encode(commit))

    output = cat_object(repo, identifier)

    assert f"parent: {ROOT_COMMIT}\nparent: {CHILD_COMMIT}\n" in output


def test_cat_missing(repo):
    with pytest.raises(ObjectNotFoundError):
        cat_object(repo, "hello")


def test_log(repo):
    assert log(repo, CHILD_COMMIT) == (
        'cccccc - Here is a better commit - "Sherlock Holmes <sherlock@baker.street>"\n'
        'aaaaaa - This is a good commit - "Alice <bye@alice.test>"\n'
    )


def test_log_uses_resolved_identifier(repo):
    output = log(repo, "cccc", abbrev=10)
    assert output.splitlines()[0].startswith("cccccccccc - ")


def test_log_non_commit(repo):
    assert log(repo, BLOB_MORE) == ""


def test_show_refs(repo):
    (repo.store_root / "refs" / "heads" / "main").write_text(CHILD_COMMIT + "\n")
    (repo.store_root / "refs" / "tags").mkdir()
    (repo.store_root / "refs" / "tags" / "v1").write_text("ref: refs/heads/main\n")

    assert show_refs(repo) == (
        f"{CHILD_COMMIT} refs/heads/main\n"
        f"{CHILD_COMMIT} refs/tags/v1\n"
    )
    assert show_refs(repo, ["v1"]) == f"{CHILD_COMMIT} refs/tags/v1\n"


def test_show_refs_empty(repo):
    assert show_refs(repo) == ""
