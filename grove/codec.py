"""Object model and canonical codec.

Every object is stored as ``<type> <length>\\0<content>``. Only the content
differs between kinds:

- blob: raw payload
- tree: ``<mode> <name>\\0<20 byte digest>`` per entry
- commit: ``key value`` header lines, an empty line, then the message
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from grove.digest import frame, hash_content
from grove.errors import (
    InvalidUtf8Error,
    LengthMismatchError,
    MalformedCommitLineError,
    MalformedHeaderError,
    MalformedTreeEntryError,
    UnknownObjectTypeError,
)

DIGEST_SIZE = 20


class Mode(str, Enum):
    """Tree entry mode."""

    NORMAL = "100644"
    EXECUTABLE = "100755"
    SYMLINK = "120000"
    TREE = "40000"
    SUBMODULE = "160000"

    @property
    def type_label(self) -> str:
        """Object type shown next to an entry in listings."""
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    Mode.NORMAL: "blob",
    Mode.EXECUTABLE: "blob",
    Mode.SYMLINK: "symlink",
    Mode.TREE: "tree",
    Mode.SUBMODULE: "submodule",
}


@dataclass(frozen=True)
class Blob:
    """Opaque file content."""

    type_name: ClassVar[str] = "blob"

    data: bytes = b""

    def content(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class TreeEntry:
    mode: Mode
    name: str
    id: str

    @property
    def type_label(self) -> str:
        return self.mode.type_label


@dataclass(frozen=True)
class Tree:
    """Directory listing; entries keep the order they were read in."""

    type_name: ClassVar[str] = "tree"

    entries: tuple[TreeEntry, ...] = ()

    def content(self) -> bytes:
        parts = []
        for entry in self.entries:
            parts.append(f"{entry.mode.value} {entry.name}\0".encode("utf-8"))
            parts.append(bytes.fromhex(entry.id))
        return b"".join(parts)


# Headers emitted by the encoder, in this order. The decoder accepts any order.
COMMIT_KEYS = ("tree", "parent", "author", "committer", "encoding")


@dataclass(frozen=True)
class Commit:
    """Commit metadata.

    ``parents`` keeps every ``parent`` header in the order it appeared;
    an empty tuple marks a root commit.
    """

    type_name: ClassVar[str] = "commit"

    tree: str = ""
    parents: tuple[str, ...] = field(default_factory=tuple)
    author: str = ""
    committer: str = ""
    encoding: str = ""
    message: str = ""

    @property
    def parent(self) -> str:
        """First parent, or an empty string for a root commit."""
        return self.parents[0] if self.parents else ""

    @property
    def summary(self) -> str:
        """First line of the message."""
        return self.message.split("\n", 1)[0].removesuffix("\r")

    def content(self) -> bytes:
        lines = []
        if self.tree:
            lines.append(f"tree {self.tree}")
        for parent in self.parents:
            lines.append(f"parent {parent}")
        if self.author:
            lines.append(f"author {self.author}")
        if self.committer:
            lines.append(f"committer {self.committer}")
        if self.encoding:
            lines.append(f"encoding {self.encoding}")
        lines.append("")
        lines.append(self.message)
        return "\n".join(lines).encode("utf-8")


GitObject = Union[Blob, Tree, Commit]


def encode(obj: GitObject) -> bytes:
    """Canonical byte encoding of an object."""
    return frame(obj.type_name, obj.content())


def hash_of(obj: GitObject) -> str:
    """Content identifier of an object."""
    return hash_content(obj.type_name, obj.content())


def parse_header(data: bytes) -> tuple[str, int, int]:
    """Parse the ``<type> <length>\\0`` header.

    Returns:
        (object_type, declared_length, index_of_null_byte)
    """
    space_index = data.find(b" ")
    null_index = data.find(b"\0")
    if space_index < 0 or null_index < 0:
        raise MalformedHeaderError("Incorrect header format")

    object_type = data[:space_index].decode("ascii", errors="replace")
    size_token = data[space_index + 1:null_index]
    if not size_token.isdigit():
        raise MalformedHeaderError(f"Invalid object length: {size_token!r}")

    return object_type, int(size_token), null_index


def decode(data: bytes) -> GitObject:
    """Parse canonical object bytes into a typed object."""
    object_type, size, header_end = parse_header(data)

    view = memoryview(data)[header_end + 1:]
    if len(view) != size:
        raise LengthMismatchError("Incorrect header length")

    if object_type == "blob":
        return Blob(bytes(view))
    if object_type == "tree":
        return _decode_tree(data, header_end + 1)
    if object_type == "commit":
        return _decode_commit(view)
    raise UnknownObjectTypeError("Unknown object type")


def _decode_tree(data: bytes, start: int) -> Tree:
    entries = []
    pos = start
    end = len(data)

    while pos < end:
        space = data.find(b" ", pos)
        if space < 0:
            raise MalformedTreeEntryError("Failed to read mode")
        try:
            mode = Mode(data[pos:space].decode("ascii"))
        except (UnicodeDecodeError, ValueError):
            raise MalformedTreeEntryError("Failed to parse mode") from None

        null = data.find(b"\0", space + 1)
        if null <= space + 1:
            raise MalformedTreeEntryError("Failed to read file name")
        try:
            name = data[space + 1:null].decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(f"Invalid file name: {e}") from e

        digest_start = null + 1
        digest_end = digest_start + DIGEST_SIZE
        if digest_end > end:
            raise MalformedTreeEntryError("Failed to read hash")

        entries.append(TreeEntry(mode, name, data[digest_start:digest_end].hex()))
        pos = digest_end

    return Tree(tuple(entries))


def _decode_commit(view: memoryview) -> Commit:
    try:
        text = str(view, "utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(f"Invalid commit content: {e}") from e

    fields: dict[str, str] = {}
    parents = []
    message = ""
    pos = 0

    while pos < len(text):
        newline = text.find("\n", pos)
        line_end = len(text) if newline < 0 else newline
        line = text[pos:line_end].removesuffix("\r")
        pos = line_end + 1

        if not line:
            # Everything after the first empty line is the message, kept verbatim
            message = text[pos:]
            break
        key, sep, value = line.partition(" ")
        if not sep:
            raise MalformedCommitLineError("Invalid line")
        if key == "parent":
            if value:
                parents.append(value)
        elif key in COMMIT_KEYS:
            fields[key] = value
        # Unknown headers (gpgsig, mergetag, ...) are skipped

    return Commit(parents=tuple(parents), message=message, **fields)
